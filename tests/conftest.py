"""Shared fixtures for layout tests."""

from __future__ import annotations

import pytest

from configurator.models import (
    Alignment, Building, BuildingDimensions, FeaturePosition, FeatureType,
    WallFeature, WallPosition,
)


def _make_feature(
    wall: WallPosition = WallPosition.FRONT,
    alignment: Alignment = Alignment.CENTER,
    x_offset: float = 0.0,
    y_offset: float = 0.0,
    width: float = 10.0,
    height: float = 10.0,
    type: FeatureType = FeatureType.ROLLUP_DOOR,
    id: str = "f1",
) -> WallFeature:
    """Create a test feature."""
    return WallFeature(
        id=id,
        type=type,
        width=width,
        height=height,
        position=FeaturePosition(
            wall_position=wall,
            x_offset=x_offset,
            y_offset=y_offset,
            alignment=alignment,
        ),
    )


@pytest.fixture
def dims() -> BuildingDimensions:
    """The 40 x 60 x 14, 4:12 reference building."""
    return BuildingDimensions(width=40, length=60, height=14, roof_pitch=4)


@pytest.fixture
def flat_dims() -> BuildingDimensions:
    return BuildingDimensions(width=40, length=60, height=14, roof_pitch=0)


@pytest.fixture
def building(dims: BuildingDimensions) -> Building:
    return Building(dimensions=dims)


@pytest.fixture
def make_feature():
    """Factory for WallFeature values; keyword arguments override defaults."""
    return _make_feature

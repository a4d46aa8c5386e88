"""Tests for the dimension & pitch solver."""

from __future__ import annotations

import math
import pytest

from configurator.core.solver import roof_height, solve_roof
from configurator.models import BuildingDimensions


def _dims(width: float, pitch: float, height: float = 14.0) -> BuildingDimensions:
    return BuildingDimensions(width=width, length=60, height=height, roof_pitch=pitch)


class TestReferenceBuilding:
    """40 x 60 x 14 at 4:12."""

    def test_roof_height(self, dims):
        assert solve_roof(dims).roof_height == pytest.approx(6.667, abs=1e-3)

    def test_total_height(self, dims):
        assert solve_roof(dims).total_height == pytest.approx(20.667, abs=1e-3)

    def test_panel_length(self, dims):
        assert solve_roof(dims).panel_length == pytest.approx(21.08, abs=1e-2)

    def test_pitch_angle(self, dims):
        assert solve_roof(dims).pitch_angle == pytest.approx(math.atan(4 / 12))


class TestFlatRoof:

    def test_zero_pitch_degenerates_cleanly(self):
        roof = solve_roof(_dims(40, 0))
        assert roof.roof_height == 0
        assert roof.pitch_angle == 0
        assert roof.panel_length == 20
        assert roof.total_height == 14


class TestPanelLength:

    @pytest.mark.parametrize("width", [1.0, 12.0, 30.0, 40.0, 75.5])
    @pytest.mark.parametrize("pitch", [0.0, 0.5, 1.0, 4.0, 6.0, 12.0])
    def test_never_shorter_than_half_width(self, width, pitch):
        roof = solve_roof(_dims(width, pitch))
        assert roof.panel_length >= width / 2
        if pitch == 0:
            assert roof.panel_length == width / 2
        else:
            assert roof.panel_length > width / 2

    def test_twelve_pitch_is_45_degrees(self):
        roof = solve_roof(_dims(20, 12))
        assert roof.roof_height == pytest.approx(10)
        assert roof.pitch_angle == pytest.approx(math.pi / 4)
        assert roof.panel_length == pytest.approx(10 * math.sqrt(2))


def test_roof_height_helper_matches_solver():
    assert roof_height(30, 4) == solve_roof(_dims(30, 4)).roof_height

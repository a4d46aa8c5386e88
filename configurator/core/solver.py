"""Dimension & pitch solver — roof quantities derived from width and pitch."""

from __future__ import annotations
import math

from configurator.models import BuildingDimensions, RoofGeometry


def roof_height(width: float, roof_pitch: float) -> float:
    """Vertical rise from eave to ridge. roof_pitch is rise per 12 of run."""
    return (width / 2) * (roof_pitch / 12)


def solve_roof(dimensions: BuildingDimensions) -> RoofGeometry:
    """
    Derive roof height, pitch angle, panel length and total height.

    A pitch of 0 yields a flat roof: two coplanar panels of width/2.
    """
    half_width = dimensions.width / 2
    rise = roof_height(dimensions.width, dimensions.roof_pitch)
    return RoofGeometry(
        roof_height=rise,
        pitch_angle=math.atan2(rise, half_width),
        panel_length=math.sqrt(half_width ** 2 + rise ** 2),
        total_height=dimensions.height + rise,
    )

"""Placement analysis — roof quantities and out-of-bounds checks."""

from __future__ import annotations
import logging

from configurator.models import (
    LayoutContext, LayoutWarning, WarningCode,
)
from configurator.core.placement import feature_extent
from configurator.core.solver import solve_roof
from configurator.core.walls import wall_frame

logger = logging.getLogger(__name__)

TOLERANCE = 1e-6


class PlacementAnalyzer:
    """Derives roof geometry and flags placements that leave their surface.

    Nothing is clamped or rejected here: a feature hanging past the wall
    edge or a skylight outside its panel is still laid out as requested,
    and a warning is attached to the layout.
    """

    def analyze(self, context: LayoutContext) -> None:
        """Run all analysis passes and populate the context."""
        context.roof = solve_roof(context.building.dimensions)
        context.warnings = self._check_features(context) + self._check_skylights(context)
        for w in context.warnings:
            logger.warning("%s: %s", w.code.value, w.message)

    def _check_features(self, context: LayoutContext) -> list[LayoutWarning]:
        warnings: list[LayoutWarning] = []
        dims = context.building.dimensions
        clearance = context.params.feature_clearance

        for feature in context.building.features:
            frame = wall_frame(feature.position.wall_position)
            half_wall = frame.wall_width(dims) / 2
            lo, hi = feature_extent(feature, dims, clearance)
            if lo < -half_wall - TOLERANCE or hi > half_wall + TOLERANCE:
                warnings.append(LayoutWarning(
                    code=WarningCode.FEATURE_OUT_OF_BOUNDS,
                    subject=feature.id,
                    message=(
                        f"feature {feature.id} spans [{lo:.3f}, {hi:.3f}] on the "
                        f"{frame.position.value} wall, which spans "
                        f"[{-half_wall:.3f}, {half_wall:.3f}]"
                    ),
                ))

            top = feature.position.y_offset + feature.height
            if top > dims.height + TOLERANCE:
                warnings.append(LayoutWarning(
                    code=WarningCode.FEATURE_ABOVE_EAVE,
                    subject=feature.id,
                    message=(
                        f"feature {feature.id} tops out at {top:.3f}, "
                        f"eave is at {dims.height:.3f}"
                    ),
                ))
        return warnings

    def _check_skylights(self, context: LayoutContext) -> list[LayoutWarning]:
        """Check each skylight against its panel's local extent.

        Panel choice is a strict sign test on x_offset; the skylight is
        interpreted in the panel's own frame, centered on the panel. Only
        the extent across the slope is checked; position along the ridge is
        left to the caller.
        """
        warnings: list[LayoutWarning] = []
        roof = context.roof_geometry
        half_panel = roof.panel_length / 2

        for index, skylight in enumerate(context.building.skylights):
            panel = "left" if skylight.x_offset < 0 else "right"
            across = abs(skylight.x_offset) + skylight.width / 2
            if across > half_panel + TOLERANCE:
                warnings.append(LayoutWarning(
                    code=WarningCode.SKYLIGHT_OUTSIDE_PANEL,
                    subject=str(index),
                    message=(
                        f"skylight {index} reaches {across:.3f} from the center of the "
                        f"{panel} panel, whose half length is {half_panel:.3f}"
                    ),
                ))
        return warnings

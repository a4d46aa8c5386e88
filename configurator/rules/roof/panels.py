"""Roof panels, ridge cap, and skylights.

All roof elements hang off a roof group at eave height. Each panel is
centered a quarter of the width out from the ridge and tilted by the
pitch angle about the ridge axis, so its outer edge lands on the wall top
and its inner edge on the ridge line. Skylights are children of their
panel and inherit its tilt.
"""

from __future__ import annotations

from configurator.rules.base import LayoutRule
from configurator.models import (
    LayoutContext, LayoutElement, ElementType, Shape, Size3D, Skylight, translate,
)

ROOF_ID = "roof"
LEFT_PANEL_ID = "roof.panel.left"
RIGHT_PANEL_ID = "roof.panel.right"
RIDGE_ID = "roof.ridge"


def panel_for(skylight: Skylight) -> str:
    """Panel a skylight belongs to: strictly negative x_offset is the left one."""
    return LEFT_PANEL_ID if skylight.x_offset < 0 else RIGHT_PANEL_ID


class RoofPanelRule(LayoutRule):
    """Two sloped panels meeting at a ridge cap."""

    priority = 40

    def get_id(self) -> str:
        return "roof.panels"

    def get_name(self) -> str:
        return "Roof Panels"

    def generate(self, context: LayoutContext) -> list[LayoutElement]:
        dims = context.building.dimensions
        roof = context.roof_geometry
        params = context.params
        color = context.building.roof_color

        elements: list[LayoutElement] = [LayoutElement(
            id=ROOF_ID,
            type=ElementType.ROOF,
            shape=Shape.GROUP,
            transform=translate(0.0, dims.height, 0.0),
        )]

        panel_size = Size3D(
            width=roof.panel_length,
            height=params.panel_thickness,
            depth=dims.length,
        )
        for panel_id, side, sign in ((LEFT_PANEL_ID, "left", -1), (RIGHT_PANEL_ID, "right", 1)):
            elements.append(LayoutElement(
                id=panel_id,
                type=ElementType.ROOF_PANEL,
                transform=translate(
                    sign * dims.width / 4, roof.roof_height / 2, 0.0,
                    rz=-sign * roof.pitch_angle,
                ),
                size=panel_size,
                parent=ROOF_ID,
                tags={"color": color, "side": side},
            ))

        elements.append(LayoutElement(
            id=RIDGE_ID,
            type=ElementType.RIDGE_CAP,
            transform=translate(0.0, roof.roof_height, 0.0),
            size=Size3D(
                width=params.ridge_cap_width,
                height=params.ridge_cap_height,
                depth=dims.length,
            ),
            parent=ROOF_ID,
            tags={"color": color},
        ))

        for index, skylight in enumerate(context.building.skylights):
            elements.append(LayoutElement(
                id=f"skylight.{index}",
                type=ElementType.SKYLIGHT,
                transform=translate(skylight.x_offset, skylight.y_offset, 0.0),
                size=Size3D(
                    width=skylight.width,
                    height=skylight.length,
                    depth=params.skylight_thickness,
                ),
                parent=panel_for(skylight),
            ))

        return elements

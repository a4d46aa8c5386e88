"""Wall panels — the four cladding solids and the gable outlines.

Gable walls (front/back) are extruded from an outline that rises to the
ridge; side walls, and gable walls under a flat roof, are plain boxes of
the eave height.
"""

from __future__ import annotations

from configurator.rules.base import LayoutRule
from configurator.models import (
    LayoutContext, LayoutElement, ElementType, Shape, Size3D, GableOutline,
    WallPosition,
)
from configurator.core.walls import wall_frame, gable_outline, gable_uv


def wall_id(position: WallPosition) -> str:
    return f"wall.{position.value}"


class WallPanelRule(LayoutRule):
    """One solid per wall, positioned by its wall frame."""

    priority = 20

    def get_id(self) -> str:
        return "wall.panels"

    def get_name(self) -> str:
        return "Wall Panels"

    def generate(self, context: LayoutContext) -> list[LayoutElement]:
        elements: list[LayoutElement] = []
        for position in WallPosition:
            elements.append(self._wall(position, context))
        return elements

    def _wall(self, position: WallPosition, context: LayoutContext) -> LayoutElement:
        dims = context.building.dimensions
        roof = context.roof_geometry
        thickness = context.params.wall_thickness
        frame = wall_frame(position)
        width = frame.wall_width(dims)

        if frame.is_gable and roof.roof_height > 0:
            outline = gable_outline(width, dims.height, roof.roof_height)
            context.add_gable(GableOutline(
                wall=position,
                vertices=outline,
                uvs=[gable_uv(p, width, dims.height, roof.total_height) for p in outline],
                thickness=thickness,
            ))
            return LayoutElement(
                id=wall_id(position),
                type=ElementType.WALL,
                shape=Shape.EXTRUSION,
                transform=frame.transform(dims),
                size=Size3D(width=width, height=roof.total_height, depth=thickness),
                outline=outline,
                wall=position,
                tags={"color": context.building.color, "gable": "true"},
            )

        return LayoutElement(
            id=wall_id(position),
            type=ElementType.WALL,
            transform=frame.transform(dims),
            size=Size3D(width=width, height=dims.height, depth=thickness),
            wall=position,
            tags={"color": context.building.color},
        )

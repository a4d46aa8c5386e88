"""Structural steel — vertical beams, flanges, and horizontal tie beams.

Vertical beam count adapts to the wall width: the usable span (wall
width less a margin at each end) is split into as many spaces of at most
`max_spacing` as fit, never fewer than two, and never closer than
`min_spacing`. Under a gable the beams grow with the roofline.
"""

from __future__ import annotations
import math

from configurator.rules.base import LayoutRule
from configurator.rules.walls.wall_panels import wall_id
from configurator.models import (
    LayoutContext, LayoutElement, ElementType, Size3D, WallPosition, translate,
)
from configurator.core.walls import wall_frame

EPSILON = 1e-9


def beam_positions(
    wall_width: float,
    margin: float = 2.0,
    min_spacing: float = 4.0,
    max_spacing: float = 8.0,
) -> list[float]:
    """Wall-local x of each vertical beam, left to right."""
    available = wall_width - 2 * margin
    num_spaces = max(2, math.floor(available / max_spacing))
    spacing = max(min_spacing, available / num_spaces)

    start = -wall_width / 2 + margin
    end = wall_width / 2 - margin
    positions: list[float] = []
    i = 0
    while start + i * spacing <= end + EPSILON:
        positions.append(start + i * spacing)
        i += 1
    return positions


def beam_height(x: float, wall_width: float, height: float, rise: float, gable: bool) -> float:
    """Height of a beam at wall-local x; follows the roofline on gable walls."""
    if not gable or rise <= 0:
        return height
    ratio = 1 - abs(x) / (wall_width / 2)
    return height + rise * ratio


def flange_offsets(height: float, max_spacing: float = 6.0) -> list[float]:
    """Offsets of flange plates from a beam's center, bottom first."""
    spacing = min(max_spacing, height / 4)
    count = math.ceil(height / spacing)
    return [-height / 2 + i * spacing for i in range(count)]


class StructuralBeamRule(LayoutRule):
    """Vertical beams with flanges and three tie beams on every wall."""

    priority = 30
    dependencies = ["wall.panels"]

    def get_id(self) -> str:
        return "wall.beams"

    def get_name(self) -> str:
        return "Structural Beams"

    def generate(self, context: LayoutContext) -> list[LayoutElement]:
        elements: list[LayoutElement] = []
        for position in WallPosition:
            elements.extend(self._vertical_beams(position, context))
            elements.extend(self._tie_beams(position, context))
        return elements

    def _inset(self, position: WallPosition, context: LayoutContext) -> float:
        inset = context.params.beam_inset
        return -inset if position.is_gable else inset

    def _vertical_beams(self, position: WallPosition, context: LayoutContext) -> list[LayoutElement]:
        elements: list[LayoutElement] = []
        dims = context.building.dimensions
        params = context.params
        frame = wall_frame(position)
        width = frame.wall_width(dims)
        rise = context.roof_geometry.roof_height
        z = self._inset(position, context)
        parent = wall_id(position)

        xs = beam_positions(width, params.beam_margin, params.beam_min_spacing, params.beam_max_spacing)
        for i, x in enumerate(xs):
            bh = beam_height(x, width, dims.height, rise, frame.is_gable)
            beam = f"{parent}.beam.{i}"
            elements.append(LayoutElement(
                id=beam,
                type=ElementType.BEAM,
                # Standing on the ground; wall origin is at half the eave height
                transform=translate(x, bh / 2 - dims.height / 2, z),
                size=Size3D(width=params.beam_width, height=bh, depth=params.beam_depth),
                parent=parent,
                wall=position,
            ))
            if not context.config.include_flanges:
                continue
            for j, y in enumerate(flange_offsets(bh, params.flange_max_spacing)):
                elements.append(LayoutElement(
                    id=f"{beam}.flange.{j}",
                    type=ElementType.FLANGE,
                    transform=translate(0.0, y, 0.0),
                    size=Size3D(
                        width=params.flange_width,
                        height=params.flange_height,
                        depth=params.beam_depth * 1.2,
                    ),
                    parent=beam,
                    wall=position,
                ))
        return elements

    def _tie_beams(self, position: WallPosition, context: LayoutContext) -> list[LayoutElement]:
        elements: list[LayoutElement] = []
        dims = context.building.dimensions
        params = context.params
        span = wall_frame(position).wall_width(dims) - params.tie_beam_end_gap
        if span <= 0:
            return elements

        z = self._inset(position, context)
        parent = wall_id(position)
        s = params.tie_beam_size
        for i, fraction in enumerate(params.tie_beam_fractions):
            tie = f"{parent}.tie.{i}"
            elements.append(LayoutElement(
                id=tie,
                type=ElementType.TIE_BEAM,
                transform=translate(0.0, -dims.height / 2 + dims.height * fraction, z),
                size=Size3D(width=span, height=s, depth=params.beam_depth),
                parent=parent,
                wall=position,
                tags={"fraction": str(fraction)},
            ))
            for side, x in (("left", -span / 2), ("right", span / 2)):
                elements.append(LayoutElement(
                    id=f"{tie}.plate.{side}",
                    type=ElementType.TIE_END_PLATE,
                    transform=translate(x, 0.0, 0.0),
                    size=Size3D(width=s, height=s, depth=params.beam_depth),
                    parent=tie,
                    wall=position,
                ))
        return elements

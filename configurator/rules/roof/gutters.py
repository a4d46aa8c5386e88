"""Rain gutters and downspouts.

Gutter runs sit just outside the walls at eave height: front and back
runs span the building width, side runs span the length. Each run is a
U-shaped profile (local X-Y, opening up) extruded along its local Z.
Downspouts drop at the four corners.
"""

from __future__ import annotations
import math

from configurator.rules.base import LayoutRule
from configurator.models import (
    LayoutContext, LayoutElement, ElementType, Shape, Size3D, Point2D, Transform, translate,
)

CURVE_SEGMENTS = 8

BRACKET_LIFT = 0.15
BRACKET_SIZE = (0.15, 0.4, 0.2)
END_CAP_THICKNESS = 0.15
DOWNSPOUT_DROP = 0.5          # Clear gap above ground and below the gutter
ELBOW_DROP = 0.5
ELBOW_RING_RADIUS = 0.15
STRAP_FRACTIONS = (0.75, 0.25)
STRAP_TUBE_RADIUS = 0.03
SPLASH_BLOCK_SIZE = (2.0, 0.3, 1.0)


def _quadratic(p0: Point2D, c: Point2D, p1: Point2D, segments: int) -> list[Point2D]:
    """Points along a quadratic Bezier, excluding the start point."""
    points = []
    for i in range(1, segments + 1):
        t = i / segments
        a, b, d = (1 - t) ** 2, 2 * (1 - t) * t, t ** 2
        points.append(Point2D(
            x=a * p0.x + b * c.x + d * p1.x,
            y=a * p0.y + b * c.y + d * p1.y,
        ))
    return points


def gutter_profile(width: float = 0.6, depth: float = 0.4, wall: float = 0.08,
                   segments: int = CURVE_SEGMENTS) -> list[Point2D]:
    """Closed U-shaped gutter cross-section, lip at y = 0, opening up."""
    hw = width / 2
    outer_start = Point2D(x=-hw, y=-depth * 0.8)
    inner_start = Point2D(x=hw - wall, y=-depth * 0.7)

    points = [Point2D(x=-hw, y=0.0), outer_start]
    points += _quadratic(outer_start, Point2D(x=0.0, y=-depth), Point2D(x=hw, y=-depth * 0.8), segments)
    points += [Point2D(x=hw, y=0.0), Point2D(x=hw - wall, y=0.0), inner_start]
    points += _quadratic(inner_start, Point2D(x=0.0, y=-depth * 0.85),
                         Point2D(x=-hw + wall, y=-depth * 0.7), segments)
    points.append(Point2D(x=-hw + wall, y=0.0))
    return points


def _run_transform(along_x: bool, across: float, along: float, y: float) -> Transform:
    """Transform for a point on a gutter run; runs along X are turned to face it."""
    if along_x:
        return translate(along, y, across, ry=math.pi / 2)
    return translate(across, y, along)


def bracket_positions(span: float, spacing: float = 6.0) -> list[float]:
    """Positions along a run, evenly spread from one end to the other.

    The count comes from the nominal spacing; the actual spacing is then
    stretched so the first and last brackets sit at the run ends. A run
    no longer than the spacing gets a single bracket at its start.
    """
    count = math.ceil(span / spacing)
    actual = span / max(count - 1, 1)
    return [-span / 2 + i * actual for i in range(count)]


class GutterRule(LayoutRule):
    """Gutter runs with brackets and end caps, corner downspouts with hardware."""

    priority = 60
    dependencies = ["roof.panels"]

    def get_id(self) -> str:
        return "roof.gutters"

    def get_name(self) -> str:
        return "Gutters & Downspouts"

    def generate(self, context: LayoutContext) -> list[LayoutElement]:
        return self._runs(context) + self._downspouts(context)

    def _runs(self, context: LayoutContext) -> list[LayoutElement]:
        elements: list[LayoutElement] = []
        dims = context.building.dimensions
        p = context.params
        off = p.gutter_offset
        lip = dims.height + p.gutter_rise
        run_y = lip - p.gutter_depth / 2
        profile = gutter_profile(p.gutter_width, p.gutter_depth, p.gutter_wall)

        # (name, span, across-run coordinate, runs along x?)
        runs = [
            ("front", dims.width, dims.length / 2 + off, True),
            ("back", dims.width, -dims.length / 2 - off, True),
            ("left", dims.length, -dims.width / 2 - off, False),
            ("right", dims.length, dims.width / 2 + off, False),
        ]
        for name, span, across, along_x in runs:
            run = f"gutter.{name}"
            elements.append(LayoutElement(
                id=run,
                type=ElementType.GUTTER,
                shape=Shape.EXTRUSION,
                transform=_run_transform(along_x, across, 0.0, run_y),
                size=Size3D(width=p.gutter_width, height=p.gutter_depth, depth=span),
                outline=profile,
                tags={"run": name},
            ))
            for i, along in enumerate(bracket_positions(span, p.bracket_spacing)):
                elements.append(LayoutElement(
                    id=f"{run}.bracket.{i}",
                    type=ElementType.GUTTER_BRACKET,
                    transform=_run_transform(along_x, across, along, lip + BRACKET_LIFT),
                    size=Size3D(width=BRACKET_SIZE[0], height=BRACKET_SIZE[1], depth=BRACKET_SIZE[2]),
                    tags={"run": name},
                ))
            if along_x:
                continue
            for end, along in (("start", -span / 2), ("end", span / 2)):
                elements.append(LayoutElement(
                    id=f"{run}.cap.{end}",
                    type=ElementType.GUTTER_END_CAP,
                    transform=_run_transform(along_x, across, along, run_y),
                    size=Size3D(width=p.gutter_width, height=p.gutter_depth, depth=END_CAP_THICKNESS),
                    tags={"run": name},
                ))
        return elements

    def _downspouts(self, context: LayoutContext) -> list[LayoutElement]:
        elements: list[LayoutElement] = []
        dims = context.building.dimensions
        p = context.params
        off = p.gutter_offset
        lip = dims.height + p.gutter_rise
        length = dims.height - 2 * DOWNSPOUT_DROP
        r = p.downspout_radius

        corners = [
            ("front_left", -dims.width / 2 - off, dims.length / 2 + off, 1),
            ("front_right", dims.width / 2 + off, dims.length / 2 + off, 1),
            ("back_left", -dims.width / 2 - off, -dims.length / 2 - off, -1),
            ("back_right", dims.width / 2 + off, -dims.length / 2 - off, -1),
        ]
        for name, x, z, outward in corners:
            spout = f"downspout.{name}"
            if length > 0:
                elements.append(LayoutElement(
                    id=spout,
                    type=ElementType.DOWNSPOUT,
                    shape=Shape.CYLINDER,
                    transform=translate(x, DOWNSPOUT_DROP + length / 2, z),
                    size=Size3D(width=2 * r, height=length, depth=2 * r),
                    tags={"corner": name},
                ))
                for j, fraction in enumerate(STRAP_FRACTIONS):
                    elements.append(LayoutElement(
                        id=f"{spout}.strap.{j}",
                        type=ElementType.DOWNSPOUT_STRAP,
                        shape=Shape.TORUS,
                        transform=translate(x, dims.height * fraction, z),
                        size=Size3D(
                            width=2 * ELBOW_RING_RADIUS,
                            height=2 * math.pi,
                            depth=2 * STRAP_TUBE_RADIUS,
                        ),
                        tags={"corner": name},
                    ))
            elements.append(LayoutElement(
                id=f"{spout}.elbow",
                type=ElementType.DOWNSPOUT_ELBOW,
                shape=Shape.TORUS,
                transform=translate(x, lip - ELBOW_DROP, z, rx=math.pi / 2),
                size=Size3D(width=2 * ELBOW_RING_RADIUS, height=math.pi / 2, depth=2 * r),
                tags={"corner": name},
            ))
            elements.append(LayoutElement(
                id=f"{spout}.splash",
                type=ElementType.SPLASH_BLOCK,
                transform=translate(
                    x, SPLASH_BLOCK_SIZE[1] / 2, z + outward * p.splash_block_reach,
                ),
                size=Size3D(
                    width=SPLASH_BLOCK_SIZE[0],
                    height=SPLASH_BLOCK_SIZE[1],
                    depth=SPLASH_BLOCK_SIZE[2],
                ),
                tags={"corner": name},
            ))
        return elements

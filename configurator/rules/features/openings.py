"""Wall features — doors, windows, roll-up doors, walk doors.

Each feature body is placed by the placement resolver. Trim (frame bars,
handles, mullions, roll-up slats and tracks) is laid out in the body's
own frame: X across the opening, Y up, Z through the wall.
"""

from __future__ import annotations
import math

from configurator.rules.base import LayoutRule
from configurator.models import (
    LayoutContext, LayoutElement, ElementType, Shape, Size3D, FeatureType,
    WallFeature, translate,
)
from configurator.core.placement import resolve_feature

FRAME_BAR = 0.2
MULLION_BAR = 0.1
HANDLE_INSET = 0.05
KNOB_RADIUS = 0.15
LEVER_SIZE = (0.4, 0.1, 0.15)
SLAT_SIZE = 0.1
TRACK_WIDTH = 0.1
TRACK_GAP = 0.15
HEADER_OVERHANG = 0.4


def _box(element_id: str, parent: str, part: str, x: float, y: float, z: float,
         w: float, h: float, d: float) -> LayoutElement:
    return LayoutElement(
        id=element_id,
        type=ElementType.FEATURE_TRIM,
        transform=translate(x, y, z),
        size=Size3D(width=w, height=h, depth=d),
        parent=parent,
        tags={"part": part},
    )


def frame_trim(parent: str, w: float, h: float, d: float) -> list[LayoutElement]:
    """Four bars around the opening."""
    half = FRAME_BAR / 2
    return [
        _box(f"{parent}.frame.top", parent, "frame", 0.0, h / 2 - half, 0.0, w, FRAME_BAR, d),
        _box(f"{parent}.frame.bottom", parent, "frame", 0.0, -h / 2 + half, 0.0, w, FRAME_BAR, d),
        _box(f"{parent}.frame.left", parent, "frame", -w / 2 + half, 0.0, 0.0, FRAME_BAR, h, d),
        _box(f"{parent}.frame.right", parent, "frame", w / 2 - half, 0.0, 0.0, FRAME_BAR, h, d),
    ]


def door_trim(parent: str, w: float, h: float, d: float) -> list[LayoutElement]:
    elements = frame_trim(parent, w, h, d)
    for side, z in (("outer", d / 2 - HANDLE_INSET), ("inner", -d / 2 + HANDLE_INSET)):
        elements.append(LayoutElement(
            id=f"{parent}.handle.{side}",
            type=ElementType.FEATURE_TRIM,
            shape=Shape.SPHERE,
            transform=translate(w / 4, 0.0, z),
            size=Size3D(width=2 * KNOB_RADIUS, height=2 * KNOB_RADIUS, depth=2 * KNOB_RADIUS),
            parent=parent,
            tags={"part": "handle"},
        ))
    return elements


def walk_door_trim(parent: str, w: float, h: float, d: float) -> list[LayoutElement]:
    elements = frame_trim(parent, w, h, d)
    for side, z in (("outer", d / 2 - HANDLE_INSET), ("inner", -d / 2 + HANDLE_INSET)):
        elements.append(_box(f"{parent}.handle.{side}", parent, "handle",
                             w / 3, 0.0, z, *LEVER_SIZE))
    return elements


def window_trim(parent: str, w: float, h: float, d: float) -> list[LayoutElement]:
    elements = frame_trim(parent, w, h, d)
    elements.append(_box(f"{parent}.mullion.horizontal", parent, "mullion",
                         0.0, 0.0, 0.0, w - 2 * MULLION_BAR, MULLION_BAR, d))
    elements.append(_box(f"{parent}.mullion.vertical", parent, "mullion",
                         0.0, 0.0, 0.0, MULLION_BAR, h - 2 * MULLION_BAR, d))
    return elements


def rollup_trim(parent: str, w: float, h: float, d: float) -> list[LayoutElement]:
    """One slat pair per unit of door height, side tracks, and a header."""
    elements: list[LayoutElement] = []
    for i in range(math.floor(h)):
        y = -h / 2 + i + 0.5
        for side, z in (("outer", d / 2 - HANDLE_INSET), ("inner", -d / 2 + HANDLE_INSET)):
            elements.append(_box(f"{parent}.slat.{i}.{side}", parent, "slat",
                                 0.0, y, z, w, SLAT_SIZE, SLAT_SIZE))
    for side, x in (("left", -(w / 2) - TRACK_GAP), ("right", w / 2 + TRACK_GAP)):
        elements.append(_box(f"{parent}.track.{side}", parent, "track",
                             x, 0.0, 0.0, TRACK_WIDTH, h + 0.4, d + 0.2))
    elements.append(_box(f"{parent}.header", parent, "header",
                         0.0, h / 2 + 0.2, 0.0, w + HEADER_OVERHANG, 0.2, d + 0.2))
    return elements


TRIM_BUILDERS = {
    FeatureType.DOOR: door_trim,
    FeatureType.WINDOW: window_trim,
    FeatureType.ROLLUP_DOOR: rollup_trim,
    FeatureType.WALK_DOOR: walk_door_trim,
}


class WallFeatureRule(LayoutRule):
    """Feature bodies flush against their walls, plus per-type trim."""

    priority = 50
    dependencies = ["wall.panels"]

    def get_id(self) -> str:
        return "wall.features"

    def get_name(self) -> str:
        return "Doors & Windows"

    def applies(self, context: LayoutContext) -> bool:
        return len(context.building.features) > 0

    def generate(self, context: LayoutContext) -> list[LayoutElement]:
        elements: list[LayoutElement] = []
        for feature in context.building.features:
            elements.extend(self._feature(feature, context))
        return elements

    def _feature(self, feature: WallFeature, context: LayoutContext) -> list[LayoutElement]:
        params = context.params
        body = f"feature.{feature.id}"
        tags = {"feature_type": feature.type.value}
        if feature.color:
            tags["color"] = feature.color

        elements = [LayoutElement(
            id=body,
            type=ElementType.FEATURE,
            transform=resolve_feature(feature, context.building.dimensions, params.feature_clearance),
            size=Size3D(width=feature.width, height=feature.height, depth=params.feature_depth),
            wall=feature.position.wall_position,
            tags=tags,
        )]
        if context.config.include_trim:
            builder = TRIM_BUILDERS[feature.type]
            elements.extend(builder(body, feature.width, feature.height, params.feature_depth))
        return elements

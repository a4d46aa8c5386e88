"""Feature placement — wall-relative feature positions to building space."""

from __future__ import annotations

from configurator.models import (
    Alignment, BuildingDimensions, Transform, WallFeature, translate,
)
from configurator.core.walls import wall_frame


def along_wall(
    alignment: Alignment,
    x_offset: float,
    half_feature: float,
    half_wall: float,
    sign: int,
) -> float:
    """Center of a feature along its wall, in building coordinates.

    Left/right alignment measure x_offset inward from that edge of the
    wall; center alignment measures it from the centerline.
    """
    if alignment == Alignment.LEFT:
        return sign * (-half_wall + half_feature + x_offset)
    if alignment == Alignment.RIGHT:
        return sign * (half_wall - half_feature - x_offset)
    return sign * x_offset


def resolve_feature(
    feature: WallFeature,
    dims: BuildingDimensions,
    clearance: float = 0.1,
) -> Transform:
    """
    Position and orientation of a feature's center in building space.

    The feature sits `clearance` outside its wall plane and is anchored at
    its bottom edge. Offsets are not clamped to the wall.
    """
    pos = feature.position
    frame = wall_frame(pos.wall_position)

    along = along_wall(
        pos.alignment,
        pos.x_offset,
        feature.width / 2,
        frame.wall_width(dims) / 2,
        frame.along_sign,
    )
    y = pos.y_offset + feature.height / 2
    normal = frame.normal_sign * (frame.half_depth(dims) + clearance)

    center = frame.place(along, y, normal)
    return translate(center.x, center.y, center.z, ry=frame.yaw)


def feature_extent(
    feature: WallFeature,
    dims: BuildingDimensions,
    clearance: float = 0.1,
) -> tuple[float, float]:
    """Span of a feature along its wall axis, in building coordinates."""
    frame = wall_frame(feature.position.wall_position)
    center = resolve_feature(feature, dims, clearance).translation
    c = center.x if frame.along_axis == "x" else center.z
    return c - feature.width / 2, c + feature.width / 2

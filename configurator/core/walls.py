"""Wall frames — per-wall coordinate frames and gable outlines.

Each of the four walls is described once, as an immutable WallFrame, and
looked up by WallPosition. Everything that depends on which wall it is
(translation, yaw, which building dimension the wall spans, which way
wall-relative offsets run) reads the descriptor instead of branching.
"""

from __future__ import annotations
import math
from typing import Literal
from pydantic import BaseModel, ConfigDict

from configurator.models import (
    BuildingDimensions, Point2D, Point3D, Transform, WallPosition, translate,
)


class WallFrame(BaseModel):
    """Immutable description of one wall's placement."""
    model_config = ConfigDict(frozen=True)

    position: WallPosition
    along_axis: Literal["x", "z"]     # Building axis the wall runs along
    along_sign: int                   # Sign applied to wall-relative offsets
    normal_axis: Literal["x", "z"]    # Building axis the wall faces along
    normal_sign: int                  # Which side of the building it is on
    yaw: float
    is_gable: bool

    def wall_width(self, dims: BuildingDimensions) -> float:
        """Width of the wall itself: building width for gables, length otherwise."""
        return dims.width if self.along_axis == "x" else dims.length

    def half_depth(self, dims: BuildingDimensions) -> float:
        """Distance from the building center to the wall plane."""
        return dims.length / 2 if self.normal_axis == "z" else dims.width / 2

    def place(self, along: float, y: float, normal: float) -> Point3D:
        """Build a building-space point from wall-axis components."""
        if self.along_axis == "x":
            return Point3D(x=along, y=y, z=normal)
        return Point3D(x=normal, y=y, z=along)

    def transform(self, dims: BuildingDimensions) -> Transform:
        """Local-to-building transform; the origin sits at the wall's center."""
        origin = self.place(0.0, dims.height / 2, self.normal_sign * self.half_depth(dims))
        return translate(origin.x, origin.y, origin.z, ry=self.yaw)

    def local_to_world(self, dims: BuildingDimensions, point: Point3D) -> Point3D:
        return self.transform(dims).apply(point)


WALL_FRAMES: dict[WallPosition, WallFrame] = {
    WallPosition.FRONT: WallFrame(
        position=WallPosition.FRONT, along_axis="x", along_sign=1,
        normal_axis="z", normal_sign=1, yaw=0.0, is_gable=True,
    ),
    WallPosition.BACK: WallFrame(
        position=WallPosition.BACK, along_axis="x", along_sign=-1,
        normal_axis="z", normal_sign=-1, yaw=math.pi, is_gable=True,
    ),
    WallPosition.LEFT: WallFrame(
        position=WallPosition.LEFT, along_axis="z", along_sign=1,
        normal_axis="x", normal_sign=-1, yaw=math.pi / 2, is_gable=False,
    ),
    WallPosition.RIGHT: WallFrame(
        position=WallPosition.RIGHT, along_axis="z", along_sign=-1,
        normal_axis="x", normal_sign=1, yaw=-math.pi / 2, is_gable=False,
    ),
}


def wall_frame(position: WallPosition) -> WallFrame:
    return WALL_FRAMES[position]


def gable_outline(wall_width: float, height: float, rise: float) -> list[Point2D]:
    """
    Outline of a gable wall in its local plane, origin at the wall center.

    A rectangle topped by an isosceles triangle whose apex is the ridge.
    The last vertex connects back to the first.
    """
    hw = wall_width / 2
    hh = height / 2
    return [
        Point2D(x=-hw, y=-hh),
        Point2D(x=hw, y=-hh),
        Point2D(x=hw, y=hh),
        Point2D(x=0.0, y=hh + rise),
        Point2D(x=-hw, y=hh),
    ]


def gable_uv(point: Point2D, wall_width: float, height: float, total_height: float) -> Point2D:
    """Texture coordinate for a point on the gable.

    v is normalized by the total height, not the eave height, so tiling
    stays continuous across the sloped edges.
    """
    return Point2D(
        x=(point.x + wall_width / 2) / wall_width,
        y=(point.y + height / 2) / total_height,
    )

"""Geometric primitives used throughout the layout engine."""

from __future__ import annotations
import math
from pydantic import BaseModel


class Point2D(BaseModel):
    """Point on a wall's local plane (x along the wall, y up)."""
    x: float
    y: float


class Point3D(BaseModel):
    """Point in building space (Y up, ridge along Z)."""
    x: float
    y: float
    z: float


class Euler(BaseModel):
    """Rotation as Euler angles in radians, applied in XYZ order."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def matrix(self) -> tuple[tuple[float, float, float], ...]:
        """Rotation matrix R = Rx * Ry * Rz."""
        cx, sx = math.cos(self.x), math.sin(self.x)
        cy, sy = math.cos(self.y), math.sin(self.y)
        cz, sz = math.cos(self.z), math.sin(self.z)
        return (
            (cy * cz, -cy * sz, sy),
            (cx * sz + sx * sy * cz, cx * cz - sx * sy * sz, -sx * cy),
            (sx * sz - cx * sy * cz, sx * cz + cx * sy * sz, cx * cy),
        )


class Size3D(BaseModel):
    """Extent of a solid along its local axes."""
    width: float
    height: float
    depth: float


class Transform(BaseModel):
    """Placement of an element relative to its parent."""
    translation: Point3D
    rotation: Euler = Euler()

    def apply(self, point: Point3D) -> Point3D:
        """Map a point from this transform's local frame into the parent frame."""
        m = self.rotation.matrix()
        return Point3D(
            x=m[0][0] * point.x + m[0][1] * point.y + m[0][2] * point.z + self.translation.x,
            y=m[1][0] * point.x + m[1][1] * point.y + m[1][2] * point.z + self.translation.y,
            z=m[2][0] * point.x + m[2][1] * point.y + m[2][2] * point.z + self.translation.z,
        )


def translate(x: float, y: float, z: float, rx: float = 0.0, ry: float = 0.0, rz: float = 0.0) -> Transform:
    """Shorthand for building a Transform from raw components."""
    return Transform(
        translation=Point3D(x=x, y=y, z=z),
        rotation=Euler(x=rx, y=ry, z=rz),
    )

from .geometry import Point2D, Point3D, Euler, Size3D, Transform, translate
from .building import (
    Building, BuildingDimensions, WallPosition, Alignment, FeatureType,
    FeaturePosition, WallFeature, Skylight, FeatureNotFoundError,
)
from .layout import (
    ElementType, Shape, LayoutElement, GableOutline, RoofGeometry,
    WarningCode, LayoutWarning, BuildingLayout, LayoutStats,
)
from .parameters import LayoutParams, GenerationConfig
from .context import LayoutContext

__all__ = [
    "Point2D", "Point3D", "Euler", "Size3D", "Transform", "translate",
    "Building", "BuildingDimensions", "WallPosition", "Alignment", "FeatureType",
    "FeaturePosition", "WallFeature", "Skylight", "FeatureNotFoundError",
    "ElementType", "Shape", "LayoutElement", "GableOutline", "RoofGeometry",
    "WarningCode", "LayoutWarning", "BuildingLayout", "LayoutStats",
    "LayoutParams", "GenerationConfig",
    "LayoutContext",
]

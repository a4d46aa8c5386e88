"""Layout output models — the descriptors a renderer consumes."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from .building import WallPosition
from .geometry import Point2D, Size3D, Transform


class ElementType(str, Enum):
    FOUNDATION = "foundation"
    WALL = "wall"
    ROOF = "roof"
    ROOF_PANEL = "roof_panel"
    RIDGE_CAP = "ridge_cap"
    SKYLIGHT = "skylight"
    BEAM = "beam"
    FLANGE = "flange"
    TIE_BEAM = "tie_beam"
    TIE_END_PLATE = "tie_end_plate"
    GUTTER = "gutter"
    GUTTER_BRACKET = "gutter_bracket"
    GUTTER_END_CAP = "gutter_end_cap"
    DOWNSPOUT = "downspout"
    DOWNSPOUT_ELBOW = "downspout_elbow"
    DOWNSPOUT_STRAP = "downspout_strap"
    SPLASH_BLOCK = "splash_block"
    FEATURE = "feature"
    FEATURE_TRIM = "feature_trim"


class Shape(str, Enum):
    """How `size` is to be read.

    box: width x height x depth.
    extrusion: an outline (gable or gutter profile) extruded by depth.
    cylinder: width = diameter, height = length along local Y.
    sphere: width = diameter.
    torus: width = ring diameter, depth = tube diameter, height = arc angle.
    group: no solid of its own.
    """
    BOX = "box"
    EXTRUSION = "extrusion"
    CYLINDER = "cylinder"
    SPHERE = "sphere"
    TORUS = "torus"
    GROUP = "group"


class LayoutElement(BaseModel):
    """A single solid (or group) positioned relative to its parent."""
    id: str
    type: ElementType
    shape: Shape = Shape.BOX
    transform: Transform
    size: Size3D | None = None
    outline: list[Point2D] = []        # Profile for extrusions, in local X-Y
    parent: str | None = None          # None = building space
    wall: WallPosition | None = None
    tags: dict[str, str] = {}


class GableOutline(BaseModel):
    """Closed outline of a gable wall in its local plane, with per-vertex UVs."""
    wall: WallPosition
    vertices: list[Point2D]
    uvs: list[Point2D]
    thickness: float


class RoofGeometry(BaseModel):
    """Quantities derived from width, eave height and pitch."""
    roof_height: float
    pitch_angle: float
    panel_length: float
    total_height: float


class WarningCode(str, Enum):
    FEATURE_OUT_OF_BOUNDS = "feature_out_of_bounds"
    FEATURE_ABOVE_EAVE = "feature_above_eave"
    SKYLIGHT_OUTSIDE_PANEL = "skylight_outside_panel"


class LayoutWarning(BaseModel):
    """A placement the engine honoured but that will not look right."""
    code: WarningCode
    subject: str
    message: str


class BuildingLayout(BaseModel):
    """The complete generated layout."""
    roof: RoofGeometry
    elements: list[LayoutElement]
    gables: list[GableOutline] = []
    warnings: list[LayoutWarning] = []
    stats: LayoutStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = LayoutStats.from_elements(self.elements)

    def get(self, element_id: str) -> LayoutElement | None:
        for e in self.elements:
            if e.id == element_id:
                return e
        return None

    def children_of(self, element_id: str) -> list[LayoutElement]:
        return [e for e in self.elements if e.parent == element_id]

    def of_type(self, element_type: ElementType) -> list[LayoutElement]:
        return [e for e in self.elements if e.type == element_type]


class LayoutStats(BaseModel):
    """Summary counts for a generated layout."""
    total_elements: int = 0
    beams: int = 0
    features: int = 0
    skylights: int = 0
    gutter_parts: int = 0
    other: int = 0

    @classmethod
    def from_elements(cls, elements: list[LayoutElement]) -> LayoutStats:
        gutter_types = (
            ElementType.GUTTER, ElementType.GUTTER_BRACKET, ElementType.GUTTER_END_CAP,
            ElementType.DOWNSPOUT, ElementType.DOWNSPOUT_ELBOW, ElementType.DOWNSPOUT_STRAP,
            ElementType.SPLASH_BLOCK,
        )
        beams = sum(1 for e in elements if e.type == ElementType.BEAM)
        features = sum(1 for e in elements if e.type == ElementType.FEATURE)
        skylights = sum(1 for e in elements if e.type == ElementType.SKYLIGHT)
        gutter_parts = sum(1 for e in elements if e.type in gutter_types)
        return cls(
            total_elements=len(elements),
            beams=beams,
            features=features,
            skylights=skylights,
            gutter_parts=gutter_parts,
            other=len(elements) - beams - features - skylights - gutter_parts,
        )


BuildingLayout.model_rebuild()

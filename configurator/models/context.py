"""Layout context — accumulates state during one layout pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import Building
from .layout import GableOutline, LayoutElement, LayoutWarning, RoofGeometry
from .parameters import LayoutParams, GenerationConfig


class LayoutContext(BaseModel):
    """
    Holds all state during a single layout pass.

    The analyzer fills in derived roof geometry and warnings.
    Rules add elements and gable outlines.
    The generator orchestrates the flow.
    """
    # Input
    building: Building
    params: LayoutParams = Field(default_factory=LayoutParams)
    config: GenerationConfig = Field(default_factory=GenerationConfig)

    # Analysis results (populated by the analyzer)
    roof: RoofGeometry | None = None
    warnings: list[LayoutWarning] = []

    # Output (populated by rules)
    elements: list[LayoutElement] = []
    gables: list[GableOutline] = []

    def add_elements(self, elements: list[LayoutElement]) -> None:
        self.elements.extend(elements)

    def add_gable(self, gable: GableOutline) -> None:
        self.gables.append(gable)

    @property
    def roof_geometry(self) -> RoofGeometry:
        if self.roof is None:
            raise RuntimeError("roof geometry requested before analysis")
        return self.roof

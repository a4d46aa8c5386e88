"""Foundation slab under the building footprint."""

from __future__ import annotations

from configurator.rules.base import LayoutRule
from configurator.models import (
    LayoutContext, LayoutElement, ElementType, Size3D, translate,
)


class FoundationRule(LayoutRule):
    """A single slab the size of the footprint, its top face at ground level + thickness."""

    priority = 10

    def get_id(self) -> str:
        return "site.foundation"

    def get_name(self) -> str:
        return "Foundation Slab"

    def generate(self, context: LayoutContext) -> list[LayoutElement]:
        dims = context.building.dimensions
        t = context.params.slab_thickness
        return [LayoutElement(
            id="foundation",
            type=ElementType.FOUNDATION,
            transform=translate(0.0, t / 2, 0.0),
            size=Size3D(width=dims.width, height=t, depth=dims.length),
        )]

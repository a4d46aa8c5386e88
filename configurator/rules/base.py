"""Layout rule interface.

A rule owns one family of building elements (walls, beams, roof panels,
gutters, feature trim) and emits them as LayoutElements parented into the
scene graph. The registry decides which rules run and in what order.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from configurator.models.context import LayoutContext
from configurator.models.layout import LayoutElement


class LayoutRule(ABC):
    """
    One step of a layout pass.

    `priority` orders rules (lower runs first); `dependencies` names the
    rules whose elements this one parents onto. A rule whose dependency
    is filtered out still runs, but its dangling children are dropped.
    """

    priority: int = 100
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Dotted rule id, e.g. 'roof.panels'."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        ...

    def applies(self, context: LayoutContext) -> bool:
        """Whether the rule has anything to lay out for this building."""
        return True

    @abstractmethod
    def generate(self, context: LayoutContext) -> list[LayoutElement]:
        """Return this rule's elements; the roof is already solved."""
        ...

    def describe(self) -> dict[str, str]:
        return {"id": self.get_id(), "name": self.get_name()}

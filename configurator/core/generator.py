"""Main layout generator — orchestrates analysis and rule execution."""

from __future__ import annotations
import logging

from configurator.models import (
    Building, BuildingLayout, LayoutParams, GenerationConfig, LayoutContext,
    LayoutElement,
)
from configurator.core.registry import RuleRegistry
from configurator.core.analyzer import PlacementAnalyzer

logger = logging.getLogger(__name__)


class LayoutGenerator:
    """
    Stateless layout generator.

    Takes a building + params, runs analysis, executes applicable rules,
    and returns a complete BuildingLayout.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry
        self.analyzer = PlacementAnalyzer()

    def generate(
        self,
        building: Building,
        params: LayoutParams | None = None,
        config: GenerationConfig | None = None,
    ) -> BuildingLayout:
        if params is None:
            params = LayoutParams()
        if config is None:
            config = GenerationConfig()

        context = LayoutContext(
            building=building,
            params=params,
            config=config,
        )

        # Analysis phase — roof geometry, placement warnings
        self.analyzer.analyze(context)

        # Generation phase — run applicable rules
        rules = self.registry.get_applicable_rules(context)
        for rule in rules:
            elements = rule.generate(context)
            logger.debug("rule %s produced %d elements", rule.get_id(), len(elements))
            context.add_elements(elements)

        return BuildingLayout(
            roof=context.roof_geometry,
            elements=self._drop_orphans(context.elements),
            gables=context.gables,
            warnings=context.warnings,
        )

    def _drop_orphans(self, elements: list[LayoutElement]) -> list[LayoutElement]:
        """Remove elements whose parent chain was not generated."""
        ids = {e.id for e in elements}
        kept: list[LayoutElement] = []
        dropped = 0
        for e in elements:
            if e.parent is not None and e.parent not in ids:
                ids.discard(e.id)
                dropped += 1
                continue
            kept.append(e)
        if dropped:
            logger.debug("dropped %d elements with missing parents", dropped)
        return kept

"""Rule registry — which layout rules exist and the order they run in."""

from __future__ import annotations
import logging

from configurator.models import GenerationConfig, LayoutContext
from configurator.rules.base import LayoutRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Keyed collection of layout rules.

    For a given context the registry narrows the rules down by the
    generation config and each rule's `applies()`, then orders them so
    that every rule runs after the rules it parents onto. Ties are broken
    by priority.
    """

    def __init__(self) -> None:
        self._rules: dict[str, LayoutRule] = {}

    def __contains__(self, rule_id: str) -> bool:
        return rule_id in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def register(self, rule: LayoutRule) -> None:
        rule_id = rule.get_id()
        if rule_id in self._rules:
            logger.debug("replacing rule %s", rule_id)
        self._rules[rule_id] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> LayoutRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[LayoutRule]:
        return list(self._rules.values())

    def get_applicable_rules(self, context: LayoutContext) -> list[LayoutRule]:
        """Rules to run for this context, dependencies first."""
        selected = [
            rule for rule in self._rules.values()
            if self._selected(rule.get_id(), context.config) and rule.applies(context)
        ]
        selected.sort(key=lambda r: r.priority)
        return self._dependency_order(selected)

    @staticmethod
    def _selected(rule_id: str, config: GenerationConfig) -> bool:
        if config.enabled_rules and rule_id not in config.enabled_rules:
            return False
        return rule_id not in config.disabled_rules

    @staticmethod
    def _dependency_order(rules: list[LayoutRule]) -> list[LayoutRule]:
        """Depth-first ordering over the selected rules.

        Dependencies that were not selected are skipped; their dangling
        children are dropped later by the generator.
        """
        by_id = {r.get_id(): r for r in rules}
        placed: set[str] = set()
        ordered: list[LayoutRule] = []

        def place(rule: LayoutRule) -> None:
            rule_id = rule.get_id()
            if rule_id in placed:
                return
            placed.add(rule_id)
            for dep_id in rule.dependencies:
                dep = by_id.get(dep_id)
                if dep is not None:
                    place(dep)
            ordered.append(rule)

        for rule in rules:
            place(rule)
        return ordered


def create_default_registry() -> RuleRegistry:
    """Registry holding every standard layout rule."""
    from configurator.rules.foundation import FoundationRule
    from configurator.rules.walls.wall_panels import WallPanelRule
    from configurator.rules.walls.beams import StructuralBeamRule
    from configurator.rules.roof.panels import RoofPanelRule
    from configurator.rules.roof.gutters import GutterRule
    from configurator.rules.features.openings import WallFeatureRule

    registry = RuleRegistry()
    for rule in (
        FoundationRule(), WallPanelRule(), StructuralBeamRule(),
        RoofPanelRule(), GutterRule(), WallFeatureRule(),
    ):
        registry.register(rule)
    return registry

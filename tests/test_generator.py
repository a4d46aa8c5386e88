"""Tests for the registry, the generator, and placement analysis."""

from __future__ import annotations

import pytest

from configurator.core.analyzer import PlacementAnalyzer
from configurator.core.generator import LayoutGenerator
from configurator.core.registry import RuleRegistry, create_default_registry
from configurator.models import (
    Alignment, Building, BuildingDimensions, ElementType, GenerationConfig,
    LayoutContext, Skylight, WallPosition, WarningCode,
)
from configurator.rules.foundation import FoundationRule


def _generate(building: Building, **config):
    return LayoutGenerator(create_default_registry()).generate(
        building, config=GenerationConfig(**config),
    )


class TestRegistry:

    def test_default_rules(self):
        ids = {r.get_id() for r in create_default_registry().list_rules()}
        assert ids == {
            "site.foundation", "wall.panels", "wall.beams", "wall.features",
            "roof.panels", "roof.gutters",
        }

    def test_dependencies_run_first(self, building, make_feature):
        registry = create_default_registry()
        context = LayoutContext(building=building.model_copy(update={"features": [make_feature()]}))
        order = [r.get_id() for r in registry.get_applicable_rules(context)]
        assert order.index("wall.panels") < order.index("wall.beams")
        assert order.index("wall.panels") < order.index("wall.features")
        assert order.index("roof.panels") < order.index("roof.gutters")

    def test_disabled_rules(self, building):
        registry = create_default_registry()
        context = LayoutContext(building=building, config=GenerationConfig(disabled_rules=["roof.gutters"]))
        ids = [r.get_id() for r in registry.get_applicable_rules(context)]
        assert "roof.gutters" not in ids

    def test_enabled_rules_only(self, building):
        registry = create_default_registry()
        context = LayoutContext(building=building, config=GenerationConfig(enabled_rules=["wall.beams"]))
        assert [r.get_id() for r in registry.get_applicable_rules(context)] == ["wall.beams"]

    def test_beams_without_walls_are_dropped(self, building):
        layout = _generate(building, disabled_rules=["wall.panels"])
        assert layout.of_type(ElementType.BEAM) == []
        assert layout.of_type(ElementType.TIE_BEAM) == []
        assert layout.get("roof.panel.left") is not None

    def test_register_and_unregister(self):
        registry = RuleRegistry()
        registry.register(FoundationRule())
        assert "site.foundation" in registry
        assert len(registry) == 1
        registry.unregister("site.foundation")
        assert registry.get_rule("site.foundation") is None
        assert registry.list_rules() == []


class TestGenerator:

    def test_full_layout(self, building):
        layout = _generate(building)
        assert layout.get("foundation") is not None
        assert len(layout.of_type(ElementType.WALL)) == 4
        assert len(layout.of_type(ElementType.ROOF_PANEL)) == 2
        assert len(layout.gables) == 2
        assert layout.stats.total_elements == len(layout.elements)
        assert layout.stats.beams == 26

    def test_flat_roof_has_no_gables(self, flat_dims):
        layout = _generate(Building(dimensions=flat_dims))
        assert layout.gables == []
        front = layout.get("wall.front")
        assert front.size.height == 14
        assert front.outline == []

    def test_gable_wall_extruded(self, building):
        front = _generate(building).get("wall.front")
        assert front.shape.value == "extrusion"
        assert len(front.outline) == 5
        assert front.size.depth == 0.2

    def test_foundation(self, building):
        slab = _generate(building).get("foundation")
        assert slab.transform.translation.y == 0.1
        assert (slab.size.width, slab.size.depth) == (40, 60)

    def test_parents_exist(self, building, make_feature):
        b = building.model_copy(update={
            "features": [make_feature()],
            "skylights": [Skylight(width=2, length=4, x_offset=-2)],
        })
        layout = _generate(b)
        ids = {e.id for e in layout.elements}
        assert len(ids) == len(layout.elements)
        assert all(e.parent is None or e.parent in ids for e in layout.elements)

    def test_idempotent(self, building, make_feature):
        b = building.model_copy(update={
            "features": [make_feature(WallPosition.LEFT, Alignment.RIGHT, x_offset=3)],
            "skylights": [Skylight(width=2, length=4, x_offset=3)],
        })
        first = _generate(b).model_dump_json()
        second = _generate(b).model_dump_json()
        assert first == second

    def test_does_not_mutate_building(self, building):
        before = building.model_dump_json()
        _generate(building)
        assert building.model_dump_json() == before


class TestPlacementWarnings:

    def _analyze(self, building: Building) -> LayoutContext:
        context = LayoutContext(building=building)
        PlacementAnalyzer().analyze(context)
        return context

    def test_clean_building(self, building, make_feature):
        context = self._analyze(building.model_copy(update={"features": [make_feature()]}))
        assert context.warnings == []
        assert context.roof.roof_height == pytest.approx(20 / 3)

    def test_feature_past_wall_edge(self, building, make_feature):
        feature = make_feature(WallPosition.FRONT, Alignment.LEFT, x_offset=38, id="wide")
        context = self._analyze(building.model_copy(update={"features": [feature]}))
        assert [w.code for w in context.warnings] == [WarningCode.FEATURE_OUT_OF_BOUNDS]
        assert context.warnings[0].subject == "wide"

    def test_feature_flush_with_edge_is_fine(self, building, make_feature):
        feature = make_feature(WallPosition.LEFT, Alignment.RIGHT, x_offset=0)
        assert self._analyze(building.model_copy(update={"features": [feature]})).warnings == []

    def test_feature_above_eave(self, building, make_feature):
        feature = make_feature(height=12, y_offset=4)
        context = self._analyze(building.model_copy(update={"features": [feature]}))
        assert [w.code for w in context.warnings] == [WarningCode.FEATURE_ABOVE_EAVE]

    def test_skylight_outside_panel(self, building):
        b = building.model_copy(update={"skylights": [
            Skylight(width=4, length=4, x_offset=3),
            Skylight(width=4, length=4, x_offset=-12),
        ]})
        context = self._analyze(b)
        assert [(w.code, w.subject) for w in context.warnings] == [
            (WarningCode.SKYLIGHT_OUTSIDE_PANEL, "1"),
        ]

    def test_skylight_checked_across_slope_only(self, building):
        b = building.model_copy(update={"skylights": [
            Skylight(width=2, length=80, x_offset=3, y_offset=50),
        ]})
        assert self._analyze(b).warnings == []

    def test_warnings_carried_into_layout(self, make_feature):
        b = Building(
            dimensions=BuildingDimensions(width=20, length=20, height=10, roof_pitch=2),
            features=[make_feature(width=30)],
        )
        layout = _generate(b)
        assert layout.warnings[0].code == WarningCode.FEATURE_OUT_OF_BOUNDS
        # Still laid out as requested
        assert layout.get("feature.f1").size.width == 30

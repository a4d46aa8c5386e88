"""Tests for the layout service facade and its layout cache."""

from __future__ import annotations

import math

import pytest

from configurator.models import (
    Building, BuildingDimensions, GenerationConfig, LayoutParams, WallPosition,
)
from configurator.services.layout_service import LayoutService, layout_key


class TestLayoutKey:

    def test_stable(self, building):
        params, config = LayoutParams(), GenerationConfig()
        assert layout_key(building, params, config) == layout_key(
            Building.model_validate(building.model_dump()), params, config,
        )

    def test_changes_with_input(self, building):
        params, config = LayoutParams(), GenerationConfig()
        other = building.with_dimensions(height=16)
        assert layout_key(building, params, config) != layout_key(other, params, config)
        assert layout_key(building, params, config) != layout_key(
            building, params, GenerationConfig(include_trim=False),
        )


class TestLayoutCache:

    @staticmethod
    def _counting(service: LayoutService) -> list[int]:
        """Count how often the service falls through to the generator."""
        calls: list[int] = []
        generate = service.generator.generate

        def counted(*args, **kwargs):
            calls.append(1)
            return generate(*args, **kwargs)

        service.generator.generate = counted
        return calls

    def test_hit_skips_generation(self, building):
        service = LayoutService()
        calls = self._counting(service)
        first = service.generate(building)
        second = service.generate(building)
        assert len(calls) == 1
        assert second == first

    def test_hit_is_independent_copy(self, building):
        service = LayoutService()
        first = service.generate(building)
        expected = len(first.elements)
        first.elements.clear()
        first.roof.roof_height = -1.0

        second = service.generate(building)
        assert len(second.elements) == expected
        assert second.roof.roof_height == pytest.approx(20 / 3)

        second.elements.clear()
        assert len(service.generate(building).elements) == expected

    def test_different_input_regenerates(self, building):
        service = LayoutService()
        calls = self._counting(service)
        service.generate(building)
        second = service.generate(building.with_colors(roof_color="#112233"))
        assert len(calls) == 2
        assert second.get("roof.panel.left").tags["color"] == "#112233"

    def test_eviction(self, building):
        service = LayoutService(cache_size=1)
        calls = self._counting(service)
        service.generate(building)
        service.generate(building.with_dimensions(width=30))
        service.generate(building)
        assert len(calls) == 3

    def test_disabled(self, building):
        service = LayoutService(cache_size=0)
        calls = self._counting(service)
        service.generate(building)
        service.generate(building)
        assert len(calls) == 2

    def test_clear(self, building):
        service = LayoutService()
        calls = self._counting(service)
        first = service.generate(building)
        service.clear_cache()
        again = service.generate(building)
        assert len(calls) == 2
        assert again.model_dump_json() == first.model_dump_json()

class TestServiceOperations:

    def test_roof(self, dims):
        roof = LayoutService().roof(dims)
        assert roof.roof_height == pytest.approx(20 / 3)
        assert roof.pitch_angle == pytest.approx(math.atan2(4, 12))

    def test_place_feature(self, dims, make_feature):
        feature = make_feature(WallPosition.RIGHT, x_offset=5, y_offset=2, height=6)
        transform = LayoutService().place_feature(dims, feature)
        assert transform.translation.x == pytest.approx(20.1)
        assert transform.translation.y == pytest.approx(5)
        assert transform.translation.z == pytest.approx(-5)
        assert transform.rotation.y == pytest.approx(-math.pi / 2)

    def test_place_feature_custom_clearance(self, dims, make_feature):
        transform = LayoutService().place_feature(
            dims, make_feature(), LayoutParams(feature_clearance=0.5),
        )
        assert transform.translation.z == pytest.approx(30.5)

    def test_list_rules(self):
        rules = LayoutService().list_rules()
        assert len(rules) == 6
        assert {"id": "roof.gutters", "name": "Gutters & Downspouts"} in rules

    def test_flat_building(self):
        layout = LayoutService().generate(
            Building(dimensions=BuildingDimensions(width=20, length=30, height=10, roof_pitch=0)),
        )
        assert layout.roof.roof_height == 0
        assert layout.gables == []

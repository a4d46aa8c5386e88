"""Tests for the HTTP API."""

from __future__ import annotations

import math

import pytest
from fastapi.testclient import TestClient

from configurator.api.main import app
from configurator.models import Building, BuildingLayout
from configurator.services.layout_service import LayoutService

client = TestClient(app)

BUILDING = {
    "dimensions": {"width": 40, "length": 60, "height": 14, "roof_pitch": 4},
    "features": [{
        "id": "door-1",
        "type": "walkDoor",
        "width": 3,
        "height": 7,
        "position": {"wall_position": "front", "x_offset": 4, "y_offset": 0, "alignment": "left"},
    }],
    "skylights": [{"width": 2, "length": 4, "x_offset": -3, "y_offset": 0}],
}


class TestLayoutEndpoint:

    def test_layout(self):
        response = client.post("/api/layout", json={"building": BUILDING})
        assert response.status_code == 200
        data = response.json()
        assert data["rule_count"] == 6
        assert data["element_count"] == len(data["layout"]["elements"])
        ids = {e["id"] for e in data["layout"]["elements"]}
        assert {"foundation", "wall.front", "roof.panel.left", "feature.door-1", "skylight.0"} <= ids
        assert data["layout"]["warnings"] == []
        assert data["layout"]["roof"]["roof_height"] == pytest.approx(20 / 3)

    def test_layout_with_config(self):
        response = client.post("/api/layout", json={
            "building": BUILDING,
            "config": {"disabled_rules": ["roof.gutters", "wall.beams"]},
        })
        assert response.status_code == 200
        types = {e["type"] for e in response.json()["layout"]["elements"]}
        assert "gutter" not in types
        assert "beam" not in types

    def test_matches_service(self):
        building = Building.model_validate(BUILDING)
        expected = LayoutService(cache_size=0).generate(building)
        response = client.post("/api/layout", json={"building": BUILDING})
        assert BuildingLayout.model_validate(response.json()["layout"]) == expected

    def test_invalid_dimensions(self):
        bad = {**BUILDING, "dimensions": {"width": -1, "length": 60, "height": 14, "roof_pitch": 4}}
        assert client.post("/api/layout", json={"building": bad}).status_code == 422

    def test_unknown_feature_type(self):
        feature = {**BUILDING["features"][0], "type": "garageDoor"}
        bad = {**BUILDING, "features": [feature]}
        assert client.post("/api/layout", json={"building": bad}).status_code == 422


class TestRoofEndpoint:

    def test_roof(self):
        response = client.get("/api/roof", params={"width": 40, "roof_pitch": 4})
        assert response.status_code == 200
        data = response.json()
        assert data["roof_height"] == pytest.approx(20 / 3)
        assert data["pitch_angle"] == pytest.approx(math.atan2(4, 12))
        assert data["total_height"] == pytest.approx(14 + 20 / 3)

    def test_rejects_bad_width(self):
        response = client.get("/api/roof", params={"width": -1, "roof_pitch": 4})
        assert response.status_code == 422


class TestFeatureEndpoint:

    def test_place(self):
        response = client.post("/api/features/place", json={
            "dimensions": BUILDING["dimensions"],
            "feature": BUILDING["features"][0],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["feature_id"] == "door-1"
        translation = data["transform"]["translation"]
        assert translation["x"] == pytest.approx(-14.5)
        assert translation["y"] == pytest.approx(3.5)
        assert translation["z"] == pytest.approx(30.1)


class TestMetaEndpoints:

    def test_rules(self):
        response = client.get("/api/rules")
        assert response.status_code == 200
        assert {r["id"] for r in response.json()} == {
            "site.foundation", "wall.panels", "wall.beams", "wall.features",
            "roof.panels", "roof.gutters",
        }

    def test_health(self):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

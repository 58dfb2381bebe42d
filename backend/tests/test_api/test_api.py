"""Tests for API endpoints."""

from __future__ import annotations

import json
import math

import pytest
from fastapi.testclient import TestClient

from kuchisabishii.main import app
from tests.conftest import BASIC_AXES_JSON


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["axes_registered"] == 11


def test_axes():
    response = client.get("/api/axes")
    assert response.status_code == 200
    data = response.json()
    assert [a["axis"] for a in data["axes"]][:3] == ["sweet", "salty", "sour"]
    assert data["axes"][6]["category"] == "texture"
    assert data["presets"] == ["basic", "onboarding", "enhanced"]


def test_layout_basic_preset():
    response = client.post("/api/radar/layout", json={"axes": BASIC_AXES_JSON, "preset": "basic"})
    assert response.status_code == 200
    data = response.json()
    assert data["center"] == [100.0, 100.0]
    assert len(data["axis_anchor_points"]) == 5
    assert data["data_points"][0] == [100.0, 100.0]
    x, y = data["data_points"][1]
    assert math.hypot(x - 100, y - 100) == pytest.approx(70.0)
    assert data["polygon"][0] == data["polygon"][-1]
    assert len(data["polygon"]) == 6


def test_layout_overrides():
    response = client.post("/api/radar/layout", json={
        "axes": BASIC_AXES_JSON,
        "preset": "basic",
        "center_x": 0,
        "center_y": 0,
        "radius": 10,
        "scale_max": 10,
        "label_offset": 5,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["radius"] == 10
    # salty = 5 on 0-10 → half radius
    x, y = data["data_points"][1]
    assert math.hypot(x, y) == pytest.approx(5.0)
    lx, ly = data["label_points"][0]
    assert math.hypot(lx, ly) == pytest.approx(15.0)


def test_layout_too_few_axes():
    response = client.post("/api/radar/layout", json={"axes": BASIC_AXES_JSON[:2]})
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "InvalidAxisCount"


def test_layout_bad_radius():
    response = client.post("/api/radar/layout", json={"axes": BASIC_AXES_JSON, "radius": 0})
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "InvalidRadius"


@pytest.mark.parametrize("field, error", [
    ("radius", "InvalidRadius"),
    ("center_x", "InvalidGeometry"),
    ("scale_max", "InvalidScale"),
])
def test_layout_overflowing_number(field, error):
    # 1e999 parses to inf
    body = json.dumps({"axes": BASIC_AXES_JSON})[:-1] + f', "{field}": 1e999}}'
    response = client.post(
        "/api/radar/layout", content=body, headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == error


def test_layout_bad_scale():
    response = client.post("/api/radar/layout", json={
        "axes": BASIC_AXES_JSON,
        "scale_min": 5,
        "scale_max": 5,
    })
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "InvalidScale"


def test_layout_unknown_preset():
    response = client.post("/api/radar/layout", json={"axes": BASIC_AXES_JSON, "preset": "giant"})
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "KeyError"


def test_svg():
    response = client.post("/api/radar/svg", json={
        "axes": BASIC_AXES_JSON,
        "preset": "basic",
        "title": "My palate",
    })
    assert response.status_code == 200
    svg = response.json()["svg"]
    assert "<polygon" in svg
    assert "<title>My palate</title>" in svg


def test_slider_percent():
    response = client.post("/api/slider/percent", json={"value": 7, "scale_min": 0, "scale_max": 10})
    assert response.status_code == 200
    assert response.json()["percent"] == 70


def test_slider_value():
    response = client.post("/api/slider/value", json={"percent": 70, "scale_min": 0, "scale_max": 10})
    assert response.status_code == 200
    assert response.json()["value"] == 7


def test_slider_value_snapped():
    response = client.post("/api/slider/value", json={"percent": 68.4, "snap": True})
    assert response.status_code == 200
    assert response.json()["value"] == pytest.approx(6.8)


def test_slider_bad_scale():
    response = client.post("/api/slider/percent", json={"value": 1, "scale_min": 3, "scale_max": 1})
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "InvalidScale"


def test_profile_summary():
    response = client.post("/api/profile/summary", json={
        "profile": {"sweet": 0, "salty": 5, "sour": 2.5, "bitter": 0, "umami": 5},
        "preset": "basic",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["overall_intensity"] == 2.5
    assert data["dominant_axis"] == "Salty"
    assert data["personality"] == "Savory Lover"
    assert data["top_axes"][0] == ["Salty", 5.0]


def test_profile_summary_unknown_axis():
    response = client.post("/api/profile/summary", json={"profile": {"crispy": 3}})
    assert response.status_code == 422


def test_compare_identical():
    profile = {"sweet": 7, "umami": 9, "cold": 2}
    response = client.post("/api/profile/compare", json={"a": profile, "b": profile})
    assert response.status_code == 200
    data = response.json()
    assert data["similarity"] == pytest.approx(1.0)
    assert data["distance"] == 0.0

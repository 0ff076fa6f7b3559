"""
HTTP layer tests.
"""

import pytest
from fastapi.testclient import TestClient

from blockdraft.main import app


CANONICAL = {
    "bodyHeight": 179,
    "chestGirth": 100,
    "waistGirth": 90,
    "hipGirth": 102,
    "sleeveLength": 64,
}


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


class TestHealth:

    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"


class TestMeasurements:

    def test_normalize(self, client):
        r = client.post("/api/v1/measurements", json={"measurements": CANONICAL})
        assert r.status_code == 200
        body = r.json()
        assert body["derived"]["scye_depth"] == 25.0
        assert body["derived"]["back_waist_length"] == 44.75
        assert body["summary"][0]["key"] == "body_height"

    def test_inches(self, client):
        r = client.post(
            "/api/v1/measurements",
            json={"measurements": {"chest_girth": 40}, "unit": "inches"},
        )
        assert r.status_code == 200
        assert r.json()["derived"]["chest_girth"] == pytest.approx(101.60, abs=0.005)

    def test_invalid_unit(self, client):
        r = client.post(
            "/api/v1/measurements",
            json={"measurements": CANONICAL, "unit": "cubits"},
        )
        assert r.status_code == 422

    def test_invalid_unit_on_measurements(self, client):
        r = client.post(
            "/api/v1/measurements",
            json={"measurements": {**CANONICAL, "unit": "cubits"}},
        )
        assert r.status_code == 422
        assert "cubits" in r.json()["detail"]

    def test_non_positive(self, client):
        r = client.post(
            "/api/v1/measurements",
            json={"measurements": {**CANONICAL, "waistGirth": -3}},
        )
        assert r.status_code == 422
        assert "waist_girth" in r.json()["detail"]


class TestBlocks:

    def test_list(self, client):
        r = client.get("/api/v1/blocks")
        assert r.status_code == 200
        assert {b["id"] for b in r.json()} == {"basic-bodice", "basic-sleeve"}

    def test_unknown_block_404(self, client):
        assert client.get("/api/v1/blocks/basic-skirt").status_code == 404

    def test_check_missing_waist(self, client):
        payload = {k: v for k, v in CANONICAL.items() if k != "waistGirth"}
        r = client.post("/api/v1/blocks/basic-bodice/check", json=payload)
        assert r.status_code == 200
        assert r.json() == {"block_id": "basic-bodice", "draftable": False, "missing": ["waist_girth"]}

    def test_draft_bodice(self, client):
        r = client.post("/api/v1/blocks/basic-bodice/draft", json={"measurements": CANONICAL})
        assert r.status_code == 200
        body = r.json()
        assert [p["type"] for p in body["pieces"]] == ["bodice-front", "bodice-back"]
        assert body["rendering"]["seam_allowance_cm"] == 2.0
        front = body["pieces"][0]
        assert list(front["seams"])[-1] == "center_front"
        assert set(front["darts"]) == {"bust_dart", "waist_dart"}

    def test_draft_ignores_unused_zero(self, client):
        payload = {**CANONICAL, "hipGirth": 0}
        r = client.post("/api/v1/blocks/basic-sleeve/draft", json={"measurements": payload})
        assert r.status_code == 200
        assert r.json()["pieces"][0]["dart_legs"] == {}

    def test_draft_missing_measurement(self, client):
        payload = {k: v for k, v in CANONICAL.items() if k != "waistGirth"}
        r = client.post("/api/v1/blocks/basic-bodice/draft", json={"measurements": payload})
        assert r.status_code == 422
        assert r.json()["detail"]["missing"] == ["waist_girth"]


class TestPatterns:

    def test_draft_sleeve(self, client):
        r = client.post(
            "/api/v1/patterns",
            json={"piece_type": "sleeve", "measurements": CANONICAL},
        )
        assert r.status_code == 200
        piece = r.json()["piece"]
        assert piece["points"]["underarm"] == pytest.approx({"x": 10.0, "y": -20.0})
        assert piece["darts"] == {}

    def test_draft_without_required_value(self, client):
        r = client.post(
            "/api/v1/patterns",
            json={"piece_type": "sleeve", "measurements": {"chestGirth": 100}},
        )
        assert r.status_code == 422

    def test_unknown_piece_type(self, client):
        r = client.post(
            "/api/v1/patterns",
            json={"piece_type": "skirt", "measurements": CANONICAL},
        )
        assert r.status_code == 422

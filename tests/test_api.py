"""End-to-end tests through the HTTP layer, backed by an in-memory store."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient
from fleet_api.database import get_store
from fleet_api.main import app


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def new_vehicle(**overrides):
    body = {
        "name": "Uno",
        "type": "car",
        "license_plate": "ABC1234",
        "brand_id": 5,
        "mileage_km": 12000,
        "color": "red",
    }
    body.update(overrides)
    return body


class TestSystem:
    def test_ping(self, client):
        resp = client.get("/api")
        assert resp.status_code == 200
        assert resp.json() == {"ping": "pong"}

    def test_health(self, client):
        body = client.get("/api/health").json()
        assert body["status"] == "ok"
        assert body["database"] == "ok"


class TestBrandEndpoints:
    def test_brand_lifecycle(self, client):
        assert len(client.get("/api/brand").json()) == 16

        resp = client.post("/api/brand", json={"name": "Suzuki", "country": "Japan"})
        assert resp.status_code == 200
        assert resp.json() == 'Brand created with name "Suzuki", country "Japan".'

        brand_id = client.get("/api/brand", params={"name": "Suzuki"}).json()[0]["id"]
        body = client.get(f"/api/brand/{brand_id}").json()
        assert (body["name"], body["country"]) == ("Suzuki", "Japan")

        resp = client.put(f"/api/brand/{brand_id}", json={"name": "Ferrari", "country": "Italy"})
        assert resp.json() == 'Brand updated to "Ferrari", country "Italy".'
        body = client.get(f"/api/brand/{brand_id}").json()
        assert (body["name"], body["country"]) == ("Ferrari", "Italy")

        assert client.delete(f"/api/brand/{brand_id}").status_code == 200
        resp = client.get(f"/api/brand/{brand_id}")
        assert resp.status_code == 404
        assert resp.json() == {"detail": "brand not found"}

    def test_filters_from_query_string(self, client):
        brands = client.get("/api/brand?country=France,Italy").json()
        assert {b["name"] for b in brands} == {"Citroën", "Fiat", "Peugeot", "Renault"}
        assert client.get("/api/brand?name=Audi&country=Japan").json() == []

    def test_unknown_filter_is_bad_request(self, client):
        resp = client.get("/api/brand?name%3D1%20OR%201=1")
        assert resp.status_code == 400

    def test_short_name_is_bad_request(self, client):
        resp = client.post("/api/brand", json={"name": "X", "country": "ABC"})
        assert resp.status_code == 400
        assert "characters" in resp.json()["detail"]

    def test_missing_field_is_unprocessable(self, client):
        assert client.post("/api/brand", json={"name": "Suzuki"}).status_code == 422

    def test_id_out_of_integer_range_is_bad_request(self, client):
        resp = client.get("/api/brand/99999999999999999999")
        assert resp.status_code == 400
        assert "too large" in resp.json()["detail"]


class TestDriverAndVehicleEndpoints:
    def test_empty_driver_list_is_not_found(self, client):
        resp = client.get("/api/driver")
        assert resp.status_code == 404
        assert resp.json() == {"detail": "no results"}

    def test_driver_roundtrip(self, client):
        client.post("/api/driver", json={"name": "Maria"})
        body = client.get("/api/driver/1").json()
        assert body["name"] == "Maria"
        assert body["registered_at"] is not None

    def test_negative_mileage_rejected_by_store(self, client):
        client.get("/api/brand")
        resp = client.post("/api/vehicle", json=new_vehicle(mileage_km=-5))
        assert resp.status_code == 400
        assert "CHECK constraint failed" in resp.json()["detail"]

    def test_vehicle_listing_with_brand(self, client):
        client.get("/api/brand")
        resp = client.post("/api/vehicle", json=new_vehicle())
        assert resp.json() == 'Vehicle created with name "Uno", plate "ABC1234".'

        rows = client.get("/api/vehicle", params={"brand": "Fiat"}).json()
        assert len(rows) == 1
        assert rows[0]["brand"] == "Fiat"
        assert client.get("/api/vehicle?type=truck").status_code == 404


class TestUsageEndpoints:
    @pytest.fixture
    def fleet(self, client):
        client.get("/api/brand")
        for name in ("João", "José", "Janaína"):
            client.post("/api/driver", json={"name": name})
        client.post("/api/vehicle", json=new_vehicle())
        client.post("/api/vehicle", json=new_vehicle(name="EcoSport", license_plate="XYZ9876", brand_id=6))
        return client

    def test_checkout_and_return(self, fleet):
        resp = fleet.post("/api/usage", json={"driver_id": 1, "vehicle_id": 1, "reasoning": "Trip"})
        assert resp.json() == "Usage record created."

        resp = fleet.post("/api/usage", json={"driver_id": 2, "vehicle_id": 1, "reasoning": "Work"})
        assert resp.status_code == 409
        assert resp.json() == {"detail": "vehicle already in use"}

        resp = fleet.post("/api/usage", json={"driver_id": 1, "vehicle_id": 2, "reasoning": "Travel"})
        assert resp.status_code == 409
        assert resp.json() == {"detail": "driver already in use"}

        assert fleet.put("/api/usage/1").json() == "Usage record finalized."
        record = fleet.get("/api/usage/1").json()
        assert record["end_date"] is not None
        assert (record["driver"], record["vehicle"]) == ("João", "Uno")

        resp = fleet.post("/api/usage", json={"driver_id": 3, "vehicle_id": 1, "reasoning": "Trip"})
        assert resp.json() == "Usage record created."

    def test_refinalize_is_conflict(self, fleet):
        fleet.post("/api/usage", json={"driver_id": 1, "vehicle_id": 1, "reasoning": "Trip"})
        fleet.put("/api/usage/1")
        assert fleet.put("/api/usage/1").status_code == 409

    def test_oversized_driver_id_is_bad_request(self, fleet):
        resp = fleet.post("/api/usage", json={"driver_id": 10**20, "vehicle_id": 1, "reasoning": "Trip"})
        assert resp.status_code == 400
        assert fleet.get("/api/usage").status_code == 404

    def test_unknown_record_not_found(self, fleet):
        assert fleet.put("/api/usage/99").json() == {"detail": "usage record not found"}
        assert fleet.delete("/api/usage/99").status_code == 404
        assert fleet.get("/api/usage").status_code == 404

    def test_delete_record(self, fleet):
        fleet.post("/api/usage", json={"driver_id": 2, "vehicle_id": 2, "reasoning": "Work"})
        assert fleet.delete("/api/usage/1").json() == "Usage record deleted."
        assert fleet.get("/api/usage/1").status_code == 404

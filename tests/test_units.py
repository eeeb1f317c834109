"""Test unit endpoints."""
import pytest


async def _create_unit(client, headers, number, rent=25000, status="Vacant"):
    resp = await client.post(
        "/api/units",
        json={"unit_number": number, "floor": number[0], "bedrooms": 2, "bathrooms": 1,
              "monthly_rent": rent, "status": status},
        headers=headers,
    )
    return resp


async def test_requires_session(client):
    resp = await client.get("/api/units")
    assert resp.status_code == 401
    resp = await client.get("/api/units", headers={"Authorization": "Bearer not-a-token"})
    assert resp.status_code == 401


async def test_create_and_list_units(client, auth_headers):
    resp = await _create_unit(client, auth_headers, "101")
    assert resp.status_code == 201
    data = resp.json()
    assert data["unit_number"] == "101"
    assert data["status"] == "Vacant"
    assert data["monthly_rent"] == 25000

    await _create_unit(client, auth_headers, "202", status="Maintenance")
    resp = await client.get("/api/units", headers=auth_headers)
    assert resp.status_code == 200
    assert [u["unit_number"] for u in resp.json()] == ["101", "202"]


async def test_list_search_and_status_filter(client, auth_headers):
    await _create_unit(client, auth_headers, "101")
    await _create_unit(client, auth_headers, "102")
    await _create_unit(client, auth_headers, "201", status="Maintenance")
    await client.post("/api/tenants", json={"name": "Jane Wanjiru", "unit": "102"}, headers=auth_headers)

    resp = await client.get("/api/units", params={"search": "jane"}, headers=auth_headers)
    assert [u["unit_number"] for u in resp.json()] == ["102"]

    resp = await client.get("/api/units", params={"search": "10"}, headers=auth_headers)
    assert [u["unit_number"] for u in resp.json()] == ["101", "102"]

    resp = await client.get("/api/units", params={"status": "Maintenance"}, headers=auth_headers)
    assert [u["unit_number"] for u in resp.json()] == ["201"]


async def test_duplicate_unit_number_rejected(client, auth_headers):
    await _create_unit(client, auth_headers, "101")
    resp = await _create_unit(client, auth_headers, "101")
    assert resp.status_code == 400
    assert "already exists" in resp.json()["detail"]


async def test_new_unit_cannot_start_occupied(client, auth_headers):
    resp = await _create_unit(client, auth_headers, "101", status="Occupied")
    assert resp.status_code == 400


async def test_invalid_payload(client, auth_headers):
    resp = await client.post("/api/units", json={"unit_number": "101", "monthly_rent": -5}, headers=auth_headers)
    assert resp.status_code == 422


async def test_summary(client, auth_headers):
    await _create_unit(client, auth_headers, "101", rent=25000)
    await _create_unit(client, auth_headers, "102", rent=10000)
    await client.post("/api/tenants", json={"name": "Jane", "unit": "101"}, headers=auth_headers)

    resp = await client.get("/api/units/summary", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {
        "total_units": 2,
        "occupied_units": 1,
        "vacant_units": 1,
        "maintenance_units": 0,
        "occupancy_rate": 50,
        "monthly_revenue": 25000,
    }


async def test_update_unit(client, auth_headers):
    unit = (await _create_unit(client, auth_headers, "101")).json()
    resp = await client.patch(f"/api/units/{unit['id']}", json={"monthly_rent": 27000, "status": "Maintenance"},
                              headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["monthly_rent"] == 27000
    assert resp.json()["status"] == "Maintenance"

    resp = await client.patch("/api/units/999", json={"bedrooms": 3}, headers=auth_headers)
    assert resp.status_code == 404


async def test_update_unit_rejects_null_required_fields(client, auth_headers):
    unit = (await _create_unit(client, auth_headers, "101")).json()
    for field in ("status", "bedrooms", "bathrooms"):
        resp = await client.patch(f"/api/units/{unit['id']}", json={field: None}, headers=auth_headers)
        assert resp.status_code == 422

    resp = await client.get("/api/units", headers=auth_headers)
    assert resp.json()[0]["status"] == "Vacant"
    assert resp.json()[0]["bedrooms"] == 2


async def test_delete_occupied_unit_rejected(client, auth_headers):
    unit = (await _create_unit(client, auth_headers, "101")).json()
    await client.post("/api/tenants", json={"name": "Jane", "unit": "101"}, headers=auth_headers)

    resp = await client.delete(f"/api/units/{unit['id']}", headers=auth_headers)
    assert resp.status_code == 400
    assert "occupied" in resp.json()["detail"]

    resp = await client.get("/api/units", headers=auth_headers)
    assert len(resp.json()) == 1


async def test_delete_vacant_unit(client, auth_headers):
    unit = (await _create_unit(client, auth_headers, "101")).json()
    resp = await client.delete(f"/api/units/{unit['id']}", headers=auth_headers)
    assert resp.status_code == 204
    resp = await client.delete(f"/api/units/{unit['id']}", headers=auth_headers)
    assert resp.status_code == 404


async def test_reconcile_endpoint(client, auth_headers, store):
    store.insert("units", {"unit_number": "101", "status": "Occupied", "tenant_name": "Ghost"})
    resp = await client.post("/api/units/reconcile", headers=auth_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["conflicts"] == []
    assert data["updated"] == [
        {"unit_number": "101", "previous_status": "Occupied", "status": "Vacant", "tenant_name": None}
    ]

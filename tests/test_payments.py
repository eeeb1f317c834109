"""Test payment endpoints."""
from datetime import date


async def _pay(client, headers, **overrides):
    payload = {"tenant_name": "Jane", "unit": "101", "amount": 1000, "status": "Pending",
               "payment_date": "2026-03-01"}
    payload.update(overrides)
    return await client.post("/api/payments", json=payload, headers=headers)


async def test_create_and_list(client, auth_headers):
    resp = await _pay(client, auth_headers)
    assert resp.status_code == 201
    assert resp.json()["amount"] == 1000
    assert resp.json()["status"] == "Pending"

    await _pay(client, auth_headers, status="Overdue")
    resp = await client.get("/api/payments", headers=auth_headers)
    assert len(resp.json()) == 2

    resp = await client.get("/api/payments", params={"status": "Overdue"}, headers=auth_headers)
    assert [p["status"] for p in resp.json()] == ["Overdue"]


async def test_amount_must_be_positive(client, auth_headers):
    resp = await _pay(client, auth_headers, amount=0)
    assert resp.status_code == 422
    resp = await _pay(client, auth_headers, status="Refunded")
    assert resp.status_code == 422


async def test_paid_without_date_defaults_to_today(client, auth_headers):
    resp = await _pay(client, auth_headers, status="Paid", payment_date=None)
    assert resp.json()["payment_date"] == date.today().isoformat()


async def test_summary_for_month(client, auth_headers):
    await _pay(client, auth_headers, status="Paid", amount=1000, payment_date="2026-03-05")
    await _pay(client, auth_headers, status="Pending", amount=500, payment_date="2026-03-10")
    await _pay(client, auth_headers, status="Overdue", amount=300, payment_date="2026-02-10")

    resp = await client.get("/api/payments/summary", params={"month": 3, "year": 2026}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {
        "period_label": "Mar 2026",
        "total_collected": 1000,
        "total_pending": 500,
        "total_overdue": 0,
        "pending_payments": 1,
        "overdue_payments": 0,
        "collection_rate": 50.0,
    }


async def test_summary_defaults_to_current_month(client, auth_headers):
    today = date.today()
    await _pay(client, auth_headers, status="Paid", payment_date=today.isoformat())
    resp = await client.get("/api/payments/summary", headers=auth_headers)
    data = resp.json()
    assert data["total_collected"] == 1000
    assert data["collection_rate"] == 100.0


async def test_summary_empty_month(client, auth_headers):
    resp = await client.get("/api/payments/summary", params={"month": 1, "year": 2020}, headers=auth_headers)
    assert resp.json()["collection_rate"] == 0


async def test_record_payment(client, auth_headers):
    payment = (await _pay(client, auth_headers, status="Overdue")).json()

    resp = await client.patch(f"/api/payments/{payment['id']}/record", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == "Paid"
    assert resp.json()["payment_date"] == "2026-03-01"

    resp = await client.patch(f"/api/payments/{payment['id']}/record", headers=auth_headers)
    assert resp.status_code == 400

    resp = await client.patch("/api/payments/999/record", headers=auth_headers)
    assert resp.status_code == 404


async def test_record_undated_payment_uses_today(client, auth_headers):
    payment = (await _pay(client, auth_headers, payment_date=None)).json()
    resp = await client.patch(f"/api/payments/{payment['id']}/record", headers=auth_headers)
    assert resp.json()["payment_date"] == date.today().isoformat()


async def test_delete_payment(client, auth_headers):
    payment = (await _pay(client, auth_headers)).json()
    resp = await client.delete(f"/api/payments/{payment['id']}", headers=auth_headers)
    assert resp.status_code == 204
    resp = await client.delete(f"/api/payments/{payment['id']}", headers=auth_headers)
    assert resp.status_code == 404

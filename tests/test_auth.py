"""Test sign-up, sign-in, session lookup, sign-out and password change."""
from conftest import TEST_EMAIL, TEST_PASSWORD


def signup_payload(**overrides):
    payload = {
        "full_name": "Grace Owner",
        "email": "owner@example.com",
        "password": "secret123",
        "confirm_password": "secret123",
    }
    payload.update(overrides)
    return payload


async def test_signup_rules(client):
    resp = await client.post("/api/auth/signup", json=signup_payload(password="123", confirm_password="123"))
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Password must be at least 6 characters"

    resp = await client.post("/api/auth/signup", json=signup_payload(confirm_password="different"))
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Passwords do not match"

    resp = await client.post("/api/auth/signup", json=signup_payload())
    assert resp.status_code == 201
    assert resp.json()["email"] == "owner@example.com"

    resp = await client.post("/api/auth/signup", json=signup_payload(email="Owner@Example.com"))
    assert resp.status_code == 400


async def test_signin_and_me(client):
    await client.post("/api/auth/signup", json=signup_payload())

    resp = await client.post("/api/auth/signin", json={"email": "owner@example.com", "password": "wrong-pass"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid login credentials"

    resp = await client.post("/api/auth/signin", json={"email": "OWNER@example.com", "password": "secret123"})
    assert resp.status_code == 200
    token = resp.json()["token"]
    assert resp.json()["user"]["full_name"] == "Grace Owner"

    resp = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200
    assert resp.json()["email"] == "owner@example.com"


async def test_me_without_token(client):
    resp = await client.get("/api/auth/me")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Missing token"


async def test_signout_invalidates_token(client, auth_headers):
    resp = await client.post("/api/auth/signout", headers=auth_headers)
    assert resp.status_code == 204

    resp = await client.get("/api/auth/me", headers=auth_headers)
    assert resp.status_code == 401
    resp = await client.get("/api/units", headers=auth_headers)
    assert resp.status_code == 401


async def test_change_password(client, auth_headers):
    resp = await client.post("/api/auth/change-password", json={
        "current_password": "not-it", "new_password": "newsecret", "confirm_password": "newsecret",
    }, headers=auth_headers)
    assert resp.status_code == 400

    resp = await client.post("/api/auth/change-password", json={
        "current_password": TEST_PASSWORD, "new_password": "short", "confirm_password": "short",
    }, headers=auth_headers)
    assert resp.status_code == 400

    resp = await client.post("/api/auth/change-password", json={
        "current_password": TEST_PASSWORD, "new_password": "newsecret", "confirm_password": "newsecret",
    }, headers=auth_headers)
    assert resp.status_code == 204

    resp = await client.post("/api/auth/signin", json={"email": TEST_EMAIL, "password": TEST_PASSWORD})
    assert resp.status_code == 401
    resp = await client.post("/api/auth/signin", json={"email": TEST_EMAIL, "password": "newsecret"})
    assert resp.status_code == 200


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "database": True}

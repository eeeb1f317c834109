"""
Test fixtures for PropertyHub backend tests.

Points the app at an in-memory SQLite database (shared through StaticPool)
and recreates every table before each test, so tests never touch a real
server and never see each other's rows.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from httpx import AsyncClient, ASGITransport

from database import SessionLocal, engine, init_db
from main import app
from models import Base
from services.record_store import RecordStore

TEST_EMAIL = "manager@example.com"
TEST_PASSWORD = "secret123"


# ── Fixtures ───────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def _fresh_schema():
    """Drop and recreate all tables around each test."""
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db):
    return RecordStore(db)


@pytest.fixture
async def client():
    """Async test client for the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def auth_headers(client):
    """Sign up a manager account and return a bearer header for it."""
    resp = await client.post("/api/auth/signup", json={
        "full_name": "Test Manager",
        "email": TEST_EMAIL,
        "password": TEST_PASSWORD,
        "confirm_password": TEST_PASSWORD,
    })
    assert resp.status_code == 201
    resp = await client.post("/api/auth/signin", json={"email": TEST_EMAIL, "password": TEST_PASSWORD})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['token']}"}

"""Shared fixtures: throw-away SQLite database, eager Celery, HTTP clients."""

import os
import tempfile

# Engines are created at import time, so the database must be chosen first
_db_dir = tempfile.mkdtemp(prefix="flatscout-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("SECRET_KEY", "test-secret")

import httpx
import pytest

from flatscout.main import app
from flatscout.models.base import Base, engine, sync_engine
from flatscout.tasks.celery_app import celery_app

celery_app.conf.task_always_eager = True

PASSWORD = "correct-horse"


def profile_payload(**overrides) -> dict:
    """A valid flatmate profile body (camelCase, as the frontend sends it)."""
    habits = {"smoking": "No", "pets": "No", "sleepTime": "Early", "cleanliness": "Medium"}
    habits.update(overrides.pop("habits", {}))
    payload = {
        "name": "Asha",
        "photoUrl": None,
        "gender": "Male",
        "age": 27,
        "occupation": "Engineer",
        "hometown": "Pune",
        "languages": ["English", "Hindi"],
        "foodPreference": "Vegetarian",
        "socialPreference": "Ambivert",
        "hobbies": ["Reading"],
        "workMode": "Hybrid",
        "guestPolicy": "Occasional",
        "preferredGender": "Female",
        "budget": 500,
        "locationPreference": "Koramangala",
        "habits": habits,
        "bio": "Quiet and tidy.",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
async def database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
    sync_engine.dispose()


@pytest.fixture
async def client_factory(database):
    """Build independent clients; each keeps its own session cookie."""
    clients = []

    def make() -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")
        clients.append(client)
        return client

    yield make
    for client in clients:
        await client.aclose()


@pytest.fixture
async def client(client_factory):
    return client_factory()


@pytest.fixture
def register(client_factory):
    """Register a user on a fresh client and return (client, user json)."""

    async def _register(email: str, name: str = "Test User", **extra):
        client = client_factory()
        resp = await client.post(
            "/api/v1/users/register",
            json={"email": email, "name": name, "password": PASSWORD, **extra},
        )
        assert resp.status_code == 201, resp.text
        return client, resp.json()

    return _register

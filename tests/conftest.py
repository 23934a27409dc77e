"""
Shared pytest fixtures.

Fixture Hierarchy:
    temp_db → tracker_service → test_app → client

Every test gets a fresh SQLite file, a deterministic clock and its own
service instance, injected into the real routers via dependency_overrides.
"""
import itertools
import os
import tempfile

import pytest
from fastapi.testclient import TestClient

from core import dependencies as deps
from core.datetime_utils import MonotonicClock
from repositories import Database
from services import HealthTrackerService


@pytest.fixture
def temp_db():
    """A fresh SQLite database in a temp file."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = Database(db_path=db_path)
    yield db

    for suffix in ("", "-wal", "-shm"):
        if os.path.exists(db_path + suffix):
            os.unlink(db_path + suffix)


@pytest.fixture
def clock():
    """A clock that ticks one microsecond per reading."""
    ticks = itertools.count(start=1_700_000_000_000_000_000, step=1_000)
    return MonotonicClock(source=lambda: next(ticks))


@pytest.fixture
def tracker_service(temp_db, clock):
    return HealthTrackerService(db=temp_db, clock=clock)


@pytest.fixture
def test_app(temp_db, tracker_service):
    """The production app with its dependencies pointed at the test service."""
    from main import create_app

    app = create_app()
    app.dependency_overrides[deps.get_database] = lambda: temp_db
    app.dependency_overrides[deps.get_tracker_service] = lambda: tracker_service

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app):
    return TestClient(test_app)


# =============================================================================
# PAYLOAD HELPERS
# =============================================================================

def user_payload(**overrides):
    payload = {
        "name": "Alice",
        "contact": "555",
        "email": "a@x.com",
        "user_type": "Elderly",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_user(client):
    """Create a user over HTTP and return the response body."""
    counter = itertools.count(1)

    def _make_user(**overrides):
        n = next(counter)
        overrides.setdefault("email", f"user{n}@example.com")
        overrides.setdefault("name", f"User {n}")
        response = client.post("/api/v1/users", json=user_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()

    return _make_user

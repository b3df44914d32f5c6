"""Pytest configuration and fixtures."""

import tempfile
from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from exercise_tracker.settings import Settings
from exercise_tracker.utils.dates import FixedClock
from exercise_tracker.web import create_app

TODAY = date(2024, 3, 5)


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def settings(temp_db_path):
    """Settings pointing at a temporary database."""
    return Settings(DATABASE_PATH=temp_db_path, DATABASE_POOL_SIZE=2, _env_file=None)


@pytest.fixture
def clock():
    """A clock frozen at TODAY."""
    return FixedClock(TODAY)


@pytest.fixture
def client(settings, clock):
    """Test client with the app lifespan running."""
    app = create_app(settings, clock=clock)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_user(client):
    """Create a user through the API and return its JSON."""

    def _create(username: str) -> dict:
        resp = client.post("/api/users", data={"username": username})
        assert resp.status_code == 200
        return resp.json()

    return _create


@pytest.fixture
def add_exercise(client):
    """Add an exercise through the API and return the response."""

    def _add(user_id: str, description: str, duration, exercise_date: str | None = None):
        payload = {"description": description, "duration": duration}
        if exercise_date is not None:
            payload["date"] = exercise_date
        return client.post(f"/api/users/{user_id}/exercises", json=payload)

    return _add

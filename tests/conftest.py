"""Shared fixtures: every test runs against a fresh SQLite database."""

from __future__ import annotations

import os
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / f"activities-test-{os.getpid()}.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SEED_ON_STARTUP"] = "false"

from app.domain.entities import Activity  # noqa: E402


@pytest.fixture(autouse=True)
def database():
    """Recreate the schema before each test."""

    from app.infrastructure import database

    database.initialize_database()
    database.Base.metadata.drop_all(bind=database.engine)
    database.Base.metadata.create_all(bind=database.engine)
    yield database
    database.Base.metadata.drop_all(bind=database.engine)


@pytest.fixture()
def session(database):
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client():
    """Return a test client bound to a clean application instance."""

    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


def make_activity(activity_id: str | None = "1", **overrides) -> Activity:
    values = {
        "id": activity_id,
        "title": "Run",
        "date": datetime(2024, 1, 1, 9, 30),
        "description": "Morning run along the river",
        "category": "sport",
        "city": "London",
        "venue": "Hyde Park",
        "latitude": 51.507,
        "longitude": -0.165,
    }
    values.update(overrides)
    return Activity(**values)


def pytest_sessionfinish(session, exitstatus):
    from app.infrastructure import database

    database.engine.dispose()
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()

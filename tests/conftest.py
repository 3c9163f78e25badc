"""
Pytest fixtures for the Rent-a-Spot API tests.

Every test gets its own SQLite file; ``settings.database_url`` is
pointed at it before the schema is created.
"""

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from rent_a_spot_api.app.core.config import settings
from rent_a_spot_api.app.core.db import init_db
from rent_a_spot_api.app.main import app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the application at a fresh database file and migrate it."""
    path = tmp_path / "rent_a_spot_test.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def client(db_path):
    """FastAPI test client; entering it runs the startup hook."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def owner(client) -> Dict[str, Any]:
    resp = client.post("/user", json={"name": "Mona Adel", "email": "mona@example.com"})
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def other_owner(client) -> Dict[str, Any]:
    resp = client.post("/user", json={"name": "Karim Said", "email": "karim@example.com"})
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def parking_payload(owner) -> Dict[str, Any]:
    """A valid listing body owned by ``owner``."""
    return {
        "name": "Downtown Parking",
        "address": "12 Tahrir Square",
        "city": "Cairo",
        "lat": 30.0444,
        "long": 31.2357,
        "user_id": owner["id"],
    }

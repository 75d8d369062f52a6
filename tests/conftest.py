"""
Shared fixtures for employee directory tests.

Every test that touches the database gets its own SQLite file under
``tmp_path``; the settings object is patched so the connection layer
and the application both use it.
"""

import pytest
from fastapi.testclient import TestClient

from employee_directory_api.app.core.config import settings
from employee_directory_api.app.core.db import init_db


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the app at a fresh, initialised database file."""
    db_path = tmp_path / "employees.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    monkeypatch.setattr(settings, "strict_not_found", False)
    init_db()
    return db_path


@pytest.fixture
def client(database):
    """TestClient bound to the temporary database."""
    from employee_directory_api.app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def ann_lee():
    """A valid employee payload in wire format."""
    return {
        "name": "Ann Lee",
        "employeeId": "E1",
        "email": "a@b.com",
        "phone": "1234567890",
        "department": "HR",
        "role": "Clerk",
        "joiningDate": "2024-01-01",
    }


@pytest.fixture
def bob_ray():
    return {
        "name": "Bob Ray",
        "employeeId": "E2",
        "email": "bob.ray@example.com",
        "phone": "9876543210",
        "department": "Engineering",
        "role": "Developer",
        "joiningDate": "2023-06-15",
    }


@pytest.fixture
def cara_diaz():
    return {
        "name": "Cara Diaz",
        "employeeId": "E3",
        "email": "cara@example.org",
        "phone": "5551234567",
        "department": "Marketing",
        "role": "Engineering Liaison",
        "joiningDate": "2022-02-28",
    }

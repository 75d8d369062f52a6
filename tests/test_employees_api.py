"""
Tests for the employee HTTP endpoints.

Exercises the FastAPI application end to end with TestClient against
a temporary database.
"""

import logging
import sqlite3
from datetime import date, timedelta
from unittest.mock import patch

import pytest

from employee_directory_api.app.core.config import settings

BASE = "/api/employees"


def add(client, payload):
    response = client.post(BASE, json=payload)
    assert response.status_code == 200, response.json()
    return response.json()["id"]


class TestAddEmployee:
    """Tests for POST /employees."""

    def test_add_then_list(self, client, ann_lee):
        response = client.post(BASE, json=ann_lee)
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Employee added successfully"

        listed = client.get(BASE).json()
        assert len(listed) == 1
        record = listed[0]
        assert record.pop("id") == body["id"]
        assert record == ann_lee

    def test_future_joining_date_is_rejected(self, client, ann_lee):
        ann_lee["joiningDate"] = (date.today() + timedelta(days=1)).isoformat()
        response = client.post(BASE, json=ann_lee)
        assert response.status_code == 400
        assert response.json() == {
            "errors": {"joiningDate": "Joining date cannot be in the future"}
        }
        assert client.get(BASE).json() == []

    def test_all_field_errors_returned(self, client):
        response = client.post(BASE, json={"name": "X1"})
        assert response.status_code == 400
        errors = response.json()["errors"]
        assert set(errors) == {
            "name",
            "employeeId",
            "email",
            "phone",
            "department",
            "role",
            "joiningDate",
        }

    def test_duplicate_employee_id(self, client, ann_lee, bob_ray):
        add(client, ann_lee)
        bob_ray["employeeId"] = "E1"
        response = client.post(BASE, json=bob_ray)
        assert response.status_code == 409
        assert response.json() == {"error": "Employee ID already exists"}

    def test_malformed_body(self, client):
        response = client.post(BASE, content=b"not json", headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"body"}

    def test_database_failure_is_hidden(self, client, ann_lee):
        with patch(
            "employee_directory_api.app.services.employee_service.get_connection",
            side_effect=sqlite3.OperationalError("disk I/O error"),
        ):
            response = client.post(BASE, json=ann_lee)
        assert response.status_code == 500
        assert response.json() == {"error": "Database error"}


class TestDatabaseFailure:
    """Every route answers 500 with a generic body when the database is unavailable."""

    @pytest.mark.parametrize(
        "method, path, params",
        [
            ("PUT", f"{BASE}/1", None),
            ("DELETE", f"{BASE}/1", None),
            ("GET", BASE, None),
            ("GET", BASE, {"query": "x"}),
            ("GET", f"{BASE}/search", {"query": "x"}),
            ("GET", f"{BASE}/1", None),
        ],
    )
    def test_unreachable_database(self, client, ann_lee, method, path, params):
        body = ann_lee if method == "PUT" else None
        with patch(
            "employee_directory_api.app.services.employee_service.get_connection",
            side_effect=sqlite3.OperationalError("unable to open database file"),
        ):
            response = client.request(method, path, params=params, json=body)
        assert response.status_code == 500
        assert response.json() == {"error": "Database error"}

    def test_failure_is_logged_once(self, client, ann_lee, caplog):
        with caplog.at_level(logging.ERROR), patch(
            "employee_directory_api.app.services.employee_service.get_connection",
            side_effect=sqlite3.OperationalError("disk I/O error"),
        ):
            response = client.post(BASE, json=ann_lee)
        assert response.status_code == 500
        errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert len(errors) == 1
        assert errors[0].name == "employee_directory_api.app.services.employee_service"


class TestListAndSearch:
    """Tests for GET /employees with and without a query."""

    def test_empty_list(self, client):
        response = client.get(BASE)
        assert response.status_code == 200
        assert response.json() == []

    def test_search(self, client, ann_lee, bob_ray, cara_diaz):
        for payload in (ann_lee, bob_ray, cara_diaz):
            add(client, payload)
        response = client.get(BASE, params={"query": "Engineering"})
        assert response.status_code == 200
        results = response.json()["results"]
        assert [r["employeeId"] for r in results] == ["E2", "E3"]

    def test_blank_query_is_rejected(self, client):
        response = client.get(BASE, params={"query": ""})
        assert response.status_code == 400
        assert response.json() == {"error": "Query parameter is missing"}

    def test_space_is_searched(self, client, ann_lee):
        add(client, ann_lee)
        add(
            client,
            {
                "name": "Zed",
                "employeeId": "E9",
                "email": "zed@example.com",
                "phone": "1112223334",
                "department": "HR",
                "role": "Clerk",
                "joiningDate": "2021-01-01",
            },
        )
        response = client.get(BASE, params={"query": " "})
        assert response.status_code == 200
        assert [r["name"] for r in response.json()["results"]] == ["Ann Lee"]

    def test_search_path_requires_query(self, client):
        response = client.get(f"{BASE}/search")
        assert response.status_code == 400
        assert response.json() == {"error": "Query parameter is missing"}

    def test_search_path(self, client, ann_lee, bob_ray):
        add(client, ann_lee)
        add(client, bob_ray)
        response = client.get(f"{BASE}/search", params={"query": "clerk"})
        assert response.status_code == 200
        assert [r["name"] for r in response.json()["results"]] == ["Ann Lee"]

    def test_get_one(self, client, ann_lee):
        employee_pk = add(client, ann_lee)
        response = client.get(f"{BASE}/{employee_pk}")
        assert response.status_code == 200
        assert response.json()["email"] == ann_lee["email"]

    def test_get_missing(self, client):
        response = client.get(f"{BASE}/404")
        assert response.status_code == 404
        assert response.json() == {"error": "Employee not found"}


class TestUpdateEmployee:
    """Tests for PUT /employees/{id}."""

    def test_update(self, client, ann_lee):
        employee_pk = add(client, ann_lee)
        response = client.put(
            f"{BASE}/{employee_pk}",
            json={"role": "Supervisor", "joiningDate": "2024-01-01T00:00:00.000Z"},
        )
        assert response.status_code == 200
        assert response.json() == {
            "message": "Employee updated successfully",
            "result": {"affectedRows": 1},
        }
        record = client.get(f"{BASE}/{employee_pk}").json()
        assert record["role"] == "Supervisor"
        assert record["joiningDate"] == "2024-01-01"

    def test_missing_id_still_succeeds(self, client, ann_lee):
        response = client.put(f"{BASE}/999", json=ann_lee)
        assert response.status_code == 200
        assert response.json()["result"] == {"affectedRows": 0}

    def test_missing_id_in_strict_mode(self, client, ann_lee, monkeypatch):
        monkeypatch.setattr(settings, "strict_not_found", True)
        response = client.put(f"{BASE}/999", json=ann_lee)
        assert response.status_code == 404
        assert response.json() == {"error": "Employee not found"}

    def test_supplied_fields_are_validated(self, client, ann_lee):
        employee_pk = add(client, ann_lee)
        response = client.put(f"{BASE}/{employee_pk}", json={"phone": "0000000000", "name": "Ann 2"})
        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"phone", "name"}
        assert client.get(f"{BASE}/{employee_pk}").json()["phone"] == ann_lee["phone"]

    def test_non_integer_id(self, client, ann_lee):
        response = client.put(f"{BASE}/abc", json=ann_lee)
        assert response.status_code == 400
        assert "employee_pk" in response.json()["errors"]


class TestDeleteEmployee:
    """Tests for DELETE /employees/{id}."""

    def test_delete(self, client, ann_lee):
        employee_pk = add(client, ann_lee)
        response = client.delete(f"{BASE}/{employee_pk}")
        assert response.status_code == 200
        assert response.json() == {"message": "Employee deleted successfully"}
        assert client.get(BASE).json() == []

    def test_delete_missing_is_idempotent(self, client):
        assert client.delete(f"{BASE}/777").status_code == 200
        assert client.delete(f"{BASE}/777").status_code == 200

    def test_delete_missing_in_strict_mode(self, client, monkeypatch):
        monkeypatch.setattr(settings, "strict_not_found", True)
        assert client.delete(f"{BASE}/777").status_code == 404


class TestMethodNotAllowed:
    @pytest.mark.parametrize(
        "method, path",
        [("patch", f"{BASE}/1"), ("post", f"{BASE}/1"), ("delete", BASE), ("put", BASE)],
    )
    def test_unsupported_method(self, client, method, path):
        response = client.request(method.upper(), path)
        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}

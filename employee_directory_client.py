"""Employee directory API client.

This module defines a small client wrapper around the employee
directory REST API.  It is used by the ``manage_employees`` console and
can be reused by any other front end.  The client uses the
``requests`` library internally to make HTTP calls.

The client exposes one method per operation:

* :meth:`list_employees` – return every employee.
* :meth:`search_employees` – substring search across the text fields.
* :meth:`get_employee` – fetch a single employee by its id.
* :meth:`add_employee` – create a new employee.
* :meth:`update_employee` – edit an employee in place.
* :meth:`delete_employee` – remove an employee.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``.  On failure ``error`` is a dictionary with the keys
``status_code``, ``message`` and ``errors`` (the field error mapping
returned for rejected records, otherwise empty).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000/api"

Error = Dict[str, Any]


class EmployeeDirectoryClient:
    """Client for interacting with the employee directory API."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL including the API prefix, e.g.
                ``http://localhost:8000/api``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/employees``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            error = self._describe_http_error(exc)
            logger.error("API request failed (%s): %s", error["status_code"], error["message"])
            return None, error
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "errors": {}}

    @staticmethod
    def _describe_http_error(exc: requests.HTTPError) -> Error:
        response = exc.response
        status = response.status_code if response is not None else None
        message = ""
        errors: Dict[str, str] = {}
        if response is not None:
            try:
                body = response.json()
            except ValueError:
                message = response.text
            else:
                if isinstance(body, dict):
                    errors = body.get("errors") or {}
                    message = body.get("error") or ("Validation failed" if errors else str(body))
        return {"status_code": status, "message": message or str(exc), "errors": errors}

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def list_employees(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all employees."""
        data, error = self._request("GET", "/employees")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def search_employees(self, query: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Search employees by substring.

        Args:
            query: Text to look for in name, employee ID, email, phone,
                department or role.
        """
        data, error = self._request("GET", "/employees", params={"query": query})
        if error:
            return [], error
        if isinstance(data, dict) and isinstance(data.get("results"), list):
            return data["results"], None
        return [], None

    def get_employee(self, employee_pk: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/employees/{employee_pk}")

    def add_employee(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an employee.

        Args:
            payload: Record with camelCase keys (``employeeId``,
                ``joiningDate``).
        Returns:
            A tuple ``(result, error)``; ``result`` holds the message and
            the new id.
        """
        return self._request("POST", "/employees", json_body=payload)

    def update_employee(
        self, employee_pk: int, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Edit an employee; ``payload`` may hold any subset of fields."""
        return self._request("PUT", f"/employees/{employee_pk}", json_body=payload)

    def delete_employee(self, employee_pk: int) -> Tuple[bool, Optional[Error]]:
        """Delete an employee.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/employees/{employee_pk}")
        if error:
            return False, error
        return True, None

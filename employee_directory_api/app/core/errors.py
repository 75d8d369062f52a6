"""
Error taxonomy for the employee directory.

Every error the service layer raises derives from
``EmployeeDirectoryError`` and knows the HTTP status and JSON body it
maps to.  ``main.create_app`` installs the exception handlers that
render them.
"""

from typing import Any, Dict, Optional


class EmployeeDirectoryError(Exception):
    """Base exception for employee directory errors."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(EmployeeDirectoryError):
    """Raised when a candidate record fails one or more field rules."""

    status_code = 400
    message = "Validation failed"

    def __init__(self, errors: Dict[str, str]) -> None:
        super().__init__()
        self.errors = dict(errors)

    def to_payload(self) -> Dict[str, Any]:
        return {"errors": self.errors}


class MissingQueryError(EmployeeDirectoryError):
    """Raised when a search is requested without a query string."""

    status_code = 400
    message = "Query parameter is missing"


class NotFoundError(EmployeeDirectoryError):
    """Raised when an employee id matches no row."""

    status_code = 404
    message = "Employee not found"


class MethodNotSupportedError(EmployeeDirectoryError):
    status_code = 405
    message = "Method not allowed"


class ConflictError(EmployeeDirectoryError):
    """Raised when a write would duplicate a unique employee ID."""

    status_code = 409
    message = "Employee ID already exists"


class PersistenceError(EmployeeDirectoryError):
    """Raised when the database is unreachable or rejects a statement.

    The message returned to clients is generic; the underlying
    ``sqlite3`` error is chained and logged server-side.
    """

    status_code = 500
    message = "Database error"

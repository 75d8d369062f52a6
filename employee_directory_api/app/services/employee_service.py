"""
Service layer for employee records.

``EmployeeService`` is the record store: it inserts, updates, deletes,
fetches, lists and searches rows of the ``employees`` table.  Each
operation opens its own connection, runs a single statement, commits
and closes the connection again.

All queries use parameterized statements to avoid SQL injection.  The
only identifiers interpolated into SQL are column names taken from
``EmployeeField``, never from request data.

``sqlite3`` failures are logged here and re-raised as
``PersistenceError`` (or ``ConflictError`` for a duplicate employee ID)
so that the API layer can answer without exposing database details.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Dict, List, Optional

from employee_directory_api.app.core.db import get_connection
from employee_directory_api.app.core.errors import (
    ConflictError,
    MissingQueryError,
    PersistenceError,
    ValidationError,
)
from employee_directory_api.app.schemas.employee import (
    SEARCHABLE_FIELDS,
    EmployeeCandidate,
    EmployeeField,
    EmployeeRead,
)
from employee_directory_api.app.services.validation import normalize_joining_date

logger = logging.getLogger(__name__)

COLUMNS = ", ".join(["id"] + [field.attribute for field in EmployeeField])


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class EmployeeService:
    """Service class for managing employee records."""

    @classmethod
    async def create_employee(cls, data: EmployeeCandidate) -> int:
        """Insert a new employee and return the id assigned by the database.

        The joining date is stored in ``YYYY-MM-DD`` form.  The caller is
        expected to have validated ``data``.
        """
        values = cls._column_values(data, list(EmployeeField))
        columns = ", ".join(values)
        placeholders = ", ".join("?" for _ in values)
        conn = cls._connect()
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"INSERT INTO employees ({columns}) VALUES ({placeholders})",
                tuple(values.values()),
            )
            employee_pk = cursor.lastrowid
            conn.commit()
            logger.info("Created employee %s (%s)", employee_pk, data.employee_id)
            return employee_pk
        except sqlite3.IntegrityError as exc:
            raise cls._integrity_error(exc, f"create employee {data.employee_id}") from exc
        except sqlite3.Error as exc:
            logger.exception("Failed to create employee %s", data.employee_id)
            raise PersistenceError() from exc
        finally:
            conn.close()

    @classmethod
    async def update_employee(cls, employee_pk: int, data: EmployeeCandidate) -> int:
        """Update the fields present in ``data`` and return the affected-row count.

        A count of 0 means no row has id ``employee_pk``; deciding
        whether that is an error is left to the caller.
        """
        fields = data.provided_fields()
        if not fields:
            raise ValidationError({"body": "No fields to update"})
        values = cls._column_values(data, fields)
        assignments = ", ".join(f"{column} = ?" for column in values)
        conn = cls._connect()
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"UPDATE employees SET {assignments} WHERE id = ?",
                (*values.values(), employee_pk),
            )
            affected = cursor.rowcount
            conn.commit()
            if affected:
                logger.info("Updated employee %s", employee_pk)
            else:
                logger.info("Update matched no employee with id %s", employee_pk)
            return affected
        except sqlite3.IntegrityError as exc:
            raise cls._integrity_error(exc, f"update employee {employee_pk}") from exc
        except sqlite3.Error as exc:
            logger.exception("Failed to update employee %s", employee_pk)
            raise PersistenceError() from exc
        finally:
            conn.close()

    @classmethod
    async def delete_employee(cls, employee_pk: int) -> bool:
        """Delete an employee by id.

        Returns ``True`` if a record was deleted, ``False`` when no row
        matched.  A missing id is not an error.
        """
        conn = cls._connect()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM employees WHERE id = ?", (employee_pk,))
            affected = cursor.rowcount
            conn.commit()
            if affected:
                logger.info("Deleted employee %s", employee_pk)
            return affected > 0
        except sqlite3.Error as exc:
            logger.exception("Failed to delete employee %s", employee_pk)
            raise PersistenceError() from exc
        finally:
            conn.close()

    @classmethod
    async def get_employee(cls, employee_pk: int) -> Optional[EmployeeRead]:
        """Retrieve a single employee by id, or ``None`` if absent."""
        conn = cls._connect()
        try:
            row = conn.execute(
                f"SELECT {COLUMNS} FROM employees WHERE id = ?",
                (employee_pk,),
            ).fetchone()
        except sqlite3.Error as exc:
            logger.exception("Failed to fetch employee %s", employee_pk)
            raise PersistenceError() from exc
        finally:
            conn.close()
        if not row:
            return None
        return cls._row_to_employee(row)

    @classmethod
    async def list_employees(cls) -> List[EmployeeRead]:
        """Return every employee ordered by id."""
        conn = cls._connect()
        try:
            rows = conn.execute(f"SELECT {COLUMNS} FROM employees ORDER BY id ASC").fetchall()
        except sqlite3.Error as exc:
            logger.exception("Failed to list employees")
            raise PersistenceError() from exc
        finally:
            conn.close()
        return [cls._row_to_employee(row) for row in rows]

    @classmethod
    async def search_employees(cls, query: Optional[str]) -> List[EmployeeRead]:
        """Return employees where any searchable field contains ``query``.

        Matching uses SQLite ``LIKE``, so it is case-insensitive for
        ASCII letters.  ``%`` and ``_`` in ``query`` match literally.
        """
        if not query:
            raise MissingQueryError()
        pattern = f"%{_escape_like(query)}%"
        where = " OR ".join(f"{field.attribute} LIKE ? ESCAPE '\\'" for field in SEARCHABLE_FIELDS)
        conn = cls._connect()
        try:
            rows = conn.execute(
                f"SELECT {COLUMNS} FROM employees WHERE {where} ORDER BY id ASC",
                tuple(pattern for _ in SEARCHABLE_FIELDS),
            ).fetchall()
        except sqlite3.Error as exc:
            logger.exception("Failed to search employees for %r", query)
            raise PersistenceError() from exc
        finally:
            conn.close()
        return [cls._row_to_employee(row) for row in rows]

    @staticmethod
    def _connect() -> sqlite3.Connection:
        try:
            return get_connection()
        except sqlite3.Error as exc:
            logger.exception("Could not open the employee database")
            raise PersistenceError() from exc

    @staticmethod
    def _integrity_error(exc: sqlite3.IntegrityError, action: str) -> Exception:
        """Classify a constraint failure as a duplicate key or a generic database error."""
        if "UNIQUE" in str(exc).upper():
            logger.warning("Rejected %s: %s", action, exc)
            return ConflictError()
        logger.error("Constraint failure during %s: %s", action, exc)
        return PersistenceError()

    @staticmethod
    def _column_values(data: EmployeeCandidate, fields: List[EmployeeField]) -> Dict[str, Optional[str]]:
        """Map column name to bound value, normalizing the joining date."""
        values: Dict[str, Optional[str]] = {}
        for field in fields:
            value = data.get(field)
            if field is EmployeeField.JOINING_DATE and value is not None:
                try:
                    value = normalize_joining_date(value)
                except ValueError as exc:
                    raise ValidationError({field.value: "Invalid joining date"}) from exc
            values[field.attribute] = value
        return values

    @staticmethod
    def _row_to_employee(row: sqlite3.Row) -> EmployeeRead:
        """Convert a database row to an EmployeeRead schema instance."""
        return EmployeeRead.model_validate(dict(row))

"""
Employee endpoints.

These routes expose the employee directory: add a record, list or
search records, fetch one, edit one in place and delete one.  Write
paths run the field validator before touching the database; error
responses are rendered by the exception handlers installed in
``main.create_app``.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Query

from employee_directory_api.app.core.config import settings
from employee_directory_api.app.core.errors import (
    MissingQueryError,
    NotFoundError,
    ValidationError,
)
from employee_directory_api.app.schemas.employee import (
    EmployeeCreate,
    EmployeeCreated,
    EmployeeRead,
    EmployeeSearchResults,
    EmployeeUpdate,
    EmployeeUpdated,
    MessageResponse,
    UpdateResult,
)
from employee_directory_api.app.services.employee_service import EmployeeService
from employee_directory_api.app.services.validation import validate_employee

router = APIRouter()


def _require_query(query: Optional[str]) -> str:
    if not query:
        raise MissingQueryError()
    return query


@router.post("", response_model=EmployeeCreated)
async def add_employee(employee: EmployeeCreate) -> EmployeeCreated:
    """Add a new employee.

    Every field is required.  Field errors are returned together as
    ``{"errors": {field: message}}`` with status 400 and nothing is
    written.
    """
    errors = validate_employee(employee)
    if errors:
        raise ValidationError(errors)
    employee_pk = await EmployeeService.create_employee(employee)
    return EmployeeCreated(message="Employee added successfully", id=employee_pk)


@router.get("", response_model=None)
async def list_employees(
    query: Optional[str] = Query(None, description="Substring to search for"),
) -> Union[List[EmployeeRead], EmployeeSearchResults]:
    """List all employees, or search them when ``query`` is given.

    Without ``query`` the response is a bare array.  With ``query`` it
    is ``{"results": [...]}``; an empty ``query`` is a client error.
    """
    if query is None:
        return await EmployeeService.list_employees()
    results = await EmployeeService.search_employees(_require_query(query))
    return EmployeeSearchResults(results=results)


@router.get("/search", response_model=EmployeeSearchResults)
async def search_employees(
    query: Optional[str] = Query(None, description="Substring to search for"),
) -> EmployeeSearchResults:
    """Search name, employee ID, email, phone, department and role."""
    results = await EmployeeService.search_employees(_require_query(query))
    return EmployeeSearchResults(results=results)


@router.get("/{employee_pk}", response_model=EmployeeRead)
async def get_employee(employee_pk: int) -> EmployeeRead:
    employee = await EmployeeService.get_employee(employee_pk)
    if employee is None:
        raise NotFoundError()
    return employee


@router.put("/{employee_pk}", response_model=EmployeeUpdated)
async def update_employee(employee_pk: int, updates: EmployeeUpdate) -> EmployeeUpdated:
    """Edit an employee in place.

    Partial bodies are accepted; only the supplied fields are validated
    and written.  An id that matches no row reports ``affectedRows: 0``,
    or 404 when ``STRICT_NOT_FOUND`` is enabled.
    """
    errors = validate_employee(updates, fields=updates.provided_fields())
    if errors:
        raise ValidationError(errors)
    affected = await EmployeeService.update_employee(employee_pk, updates)
    if not affected and settings.strict_not_found:
        raise NotFoundError()
    return EmployeeUpdated(
        message="Employee updated successfully",
        result=UpdateResult(affected_rows=affected),
    )


@router.delete("/{employee_pk}", response_model=MessageResponse)
async def delete_employee(employee_pk: int) -> MessageResponse:
    """Delete an employee.  Deleting an unknown id succeeds unless strict mode is on."""
    deleted = await EmployeeService.delete_employee(employee_pk)
    if not deleted and settings.strict_not_found:
        raise NotFoundError()
    return MessageResponse(message="Employee deleted successfully")

"""
Field rules for employee records.

``validate_employee`` checks a candidate record and returns a mapping
of wire field name to error message; an empty mapping means the record
is acceptable.  Every field is checked independently so all problems
are reported in one pass.  The module has no I/O and is shared by the
API handlers and the console client.
"""

import re
from datetime import date, datetime, timezone
from typing import Callable, Dict, Iterable, Optional

from ..schemas.employee import Department, EmployeeCandidate, EmployeeField

NAME_PATTERN = re.compile(r"[A-Za-z\s]{3,50}")
EMPLOYEE_ID_PATTERN = re.compile(r"[A-Za-z0-9]{1,10}")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"[0-9]{10}")
ALL_ZERO_PHONE = "0000000000"


def parse_joining_date(value: str) -> date:
    """Parse an ISO date or date-time string into a calendar date.

    Accepts ``YYYY-MM-DD`` as well as date-times such as
    ``2024-01-01T00:00:00.000Z``.  A date-time with an offset is
    converted to UTC before its date is taken, so
    ``2024-01-01T23:00:00-05:00`` is 2024-01-02; a naive date-time
    keeps its own date.  Raises ``ValueError`` for anything else.
    """
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    moment = datetime.fromisoformat(text)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.date()


def normalize_joining_date(value: str) -> str:
    """Return ``value`` in ``YYYY-MM-DD`` form; raises ``ValueError`` if unparsable."""
    return parse_joining_date(value).isoformat()


def _check_name(value: str, today: date) -> Optional[str]:
    if not NAME_PATTERN.fullmatch(value):
        return "Name must be 3-50 characters long and should not contain numbers"
    return None


def _check_employee_id(value: str, today: date) -> Optional[str]:
    if not EMPLOYEE_ID_PATTERN.fullmatch(value):
        return "Invalid Employee ID (1-10 alphanumeric characters)"
    return None


def _check_joining_date(value: str, today: date) -> Optional[str]:
    try:
        joined = parse_joining_date(value)
    except ValueError:
        return "Invalid joining date"
    if joined > today:
        return "Joining date cannot be in the future"
    return None


def _check_email(value: str, today: date) -> Optional[str]:
    if not EMAIL_PATTERN.fullmatch(value):
        return "Invalid email format"
    return None


def _check_phone(value: str, today: date) -> Optional[str]:
    if not PHONE_PATTERN.fullmatch(value):
        return "Phone number must be exactly 10 digits"
    if value == ALL_ZERO_PHONE:
        return "Phone number cannot be all zeros"
    return None


def _check_department(value: str, today: date) -> Optional[str]:
    if value not in Department.values():
        return "Department must be one of: " + ", ".join(Department.values())
    return None


def _check_role(value: str, today: date) -> Optional[str]:
    return None


# field -> (message when missing, shape check)
RULES: Dict[EmployeeField, tuple[str, Callable[[str, date], Optional[str]]]] = {
    EmployeeField.NAME: ("Name is required", _check_name),
    EmployeeField.EMPLOYEE_ID: ("Employee ID is required", _check_employee_id),
    EmployeeField.JOINING_DATE: ("Joining date is required", _check_joining_date),
    EmployeeField.ROLE: ("Role is required", _check_role),
    EmployeeField.EMAIL: ("Email is required", _check_email),
    EmployeeField.PHONE: ("Phone number is required", _check_phone),
    EmployeeField.DEPARTMENT: ("Department is required", _check_department),
}


def validate_employee(
    candidate: EmployeeCandidate,
    *,
    today: Optional[date] = None,
    fields: Optional[Iterable[EmployeeField]] = None,
) -> Dict[str, str]:
    """Check ``candidate`` against the employee field rules.

    Parameters
    ----------
    candidate : EmployeeCandidate
        Record to check.
    today : Optional[date]
        Reference date for the "not in the future" rule.  Defaults to
        the current local date.
    fields : Optional[Iterable[EmployeeField]]
        Restrict checking to these fields, e.g. the fields supplied in a
        partial update.  Defaults to every field.

    Returns
    -------
    Dict[str, str]
        Wire field name to error message for each failing field.
    """
    today = today or date.today()
    selected = set(fields) if fields is not None else set(EmployeeField)
    errors: Dict[str, str] = {}
    for field, (missing_message, check) in RULES.items():
        if field not in selected:
            continue
        value = candidate.get(field)
        if value is None or not value.strip():
            errors[field.value] = missing_message
            continue
        problem = check(value, today)
        if problem:
            errors[field.value] = problem
    return errors

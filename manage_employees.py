#!/usr/bin/env python3
"""
Console front end for the employee directory API.

Lists, searches, adds, edits and deletes employees through the HTTP
API.  New and edited records are checked locally with the same field
rules the server applies, so mistakes are reported before anything is
sent.

Usage:
    python manage_employees.py list
    python manage_employees.py search Engineering
    python manage_employees.py add --name "Ann Lee" --employee-id E1 --email a@b.com \\
        --phone 1234567890 --department HR --role Clerk --joining-date 2024-01-01
    python manage_employees.py edit 3 --role "Senior Clerk"
    python manage_employees.py delete 3

The API location is taken from --url or the EMPLOYEE_API_URL
environment variable (default http://localhost:8000/api).
"""

import argparse
import os
import sys
from typing import Any, Dict, Iterable, List, Optional

from employee_directory_api.app.schemas.employee import Department, EmployeeCandidate, EmployeeField
from employee_directory_api.app.services.validation import validate_employee
from employee_directory_client import DEFAULT_BASE_URL, EmployeeDirectoryClient

# command-line option -> record field
FIELD_OPTIONS = {
    "name": EmployeeField.NAME,
    "employee_id": EmployeeField.EMPLOYEE_ID,
    "email": EmployeeField.EMAIL,
    "phone": EmployeeField.PHONE,
    "department": EmployeeField.DEPARTMENT,
    "role": EmployeeField.ROLE,
    "joining_date": EmployeeField.JOINING_DATE,
}


def format_employee(employee: Dict[str, Any]) -> str:
    joining_date = str(employee.get("joiningDate", "")).split("T")[0]
    return "\n".join(
        [
            f"{employee.get('id')}. {employee.get('name')} ({employee.get('employeeId')})",
            f"   {employee.get('role')} - {employee.get('department')}",
            f"   {employee.get('email')} | {employee.get('phone')}",
            f"   Joining Date: {joining_date}",
        ]
    )


def print_employees(employees: Iterable[Dict[str, Any]]) -> None:
    employees = list(employees)
    if not employees:
        print("No employees found.")
        return
    for employee in employees:
        print(format_employee(employee))


def print_error(error: Dict[str, Any]) -> None:
    print(f"[!] {error.get('message')}", file=sys.stderr)
    for field, message in (error.get("errors") or {}).items():
        print(f"    {field}: {message}", file=sys.stderr)


def collect_fields(args: argparse.Namespace) -> Dict[str, str]:
    """Build a camelCase payload from the options the user actually passed."""
    payload: Dict[str, str] = {}
    for option, field in FIELD_OPTIONS.items():
        value = getattr(args, option, None)
        if value is not None:
            payload[field.value] = value
    return payload


def check_locally(payload: Dict[str, str], partial: bool) -> bool:
    candidate = EmployeeCandidate.model_validate(payload)
    fields = candidate.provided_fields() if partial else None
    errors = validate_employee(candidate, fields=fields)
    for field, message in errors.items():
        print(f"[!] {field}: {message}", file=sys.stderr)
    return not errors


def add_field_options(parser: argparse.ArgumentParser, required: bool) -> None:
    parser.add_argument("--name", required=required)
    parser.add_argument("--employee-id", dest="employee_id", required=required)
    parser.add_argument("--email", required=required)
    parser.add_argument("--phone", required=required)
    parser.add_argument("--department", choices=Department.values(), required=required)
    parser.add_argument("--role", required=required)
    parser.add_argument("--joining-date", dest="joining_date", required=required, help="YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Manage employees through the directory API.")
    ap.add_argument(
        "--url",
        default=os.getenv("EMPLOYEE_API_URL", DEFAULT_BASE_URL),
        help="API base URL including the prefix, e.g. http://localhost:8000/api",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List all employees")

    search = sub.add_parser("search", help="Search employees by substring")
    search.add_argument("query")

    add = sub.add_parser("add", help="Add an employee")
    add_field_options(add, required=True)

    edit = sub.add_parser("edit", help="Edit fields of an employee")
    edit.add_argument("id", type=int)
    add_field_options(edit, required=False)

    delete = sub.add_parser("delete", help="Delete an employee")
    delete.add_argument("id", type=int)
    return ap


def main(argv: Optional[List[str]] = None, client: Optional[EmployeeDirectoryClient] = None) -> int:
    args = build_parser().parse_args(argv)
    client = client or EmployeeDirectoryClient(base_url=args.url)

    if args.command == "list":
        employees, error = client.list_employees()
        if error:
            print_error(error)
            return 1
        print_employees(employees)
        return 0

    if args.command == "search":
        employees, error = client.search_employees(args.query)
        if error:
            print_error(error)
            return 1
        print_employees(employees)
        return 0

    if args.command == "add":
        payload = collect_fields(args)
        if not check_locally(payload, partial=False):
            return 1
        result, error = client.add_employee(payload)
        if error:
            print_error(error)
            return 1
        print(f"[+] Employee added successfully (id {result.get('id')})")
        return 0

    if args.command == "edit":
        payload = collect_fields(args)
        if not payload:
            print("[!] Nothing to change; pass at least one field option.", file=sys.stderr)
            return 1
        if not check_locally(payload, partial=True):
            return 1
        result, error = client.update_employee(args.id, payload)
        if error:
            print_error(error)
            return 1
        if not result.get("result", {}).get("affectedRows"):
            print(f"[!] No employee with id {args.id}", file=sys.stderr)
            return 2
        print("[+] Employee updated successfully")
        return 0

    if args.command == "delete":
        _, error = client.delete_employee(args.id)
        if error:
            print_error(error)
            return 1
        print("[+] Employee deleted successfully")
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())

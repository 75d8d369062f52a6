"""
Pydantic schemas for employee records.

Records travel over the wire with camelCase keys (``employeeId``,
``joiningDate``) while Python code and the database use snake_case.
Each model declares the camelCase name as an alias and accepts either
form on input.

``EmployeeCandidate`` is deliberately loose: every field is an optional
string so that a bad payload reaches the field validator and comes back
as a complete error mapping instead of a framework-level rejection.
"""

from datetime import date
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Department(str, Enum):
    HR = "HR"
    ENGINEERING = "Engineering"
    MARKETING = "Marketing"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


class EmployeeField(str, Enum):
    """Editable fields of an employee record, keyed by wire name."""

    NAME = "name"
    EMPLOYEE_ID = "employeeId"
    EMAIL = "email"
    PHONE = "phone"
    DEPARTMENT = "department"
    ROLE = "role"
    JOINING_DATE = "joiningDate"

    @property
    def attribute(self) -> str:
        """Python attribute name, which is also the column name."""
        return _ATTRIBUTES[self]


_ATTRIBUTES = {
    EmployeeField.NAME: "name",
    EmployeeField.EMPLOYEE_ID: "employee_id",
    EmployeeField.EMAIL: "email",
    EmployeeField.PHONE: "phone",
    EmployeeField.DEPARTMENT: "department",
    EmployeeField.ROLE: "role",
    EmployeeField.JOINING_DATE: "joining_date",
}

# Fields matched by the substring search.
SEARCHABLE_FIELDS = (
    EmployeeField.NAME,
    EmployeeField.EMPLOYEE_ID,
    EmployeeField.EMAIL,
    EmployeeField.PHONE,
    EmployeeField.DEPARTMENT,
    EmployeeField.ROLE,
)


class EmployeeCandidate(BaseModel):
    """Employee payload as submitted by a client, before validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = Field(None, examples=["Ann Lee"])
    employee_id: Optional[str] = Field(None, alias="employeeId", examples=["E1"])
    email: Optional[str] = Field(None, examples=["ann.lee@example.com"])
    phone: Optional[str] = Field(None, examples=["1234567890"])
    department: Optional[str] = Field(None, examples=["HR"])
    role: Optional[str] = Field(None, examples=["Clerk"])
    joining_date: Optional[str] = Field(None, alias="joiningDate", examples=["2024-01-01"])

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> Any:
        # Forms and scripts often send phone numbers or ids as numbers.
        if isinstance(v, bool):
            return v
        if isinstance(v, (int, float)):
            return str(v)
        if isinstance(v, date):
            return v.isoformat()
        return v

    def get(self, field: EmployeeField) -> Optional[str]:
        return getattr(self, field.attribute)

    def provided_fields(self) -> List[EmployeeField]:
        """Fields explicitly present in the payload, in declaration order."""
        return [field for field in EmployeeField if field.attribute in self.model_fields_set]


class EmployeeCreate(EmployeeCandidate):
    """Schema for adding an employee.  All fields are required by the validator."""


class EmployeeUpdate(EmployeeCandidate):
    """Schema for editing an employee.

    All fields are optional; only provided values will be updated.
    """


class EmployeeRead(BaseModel):
    """Schema for reading a stored employee record."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    name: str
    employee_id: str = Field(..., alias="employeeId")
    email: str
    phone: str
    department: str
    role: str
    joining_date: str = Field(..., alias="joiningDate")


class EmployeeSearchResults(BaseModel):
    results: List[EmployeeRead]


class MessageResponse(BaseModel):
    message: str


class EmployeeCreated(MessageResponse):
    id: int


class UpdateResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    affected_rows: int = Field(..., alias="affectedRows")


class EmployeeUpdated(MessageResponse):
    result: UpdateResult

"""Employee Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - EmployeeRequest carries only name; clients can never set id
    - EmployeeRequest.name: stripped, then non-empty and at most 100 chars
      (length checked on the stored value, not the raw input)
    - EmployeeResponse always has a store-assigned id

Design Decisions:
    - field_validator for side-effect-free transforms (strip) — keeps models pure
    - from_attributes on the response: routes return ORM rows directly
"""

from pydantic import BaseModel, ConfigDict, field_validator

from employee_api.core.domain_types import EMPLOYEE_NAME_MAX_LENGTH


class EmployeeRequest(BaseModel):
    """Create/update body — validates name presence and length."""
    name: str

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        if len(v) > EMPLOYEE_NAME_MAX_LENGTH:
            raise ValueError(
                f"name must be at most {EMPLOYEE_NAME_MAX_LENGTH} characters",
            )
        return v


class EmployeeResponse(BaseModel):
    """Employee response — public-facing employee data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str

"""Pydantic request/response schemas."""

from employee_api.schemas.employee import (
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
)

__all__ = [
    "EmployeeCreate",
    "EmployeeRead",
    "EmployeeUpdate",
]

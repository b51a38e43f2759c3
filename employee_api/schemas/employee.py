"""
Pydantic schemas for employee endpoints.

Field names are snake_case in Python and camelCase on the wire
(firstName, lastName, email). Input accepts either spelling.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EmployeeFields(BaseModel):
    """
    The mutable employee fields.

    Extra keys (including a client-supplied ``id``) are ignored.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    first_name: Optional[str] = Field(default=None, description="Given name")
    last_name: Optional[str] = Field(default=None, description="Family name")
    email: Optional[str] = Field(default=None, description="Contact email")


class EmployeeCreate(EmployeeFields):
    """
    Request schema for creating an employee.

    The id is assigned by the database; any id in the payload is dropped.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@example.com",
            }
        }
    )


class EmployeeUpdate(EmployeeFields):
    """
    Request schema for PUT /employees/{id}.

    Lists exactly the fields an update may overwrite. Every field is
    written, so an omitted field becomes null.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "firstName": "Ada",
                "lastName": "King",
                "email": "ada@example.com",
            }
        }
    )


class EmployeeRead(EmployeeFields):
    """Response schema for a stored employee."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Database-assigned identifier")

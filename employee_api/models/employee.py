"""
Employee model.

One row per employee. The id is assigned by the database on insert
and never changes afterwards.
"""

from sqlalchemy import Column, Integer, String

from employee_api.models.base import Base, ModelMixin


class Employee(Base, ModelMixin):
    """
    Employee record.

    Attributes:
        id: Integer primary key (autoincrement)
        first_name: Given name
        last_name: Family name
        email: Contact email (no uniqueness or format constraint)
    """

    __tablename__ = "employees"

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Database-assigned identifier"
    )

    first_name = Column(
        String,
        nullable=True,
        doc="Given name"
    )

    last_name = Column(
        String,
        nullable=True,
        doc="Family name"
    )

    email = Column(
        String,
        nullable=True,
        doc="Contact email address"
    )

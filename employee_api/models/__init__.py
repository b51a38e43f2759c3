"""
SQLAlchemy ORM models.

Import models from this module to ensure they're registered with SQLAlchemy.
"""

from employee_api.models.base import Base, ModelMixin
from employee_api.models.employee import Employee

__all__ = [
    "Base",
    "ModelMixin",
    "Employee",
]

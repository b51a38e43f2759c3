"""
Repository layer for data access.

Provides data access abstractions following the Repository pattern,
isolating database access from the HTTP layer.
"""

from employee_api.repositories.interfaces import IEmployeeStore
from employee_api.repositories.employee import EmployeeRepository
from employee_api.repositories.memory import InMemoryEmployeeStore

__all__ = [
    "IEmployeeStore",
    "EmployeeRepository",
    "InMemoryEmployeeStore",
]

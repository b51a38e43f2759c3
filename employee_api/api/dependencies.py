"""
FastAPI dependency functions.

Provides the database session and employee store to route handlers.
Tests swap either one through ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.core.database import get_db
from employee_api.repositories.employee import EmployeeRepository
from employee_api.repositories.interfaces import IEmployeeStore


DatabaseSession = Annotated[AsyncSession, Depends(get_db)]


def get_employee_store(db: DatabaseSession) -> IEmployeeStore:
    """
    Dependency to inject the employee store.

    Args:
        db: Database session from dependency injection

    Returns:
        EmployeeRepository bound to the request's session
    """
    return EmployeeRepository(db)


EmployeeStore = Annotated[IEmployeeStore, Depends(get_employee_store)]

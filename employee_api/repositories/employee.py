"""
Employee repository for employee CRUD operations.

SQLAlchemy implementation of IEmployeeStore. Every write commits its own
transaction; driver errors are rolled back and re-raised as StorageError.
"""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.core.exceptions import EmployeeNotFoundError, StorageError
from employee_api.models.employee import Employee
from employee_api.repositories.interfaces import IEmployeeStore
from employee_api.schemas.employee import EmployeeCreate, EmployeeUpdate


class EmployeeRepository(IEmployeeStore):
    """
    Repository for employee data access.

    Attributes:
        session: SQLAlchemy async session for database operations
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def list(self) -> List[Employee]:
        """
        Get all employees ordered by id.

        Example:
            >>> employees = await repo.list()
            >>> print(len(employees))
            3
        """
        stmt = select(Employee).order_by(Employee.id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to list employees: {e}") from e
        return list(result.scalars().all())

    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """
        Retrieve an employee by id.

        Example:
            >>> employee = await repo.get_by_id(1)
            >>> print(employee.last_name if employee else "Not found")
            "Lovelace"
        """
        stmt = select(Employee).where(Employee.id == employee_id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to load employee {employee_id}: {e}") from e
        return result.scalar_one_or_none()

    async def create(self, data: EmployeeCreate) -> Employee:
        """
        Create a new employee.

        Example:
            >>> employee = await repo.create(
            ...     EmployeeCreate(first_name="Ada", last_name="Lovelace", email="ada@x.com")
            ... )
            >>> print(employee.id)
            1
        """
        employee = Employee(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
        )
        self.session.add(employee)
        await self._commit(f"create employee {data.email!r}")

        # Refresh to pick up the generated id
        await self._refresh(employee)
        return employee

    async def update(self, employee_id: int, patch: EmployeeUpdate) -> Employee:
        """
        Overwrite the mutable fields of an existing employee.

        Raises:
            EmployeeNotFoundError: If employee_id does not exist
        """
        employee = await self.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)

        employee.first_name = patch.first_name
        employee.last_name = patch.last_name
        employee.email = patch.email

        await self._commit(f"update employee {employee_id}")
        await self._refresh(employee)
        return employee

    async def delete_by_id(self, employee_id: int) -> bool:
        """
        Delete an employee by id. Missing ids are a no-op.

        Returns:
            True if a row was deleted
        """
        stmt = delete(Employee).where(Employee.id == employee_id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StorageError(f"Failed to delete employee {employee_id}: {e}") from e

        deleted = result.rowcount > 0
        await self._commit(f"delete employee {employee_id}")
        return deleted

    async def _commit(self, action: str) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StorageError(f"Failed to {action}: {e}") from e

    async def _refresh(self, employee: Employee) -> None:
        try:
            await self.session.refresh(employee)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to reload employee {employee.id}: {e}") from e

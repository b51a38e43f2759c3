"""
Employee Store Interface (IEmployeeStore)

Abstract base class defining the persistence contract for employees.
The HTTP layer depends only on this interface; the concrete adapter is
chosen by the dependency provider in ``employee_api.api.dependencies``.

Implementation guide:
- All methods must be async
- Each write is one atomic unit: it either fully persists or raises
- Driver-level failures surface as StorageError
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from employee_api.models.employee import Employee
from employee_api.schemas.employee import EmployeeCreate, EmployeeUpdate


class IEmployeeStore(ABC):
    """
    Abstract interface for employee persistence.

    Implementations: EmployeeRepository (SQLAlchemy) and
    InMemoryEmployeeStore (dict-backed).
    """

    @abstractmethod
    async def list(self) -> List[Employee]:
        """
        Return every employee ordered by id.

        Returns:
            List of employees, empty when none exist

        Raises:
            StorageError: If the storage backend fails
        """
        pass

    @abstractmethod
    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """
        Return the employee with the given id.

        Returns:
            The employee, or None if no row matches. Absence is not an error.

        Raises:
            StorageError: If the storage backend fails
        """
        pass

    @abstractmethod
    async def create(self, data: EmployeeCreate) -> Employee:
        """
        Insert a new employee. The id is assigned by the store.

        Args:
            data: Field values for the new row

        Returns:
            The persisted employee including its id

        Raises:
            StorageError: If the storage backend fails
        """
        pass

    @abstractmethod
    async def update(self, employee_id: int, patch: EmployeeUpdate) -> Employee:
        """
        Overwrite first_name, last_name and email of an existing employee.

        The id is never modified.

        Args:
            employee_id: Id of the row to update
            patch: New values for the mutable fields

        Returns:
            The updated employee

        Raises:
            EmployeeNotFoundError: If no row matches employee_id
            StorageError: If the storage backend fails
        """
        pass

    @abstractmethod
    async def delete_by_id(self, employee_id: int) -> bool:
        """
        Remove the employee if present. Deleting a missing id is a no-op.

        Returns:
            True if a row was removed, False if none existed

        Raises:
            StorageError: If the storage backend fails
        """
        pass

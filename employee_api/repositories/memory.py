"""
In-memory implementation of IEmployeeStore.

Backed by a dict keyed by id. Used by tests and for running the API
without a database. State lives only as long as the instance.
"""

import itertools
from typing import Dict, List, Optional

from employee_api.core.exceptions import EmployeeNotFoundError
from employee_api.models.employee import Employee
from employee_api.repositories.interfaces import IEmployeeStore
from employee_api.schemas.employee import EmployeeCreate, EmployeeUpdate


class InMemoryEmployeeStore(IEmployeeStore):
    """
    Dict-backed employee store.

    Ids start at 1 and are never reused, matching an autoincrement column.
    Rows are stored as plain dicts and returned as fresh Employee objects,
    so callers cannot mutate stored state by accident.
    """

    def __init__(self):
        self._rows: Dict[int, dict] = {}
        self._ids = itertools.count(1)

    async def list(self) -> List[Employee]:
        return [self._to_model(self._rows[key]) for key in sorted(self._rows)]

    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        row = self._rows.get(employee_id)
        return self._to_model(row) if row is not None else None

    async def create(self, data: EmployeeCreate) -> Employee:
        employee_id = next(self._ids)
        self._rows[employee_id] = {
            "id": employee_id,
            "first_name": data.first_name,
            "last_name": data.last_name,
            "email": data.email,
        }
        return self._to_model(self._rows[employee_id])

    async def update(self, employee_id: int, patch: EmployeeUpdate) -> Employee:
        row = self._rows.get(employee_id)
        if row is None:
            raise EmployeeNotFoundError(employee_id)

        row["first_name"] = patch.first_name
        row["last_name"] = patch.last_name
        row["email"] = patch.email
        return self._to_model(row)

    async def delete_by_id(self, employee_id: int) -> bool:
        return self._rows.pop(employee_id, None) is not None

    @staticmethod
    def _to_model(row: dict) -> Employee:
        return Employee(**row)

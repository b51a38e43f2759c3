"""
Employee endpoints.

Each endpoint delegates to exactly one employee store operation.
Domain errors (EmployeeNotFoundError, StorageError) propagate to the
exception handlers registered in ``employee_api.main``.
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Path, Response, status

from employee_api.api.dependencies import EmployeeStore
from employee_api.core.exceptions import EmployeeNotFoundError
from employee_api.schemas.employee import (
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])

# Ids outside the signed 64-bit column range cannot be stored or looked up
EmployeeId = Annotated[
    int,
    Path(ge=-(2**63), le=2**63 - 1, description="Server-assigned employee id"),
]


@router.get(
    "",
    response_model=List[EmployeeRead],
    summary="List employees",
    description="Returns every employee ordered by id. Empty list when none exist.",
)
async def list_employees(store: EmployeeStore) -> List[EmployeeRead]:
    employees = await store.list()
    return [EmployeeRead.model_validate(e) for e in employees]


@router.get(
    "/{employee_id}",
    response_model=EmployeeRead,
    summary="Get employee by ID",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Employee not found"}},
)
async def get_employee(employee_id: EmployeeId, store: EmployeeStore) -> EmployeeRead:
    """
    Get a single employee by ID.

    Raises:
        EmployeeNotFoundError: If the employee does not exist (404)
    """
    employee = await store.get_by_id(employee_id)
    if employee is None:
        raise EmployeeNotFoundError(employee_id)
    return EmployeeRead.model_validate(employee)


@router.post(
    "",
    response_model=EmployeeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create an employee",
    description="Creates an employee. The id is assigned by the server; a supplied id is ignored.",
)
async def create_employee(request: EmployeeCreate, store: EmployeeStore) -> EmployeeRead:
    employee = await store.create(request)

    logger.info("Employee created", extra={"employee_id": employee.id})

    return EmployeeRead.model_validate(employee)


@router.put(
    "/{employee_id}",
    response_model=EmployeeRead,
    summary="Update an employee",
    description="Overwrites firstName, lastName and email. The id is preserved.",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Employee not found"}},
)
async def update_employee(
    employee_id: EmployeeId,
    request: EmployeeUpdate,
    store: EmployeeStore,
) -> EmployeeRead:
    """
    Replace the mutable fields of an existing employee.

    Concurrent updates to the same id are last-write-wins.

    Raises:
        EmployeeNotFoundError: If the employee does not exist (404)
    """
    employee = await store.update(employee_id, request)

    logger.info("Employee updated", extra={"employee_id": employee_id})

    return EmployeeRead.model_validate(employee)


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an employee",
    description="Deletes the employee. Deleting a missing id also returns 204.",
)
async def delete_employee(employee_id: EmployeeId, store: EmployeeStore) -> Response:
    deleted = await store.delete_by_id(employee_id)

    if deleted:
        logger.info("Employee deleted", extra={"employee_id": employee_id})
    else:
        logger.info("Delete skipped, employee absent", extra={"employee_id": employee_id})

    return Response(status_code=status.HTTP_204_NO_CONTENT)

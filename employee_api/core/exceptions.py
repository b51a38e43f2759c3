"""
Domain exceptions for the employee service.

Routes and stores raise these; the handlers registered in
``employee_api.main`` translate them into HTTP responses.
"""


class EmployeeServiceError(Exception):
    """Base exception for the employee service"""
    pass


class EmployeeNotFoundError(EmployeeServiceError):
    """Raised when no employee row exists for the requested id"""

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(f"Employee not found: {employee_id}")


class StorageError(EmployeeServiceError):
    """Raised when the persistence layer fails (connection loss, constraint violation)"""
    pass

"""Errors raised by directory collections.

Each error's `key` is the store key the name maps to, so it matches the key
the collection looked up rather than the raw input.
"""

from roster.domain.names import to_department_name, to_employee_name, to_key


def _department_key(name: str) -> str:
    return to_key(to_department_name(name))


def _employee_key(name: str) -> str:
    return to_key(to_employee_name(name))


class DirectoryError(Exception):
    """Base class for all directory-related errors."""

    def __init__(self, kind: str, key: str, message: str | None = None) -> None:
        if message is None:
            message = f"{kind} ({key}) directory error"
        super().__init__(message)
        self.kind = kind
        self.key = key


class ConflictError(DirectoryError):
    """Base class for errors raised when an entity already exists."""


class NotFoundError(DirectoryError):
    """Base class for errors raised when an entity does not exist."""


class DuplicateDepartmentError(ConflictError):
    """Raised when forming a department whose key is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(
            "department",
            _department_key(name),
            f'Department "{name}" already exists',
        )
        self.name = name


class DepartmentNotFoundError(NotFoundError):
    """Raised when a department cannot be found in the directory."""

    def __init__(self, name: str) -> None:
        super().__init__(
            "department", _department_key(name), f'Department "{name}" not found'
        )
        self.name = name


class DuplicateEmployeeError(ConflictError):
    """Raised when assigning an employee whose key is already taken in a department."""

    def __init__(self, name: str) -> None:
        super().__init__(
            "employee", _employee_key(name), f'Employee "{name}" already exists'
        )
        self.name = name


class EmployeeNotFoundError(NotFoundError):
    """Raised when removing an employee that is not in the department."""

    def __init__(self, name: str) -> None:
        super().__init__(
            "employee", _employee_key(name), f'Employee "{name}" not found'
        )
        self.name = name


class UnknownEmployeeError(NotFoundError):
    """Raised when looking up an employee that is not in the department."""

    def __init__(self, name: str) -> None:
        super().__init__(
            "employee", _employee_key(name), f'Employee "{name}" does not exist'
        )
        self.name = name


class TransferConflictError(ConflictError):
    """Raised when a transfer target department already holds the employee."""

    def __init__(self, name: str, department: str) -> None:
        super().__init__(
            "employee",
            _employee_key(name),
            f'Employee "{name}" already exists in department "{department}"',
        )
        self.name = name
        self.department = department


class DirectoryInvariantError(RuntimeError):
    """Raised when the directory reaches a state that should be impossible.

    This is a programming error, not a user error, and is never formatted as
    a query response.
    """


class SeedError(RuntimeError):
    """Raised when the seed fixture cannot be applied to the directory."""

"""In-memory department and employee collection adapters."""

from __future__ import annotations

from roster.domain.names import to_department_name, to_employee_name, to_key
from roster.interfaces.directory import (
    Department,
    DepartmentCollection,
    Employee,
    EmployeeCollection,
)
from roster.interfaces.directory.errors import (
    DepartmentNotFoundError,
    DuplicateDepartmentError,
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    UnknownEmployeeError,
)

from .memory_store import InMemoryDirectoryData


class InMemoryEmployeeCollection(EmployeeCollection):
    """In-memory implementation of the EmployeeCollection interface."""

    def __init__(self) -> None:
        self._employees: dict[str, Employee] = {}

    @staticmethod
    def _key(name: str) -> str:
        return to_key(to_employee_name(name))

    def find(self, name: str) -> Employee:
        employee = self._employees.get(self._key(name))
        if employee is None:
            raise UnknownEmployeeError(name)
        return employee

    def list(self) -> list[str]:
        return [self._employees[key].name for key in sorted(self._employees)]

    def create(self, name: str) -> str:
        key = self._key(name)
        if key in self._employees:
            raise DuplicateEmployeeError(name)
        employee = Employee(name=to_employee_name(name))
        self._employees[employee.key] = employee
        return employee.name

    def delete(self, name: str) -> None:
        if self._employees.pop(self._key(name), None) is None:
            raise EmployeeNotFoundError(name)


class InMemoryDepartmentCollection(DepartmentCollection):
    """In-memory implementation of the DepartmentCollection interface."""

    def __init__(self, data: InMemoryDirectoryData) -> None:
        self._data = data

    @staticmethod
    def _key(name: str) -> str:
        return to_key(to_department_name(name))

    def find(self, name: str) -> Department:
        department = self._data.departments.get(self._key(name))
        if department is None:
            raise DepartmentNotFoundError(name)
        return department

    def list(self) -> list[str]:
        departments = self._data.departments
        return [departments[key].name for key in sorted(departments)]

    def create(self, name: str) -> str:
        key = self._key(name)
        if key in self._data.departments:
            raise DuplicateDepartmentError(name)
        department = Department(
            name=to_department_name(name), employees=InMemoryEmployeeCollection()
        )
        self._data.departments[department.key] = department
        return department.name

    def delete(self, name: str) -> str:
        department = self._data.departments.pop(self._key(name), None)
        if department is None:
            raise DepartmentNotFoundError(name)
        return department.name

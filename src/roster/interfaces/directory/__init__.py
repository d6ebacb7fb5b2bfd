"""Directory interfaces: entity types, collection contracts, and errors."""

from .departments import Department, DepartmentCollection
from .employees import Employee, EmployeeCollection

__all__ = [
    "Department",
    "DepartmentCollection",
    "Employee",
    "EmployeeCollection",
]

"""Interface for the top-level department collection."""

from __future__ import annotations

import abc
from dataclasses import dataclass

from roster.domain.names import to_key

from .employees import EmployeeCollection


@dataclass(slots=True)
class Department:
    """A department and the employees it owns.

    The department is the only owner of its employee collection; dissolving the
    department discards every employee in it.
    """

    name: str
    employees: EmployeeCollection

    @property
    def key(self) -> str:
        """Case-insensitive identity of the department."""
        return to_key(self.name)


class DepartmentCollection(abc.ABC):
    """Keyed set of departments, unique by case-insensitive name."""

    @abc.abstractmethod
    def find(self, name: str) -> Department:
        """Get a department by name.

        The returned department is live: changes made through its employee
        collection are visible to later lookups.

        Args:
            name: The department name, in any casing.

        Raises:
            DepartmentNotFoundError: If no department with that key exists.
        """

    @abc.abstractmethod
    def list(self) -> list[str]:
        """Return department display names sorted ascending by key."""

    @abc.abstractmethod
    def create(self, name: str) -> str:
        """Form a new, empty department.

        Returns:
            The canonical display name of the new department.

        Raises:
            DuplicateDepartmentError: If a department with the same key already exists.
        """

    @abc.abstractmethod
    def delete(self, name: str) -> str:
        """Dissolve a department together with all of its employees.

        Returns:
            The canonical display name of the removed department.

        Raises:
            DepartmentNotFoundError: If no department with that key exists.
        """

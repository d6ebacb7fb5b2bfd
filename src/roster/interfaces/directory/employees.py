"""Interface for a department's employee collection."""

from __future__ import annotations

import abc
from dataclasses import dataclass

from roster.domain.names import to_key


@dataclass(frozen=True, slots=True)
class Employee:
    """An employee assigned to exactly one department.

    Conventions:
      - name: canonical display name (e.g. "Baby Driver").
      - key: the uppercased name, unique within the owning department only.
    """

    name: str

    @property
    def key(self) -> str:
        """Case-insensitive identity of the employee."""
        return to_key(self.name)


class EmployeeCollection(abc.ABC):
    """Keyed set of employees belonging to a single department."""

    @abc.abstractmethod
    def find(self, name: str) -> Employee:
        """Get an employee by name.

        Args:
            name: The employee name, in any casing.

        Returns:
            The matching employee.

        Raises:
            UnknownEmployeeError: If no employee with that key exists.
        """

    @abc.abstractmethod
    def list(self) -> list[str]:
        """Return employee display names sorted ascending by key."""

    @abc.abstractmethod
    def create(self, name: str) -> str:
        """Add an employee to the collection.

        Args:
            name: The employee name, in any casing.

        Returns:
            The canonical display name of the new employee.

        Raises:
            DuplicateEmployeeError: If an employee with the same key already exists.
        """

    @abc.abstractmethod
    def delete(self, name: str) -> None:
        """Remove an employee from the collection.

        Raises:
            EmployeeNotFoundError: If no employee with that key exists.
        """
"""Module defining Commands.

A command is the typed result of parsing one line of query text. Every line
maps to exactly one command, including the "error" commands for unknown
keywords and malformed arguments, so the executor can dispatch on the command
type alone.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class EmptyCommand(Command):
    """Blank input; nothing to do."""


@dataclass(frozen=True)
class InvalidCommand(Command):
    """The leading keyword is not a known command (likely a typo)."""

    command: str


@dataclass(frozen=True)
class InvalidSyntax(Command):
    """The keyword is known but its arguments are malformed."""

    message: str


@dataclass(frozen=True)
class Exit(Command):
    """Stop accepting queries."""


@dataclass(frozen=True)
class Help(Command):
    """Show the list of available commands."""


@dataclass(frozen=True)
class ShowDepartments(Command):
    """Command to list every department."""


@dataclass(frozen=True)
class ListEmployees(Command):
    """Command to list every employee across all departments."""


@dataclass(frozen=True)
class ListEmployeesByDepartment(Command):
    """Command to list every employee alongside their department."""


@dataclass(frozen=True)
class ListEmployeesInDepartment(Command):
    """Command to list the employees of a single department."""

    department: str


@dataclass(frozen=True)
class FormDepartment(Command):
    """Command to create a new, empty department."""

    department: str


@dataclass(frozen=True)
class DissolveDepartment(Command):
    """Command to remove a department and all of its employees."""

    department: str


@dataclass(frozen=True)
class AssignEmployeeToDepartment(Command):
    """Command to create an employee in a department."""

    employee: str
    department: str


@dataclass(frozen=True)
class PullEmployeeFromDepartment(Command):
    """Command to remove an employee from a department."""

    employee: str
    department: str


@dataclass(frozen=True)
class TransferEmployeeBetweenDepartments(Command):
    """Command to move an employee from one department to another."""

    employee: str
    from_department: str
    to_department: str

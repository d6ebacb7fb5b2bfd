"""Service layer handlers.

Each handler executes one command against the department collection and
returns a response. Store errors (``ConflictError``/``NotFoundError``) are left
to propagate; the query facade turns them into ``ERROR:`` messages.
"""

import logging
from collections.abc import Callable

from roster.interfaces.directory import DepartmentCollection
from roster.interfaces.directory.errors import (
    ConflictError,
    DirectoryInvariantError,
    NotFoundError,
    TransferConflictError,
)

from . import commands
from .help import HELP_TEXT
from .responses import ERROR_PREFIX, Exit, Message, NoOp, Response, Table

logger = logging.getLogger(__name__)

DEPARTMENT_COLUMN = "Department"
EMPLOYEE_COLUMN = "Employee"

SAME_DEPARTMENT_TRANSFER = (
    f"{ERROR_PREFIX}Cannot move employee from department to same department"
)


# ============================================================================
#                       Parser Outcome Handlers
# ============================================================================


def empty_command(cmd: commands.EmptyCommand) -> Response:  # pylint: disable=unused-argument
    """Blank input produces no output."""
    return NoOp()


def exit_command(cmd: commands.Exit) -> Response:  # pylint: disable=unused-argument
    """Signal the caller to stop reading queries."""
    return Exit()


def help_command(cmd: commands.Help) -> Response:  # pylint: disable=unused-argument
    """Return the static help text."""
    return Message(HELP_TEXT)


def invalid_command(cmd: commands.InvalidCommand) -> Response:
    """Report an unrecognized command keyword."""
    return Message(
        f'{ERROR_PREFIX}Invalid command "{cmd.command}". Please check your spelling, '
        'or type "Help" for the list of available commands'
    )


def invalid_syntax(cmd: commands.InvalidSyntax) -> Response:
    """Report a known command with malformed arguments."""
    return Message(f"{ERROR_PREFIX}Invalid command syntax: {cmd.message}")


# ============================================================================
#                       Department Handlers
# ============================================================================


def show_departments(
    cmd: commands.ShowDepartments,  # pylint: disable=unused-argument
    departments: DepartmentCollection,
) -> Response:
    """List every department alphabetically."""
    return Table.single_column(
        "Showing all Departments", DEPARTMENT_COLUMN, departments.list()
    )


def form_department(
    cmd: commands.FormDepartment, departments: DepartmentCollection
) -> Response:
    """Create a new, empty department."""
    name = departments.create(cmd.department)
    logger.debug("Formed department %s", name)
    return Message(f'Formed "{name}" department')


def dissolve_department(
    cmd: commands.DissolveDepartment, departments: DepartmentCollection
) -> Response:
    """Remove a department together with all of its employees."""
    name = departments.delete(cmd.department)
    logger.debug("Dissolved department %s", name)
    return Message(f'Dissolved "{name}" department')


# ============================================================================
#                       Employee Listing Handlers
# ============================================================================


def _employee_groups(
    departments: DepartmentCollection,
) -> list[tuple[str, list[str]]]:
    """Return ``(department, employees)`` pairs in department order."""
    return [
        (name, departments.find(name).employees.list()) for name in departments.list()
    ]


def list_employees(
    cmd: commands.ListEmployees,  # pylint: disable=unused-argument
    departments: DepartmentCollection,
) -> Response:
    """List every employee across all departments, sorted by name."""
    employees = [
        employee
        for _, group in _employee_groups(departments)
        for employee in group
    ]
    employees.sort(key=str.upper)
    return Table.single_column("Showing all Employees", EMPLOYEE_COLUMN, employees)


def list_employees_by_department(
    cmd: commands.ListEmployeesByDepartment,  # pylint: disable=unused-argument
    departments: DepartmentCollection,
) -> Response:
    """List employees grouped by department.

    Departments are in alphabetical order, and employees are alphabetical
    within each department.
    """
    rows = tuple(
        {DEPARTMENT_COLUMN: department, EMPLOYEE_COLUMN: employee}
        for department, group in _employee_groups(departments)
        for employee in group
    )
    return Table(
        title="Showing Employees grouped by Department",
        headers=(DEPARTMENT_COLUMN, EMPLOYEE_COLUMN),
        rows=rows,
    )


def list_employees_in_department(
    cmd: commands.ListEmployeesInDepartment, departments: DepartmentCollection
) -> Response:
    """List the employees of a single department."""
    department = departments.find(cmd.department)
    return Table.single_column(
        f"Showing Employees assigned to the {department.name} Department",
        EMPLOYEE_COLUMN,
        department.employees.list(),
    )


# ============================================================================
#                       Employee Mutation Handlers
# ============================================================================


def assign_employee(
    cmd: commands.AssignEmployeeToDepartment, departments: DepartmentCollection
) -> Response:
    """Create an employee in an existing department."""
    department = departments.find(cmd.department)
    employee = department.employees.create(cmd.employee)
    logger.debug("Assigned %s to %s", employee, department.name)
    return Message(f'Assigned employee "{employee}" to {department.name} department')


def pull_employee(
    cmd: commands.PullEmployeeFromDepartment, departments: DepartmentCollection
) -> Response:
    """Remove an employee from a department.

    The message echoes the department exactly as it was typed.
    """
    department = departments.find(cmd.department)
    department.employees.delete(cmd.employee)
    logger.debug("Pulled %s from %s", cmd.employee, department.name)
    return Message(
        f'Pulled employee "{cmd.employee}" from department "{cmd.department}"'
    )


def transfer_employee(
    cmd: commands.TransferEmployeeBetweenDepartments,
    departments: DepartmentCollection,
) -> Response:
    """Move an employee from one department to another.

    Every check runs before anything is changed. The employee is then created
    in the destination first and only afterwards removed from the source, so
    at no point is the employee missing from both departments.

    Raises:
        NotFoundError: If either department, or the employee in the source,
            does not exist. Nothing is changed.
        TransferConflictError: If the destination already has the employee.
            Nothing is changed.
        DirectoryInvariantError: If the source removal fails after the
            destination insert succeeded.
    """

    if cmd.from_department == cmd.to_department:
        return Message(SAME_DEPARTMENT_TRANSFER)

    source = departments.find(cmd.from_department)
    source.employees.find(cmd.employee)
    target = departments.find(cmd.to_department)

    try:
        target.employees.create(cmd.employee)
    except ConflictError as e:
        raise TransferConflictError(cmd.employee, cmd.to_department) from e

    try:
        source.employees.delete(cmd.employee)
    except NotFoundError as e:
        logger.critical(
            "Transfer of %s left a copy in %s; source %s lost the employee mid-transfer",
            cmd.employee,
            target.name,
            source.name,
        )
        raise DirectoryInvariantError(
            f'Employee "{cmd.employee}" vanished from "{source.name}" during transfer'
        ) from e

    logger.debug("Transferred %s from %s to %s", cmd.employee, source.name, target.name)
    return Message(
        f'Employee "{cmd.employee}" transferred from "{cmd.from_department}" '
        f'to "{cmd.to_department}" department'
    )


# ============================================================================
#                       Handler Registry
# ============================================================================


COMMAND_HANDLERS: dict[type[commands.Command], Callable[..., Response]] = {
    commands.EmptyCommand: empty_command,
    commands.Exit: exit_command,
    commands.Help: help_command,
    commands.InvalidCommand: invalid_command,
    commands.InvalidSyntax: invalid_syntax,
    commands.ShowDepartments: show_departments,
    commands.FormDepartment: form_department,
    commands.DissolveDepartment: dissolve_department,
    commands.ListEmployees: list_employees,
    commands.ListEmployeesByDepartment: list_employees_by_department,
    commands.ListEmployeesInDepartment: list_employees_in_department,
    commands.AssignEmployeeToDepartment: assign_employee,
    commands.PullEmployeeFromDepartment: pull_employee,
    commands.TransferEmployeeBetweenDepartments: transfer_employee,
}

"""Query parser.

Turns one line of free text into exactly one :class:`~roster.service_layer.commands.Command`.

The line is split on runs of whitespace; there is no quoting or escaping. The
first token (case-insensitive) selects a per-command parsing routine from
``PARSERS``. An unknown first token yields ``InvalidCommand``, while a known
keyword with malformed arguments yields ``InvalidSyntax``. Parsing never raises.

Grammar::

    EXIT | QUIT | LEAVE | BYE
    HELP | HALP
    SHOW <DEPARTMENTS|DEPARTMENT|DEPTS|DEPT>
    LIST <EMPLOYEES|EMPLOYEE> [BY DEPARTMENT | IN <department>]
    FORM <department>
    DISSOLVE <department>
    ASSIGN <employee...> TO <department>
    PULL <employee...> FROM <department>
    TRANSFER <employee...> FROM <department> TO <department>

Department names are a single token. Employee names may span several tokens and
are re-joined with single spaces. ASSIGN, PULL, and TRANSFER are read from the
right, so an employee name may itself contain "to" or "from".
"""

from __future__ import annotations

from collections.abc import Callable

from . import commands

Tokens = list[str]

ONE_WORD_DEPARTMENT = "Due to company policy, department names can only be one word long"
ASSIGN_SYNTAX_ERR = (
    '"Assign" command must specify an employee to assign and a department to assign to'
)
PULL_SYNTAX_ERR = (
    '"Pull" command must specify an employee to pull and a department to pull from'
)
TRANSFER_SYNTAX_ERR = (
    '"Transfer" command must specify an employee, a department to transfer from, '
    "and a department to transfer to"
)

DEPARTMENT_LISTS = frozenset({"DEPARTMENTS", "DEPARTMENT", "DEPTS", "DEPT"})
EMPLOYEE_LISTS = frozenset({"EMPLOYEES", "EMPLOYEE"})


def tokenize(text: str) -> Tokens:
    """Split ``text`` on runs of whitespace."""
    return text.split()


def parse(text: str) -> commands.Command:
    """Parse a line of query text into a command.

    Args:
        text: The raw query line.

    Returns:
        The parsed command. Empty input gives ``EmptyCommand``.
    """

    tokens = tokenize(text)
    if not tokens:
        return commands.EmptyCommand()

    keyword, *rest = tokens
    if (routine := PARSERS.get(keyword.upper())) is None:
        return commands.InvalidCommand(keyword)
    return routine(rest)


# ============================================================================
#                           Per-command routines
# ============================================================================


def _parse_exit(_tokens: Tokens) -> commands.Command:
    return commands.Exit()


def _parse_help(_tokens: Tokens) -> commands.Command:
    return commands.Help()


def _parse_show(tokens: Tokens) -> commands.Command:
    if not tokens:
        return commands.InvalidSyntax('"Show" command must specify a list name')

    list_name, *extra = tokens
    if list_name.upper() not in DEPARTMENT_LISTS:
        return commands.InvalidSyntax(
            f'Cannot show "{list_name}": list does not exist'
        )
    if extra:
        return commands.InvalidSyntax(
            f'Unexpected token "{extra[0]}" after list name "{list_name}"'
        )
    return commands.ShowDepartments()


def _parse_list(tokens: Tokens) -> commands.Command:
    if not tokens:
        return commands.InvalidSyntax('"List" command must specify a list name')

    list_name, *rest = tokens
    if list_name.upper() not in EMPLOYEE_LISTS:
        return commands.InvalidSyntax(
            f'Cannot list "{list_name}": list does not exist'
        )
    if not rest:
        return commands.ListEmployees()

    operator, *rest = rest
    match operator.upper():
        case "BY":
            return _parse_list_by(rest)
        case "IN":
            return _parse_list_in(rest)
        case _:
            return commands.InvalidSyntax(
                f'Unexpected token "{operator}" after list name "{list_name}"'
            )


def _parse_list_by(tokens: Tokens) -> commands.Command:
    if not tokens:
        return commands.InvalidSyntax(
            '"List employees by" must specify a group by field'
        )

    field, *extra = tokens
    if field.upper() != "DEPARTMENT":
        return commands.InvalidSyntax(
            f'"{field}" is not a field employees can by grouped by'
        )
    if extra:
        return commands.InvalidSyntax(
            f'Unexpected token "{extra[0]}" after group by field "{field}"'
        )
    return commands.ListEmployeesByDepartment()


def _parse_list_in(tokens: Tokens) -> commands.Command:
    if not tokens:
        return commands.InvalidSyntax(
            'Command "List employees in" must specify a department name'
        )

    department, *extra = tokens
    if extra:
        return commands.InvalidSyntax(
            f'Unexpected token "{extra[0]}" after department name "{department}"'
        )
    return commands.ListEmployeesInDepartment(department)


def _single_department(tokens: Tokens, missing: str) -> str | commands.InvalidSyntax:
    if not tokens:
        return commands.InvalidSyntax(missing)
    if len(tokens) > 1:
        return commands.InvalidSyntax(ONE_WORD_DEPARTMENT)
    return tokens[0]


def _parse_form(tokens: Tokens) -> commands.Command:
    department = _single_department(
        tokens, '"Form" command must specify a department to form'
    )
    if isinstance(department, commands.InvalidSyntax):
        return department
    return commands.FormDepartment(department)


def _parse_dissolve(tokens: Tokens) -> commands.Command:
    department = _single_department(
        tokens, '"Dissolve" command must specify a department to dissolve'
    )
    if isinstance(department, commands.InvalidSyntax):
        return department
    return commands.DissolveDepartment(department)


def _split_employee_clause(tokens: Tokens, keyword: str) -> tuple[str, str] | None:
    """Split ``<employee...> <keyword> <department>`` read from the right.

    Returns:
        ``(employee, department)``, or None if the shape does not match.
    """
    # pylint: disable=magic-value-comparison
    if len(tokens) < 3 or tokens[-2].upper() != keyword:
        return None
    return " ".join(tokens[:-2]), tokens[-1]


def _parse_assign(tokens: Tokens) -> commands.Command:
    if (parts := _split_employee_clause(tokens, "TO")) is None:
        return commands.InvalidSyntax(ASSIGN_SYNTAX_ERR)
    employee, department = parts
    return commands.AssignEmployeeToDepartment(employee, department)


def _parse_pull(tokens: Tokens) -> commands.Command:
    if (parts := _split_employee_clause(tokens, "FROM")) is None:
        return commands.InvalidSyntax(PULL_SYNTAX_ERR)
    employee, department = parts
    return commands.PullEmployeeFromDepartment(employee, department)


def _parse_transfer(tokens: Tokens) -> commands.Command:
    if (outer := _split_employee_clause(tokens, "TO")) is None:
        return commands.InvalidSyntax(TRANSFER_SYNTAX_ERR)
    _, to_department = outer
    if (inner := _split_employee_clause(tokens[:-2], "FROM")) is None:
        return commands.InvalidSyntax(TRANSFER_SYNTAX_ERR)
    employee, from_department = inner
    return commands.TransferEmployeeBetweenDepartments(
        employee, from_department, to_department
    )


PARSERS: dict[str, Callable[[Tokens], commands.Command]] = {
    "EXIT": _parse_exit,
    "QUIT": _parse_exit,
    "LEAVE": _parse_exit,
    "BYE": _parse_exit,
    "HELP": _parse_help,
    "HALP": _parse_help,
    "SHOW": _parse_show,
    "LIST": _parse_list,
    "FORM": _parse_form,
    "DISSOLVE": _parse_dissolve,
    "ASSIGN": _parse_assign,
    "PULL": _parse_pull,
    "TRANSFER": _parse_transfer,
}

"""Functional tests for ROSTER's CLI help/version output and in-shell help.

This suite verifies:
- The long-form `HELP` prose from `roster.entrypoints.cli.main` is actually
  rendered on `--help` (compared after stripping ANSI and normalizing whitespace).
- The help frame appears (Usage/Options/Commands).
- A new user inside the shell can discover every query keyword through `help`.

Notes:
- Help text can be reflowed by Click; `_normalize()` collapses whitespace so the
  comparison is robust to wrapping.
"""

from __future__ import annotations

import re
from textwrap import dedent
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

import roster
from roster.entrypoints.cli import main

if TYPE_CHECKING:
    from click.testing import Result

ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")  # strip SGR styling only


def _normalize(s: str) -> str:
    """Return `s` with leading/trailing space trimmed and internal whitespace collapsed."""
    return re.sub(r"\s+", " ", s.strip())


def _assert_help_displayed(result: Result):
    """Assert that help output contains the project HELP text and expected sections.

    - Strips ANSI before checking.
    - Normalizes whitespace to avoid failures from wrapping/reflow.
    """
    # pylint: disable=magic-value-comparison
    text = ANSI_RE.sub("", result.output)
    expected_message = _normalize(dedent(main.HELP))
    assert expected_message
    assert expected_message in _normalize(text), "HELP text not rendered."
    assert "Usage:" in text
    assert "Options:" in text
    assert "query" in text
    assert "shell" in text


# ============================================================================
#                           Tests
# ============================================================================


class TestNewRosterUser:
    """A new user of ROSTER, unfamiliar with the tool, tries to get help."""

    @staticmethod
    @pytest.mark.parametrize("args", ([], ["-h"], ["--help"]))
    def test_roster_help_output(args: str):
        """Verify that help is shown with no args/-h/--help.

        Given ROSTER is available on the PATH
        When `roster` is invoked with no args, `-h`, or `--help`
        Then the long HELP prose and the subcommands appear
        """

        # A new user looks for help by using the typical flags
        # i.e. `-h` or `--help`, or by running the command with no args.
        runner = CliRunner()
        result = runner.invoke(main.roster, args)

        # The user sees the help text
        # Which includes the long-form HELP message, usage, options, and commands
        _assert_help_displayed(result)

    @staticmethod
    def test_roster_version_output():
        """User runs --version and sees the version string."""
        runner = CliRunner()
        result = runner.invoke(main.roster, ["--version"])

        # The user sees the version text
        assert result.exit_code == 0
        assert roster.__version__ in result.output

    @staticmethod
    def test_shell_help_lists_every_query():
        """Inside the shell, `help` names every available query."""
        # The user starts a shell and asks for help, then leaves
        runner = CliRunner()
        result = runner.invoke(
            main.roster, ["--no-flight-recorder", "shell"], input="halp\nbye\n"
        )
        assert result.exit_code == 0

        # Every keyword the shell understands is mentioned
        # pylint: disable=magic-value-comparison
        for keyword in (
            "Help",
            "Exit",
            "Show departments",
            "List employees",
            "List employees by department",
            "List employees in {department}",
            "Form {department}",
            "Assign {employee} to {department}",
            "Transfer {employee} from {department} to {department}",
            "Pull {employee} from {department}",
            "Dissolve {department}",
        ):
            assert f'"{keyword}"' in result.output

    @staticmethod
    def test_new_user_builds_a_department():
        """A user forms a department, staffs it, and reads it back."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            session = (
                "form engineering\n"
                "assign Ada Lovelace to Engineering\n"
                "assign grace HOPPER to engineering\n"
                "list employees by department\n"
                "exit\n"
            )
            result = runner.invoke(
                main.roster, ["--no-flight-recorder", "shell"], input=session
            )

        # pylint: disable=magic-value-comparison
        assert result.exit_code == 0
        assert 'Formed "Engineering" department' in result.output
        assert 'Assigned employee "Grace Hopper" to Engineering department' in (
            result.output
        )
        assert "Showing Employees grouped by Department" in result.output
        assert result.output.index("Ada Lovelace", result.output.index("Showing")) < (
            result.output.index("Grace Hopper", result.output.index("Showing"))
        )

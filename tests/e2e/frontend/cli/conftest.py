"""Fixtures for end-to-end tests of the `roster` command.

`log-demo` is a test-only subcommand that logs one line per level from a
project logger and a few from a third-party logger, so console verbosity and
the flight recorder can be checked without depending on what real queries log.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from roster.entrypoints.cli.main import roster

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Log a fixed sequence of records on 'roster.demo' and 'some.thirdparty'."""
    project = logging.getLogger("roster.demo")
    project.debug("This is a debug-level test message.")
    project.info("This is an info-level test message.")
    project.warning("This is a warning-level test message.")
    project.error("This is an error-level test message.")
    project.critical("This is a critical-level test message.")

    third_party = logging.getLogger("some.thirdparty")
    third_party.debug("This is a debug-level third-party test message.")
    third_party.info("This is an info-level third-party test message.")
    third_party.warning("This is a warning-level third-party test message.")

    # logged after the last WARNING, so only a forced flush writes it
    project.debug("This is a final debug-level test message.")


def _unregister(group: click.Group, name: str) -> None:
    """Drop `name` from the group, including any Cloup section that lists it."""
    group.commands.pop(name, None)
    default_section = getattr(group, "_default_section", None)
    if default_section is not None:
        default_section.commands.pop(name, None)
    for section in getattr(group, "_sections", []):
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Attach `log-demo` to the `roster` group for one test."""
    roster.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _unregister(roster, "log-demo")


@pytest.fixture
def runner():
    """A Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside the runner's isolated working directory."""
    with runner.isolated_filesystem():
        yield

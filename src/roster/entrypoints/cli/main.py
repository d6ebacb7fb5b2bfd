"""Roster CLI entry point.

Defines the top-level ``roster`` command (via Click-Extra) and registers
subcommands exposed by the project.

Currently available commands
- ``roster query``: run one query against a fresh directory and print the result.
- ``roster shell``: interactive query shell (one query per line).

Notes
- The CLI version is sourced from `roster.__version__` and displayed
  automatically by Click-Extra (``--version``).
- The directory is in-memory only; every invocation starts from scratch.

Examples
    $ roster --version
    $ roster query --seed list employees by department
    $ roster shell --seed
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from roster import __version__
from roster.logging import configure_logging, log_startup, verbosity_to_level

from .queries import query as query_command
from .queries import shell as shell_command

logger = logging.getLogger(__name__)


HELP = """ROSTER command-line interface.

    ROSTER keeps an in-memory directory of departments and the employees assigned
    to them. Departments are formed and dissolved, and employees are assigned,
    pulled, and transferred, through a small SQL-like query language.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file written by the flight recorder.",
    default=Path(user_log_dir("roster", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="ROSTER_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="ROSTER_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via ROSTER_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "(unaffected by -v/-q) and writes them to --log-path when a WARNING/ERROR "
        "occurs, or on clean exit if --force-flush is set. Console verbosity is "
        "unchanged. Use --no-flight-recorder to disable."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR; console output is unaffected."
    ),
    default=False,
    show_default=True,
    envvar="ROSTER_FORCE_FLUSH_FLIGHT_RECORDER",
    show_envvar=True,
)
@clickx.pass_context
def roster(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
) -> None:
    """ROSTER command-line interface."""

    level = verbosity_to_level(verbose_count, quiet_count)
    handlers = configure_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        flight_capacity=flight_recorder_capacity,
        flush_on_close=force_flush_flight_recorder,
    )

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        flush_on_close=force_flush_flight_recorder,
    )

    # flushes the flight recorder when --force-flush is set
    ctx.call_on_close(logging.shutdown)


roster.add_command(query_command)
roster.add_command(shell_command)

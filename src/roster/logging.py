"""Logging setup for the ROSTER CLI.

Two handlers hang off the root logger:

- a Rich console handler on stderr whose level follows ``-v``/``-q``, and
- an optional "flight recorder": a :class:`~logging.handlers.MemoryHandler`
  that keeps recent records at DEBUG and dumps them to a file once something
  goes wrong (WARNING or worse).

Query output is written to stdout, so neither handler ever mixes with it.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "roster"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d] %(levelname)s %(name)s:%(lineno)d: %(message)s"
)


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with ``[package]``.

    Sets ``record.prefix`` on every record (empty for ``roster.*`` loggers)
    and never drops anything.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def verbosity_to_level(verbose: int, quiet: int) -> int:
    """Map ``-v``/``-q`` counts to a level, starting from WARNING.

    Each ``-v`` lowers the threshold by one level and each ``-q`` raises it,
    clamped to DEBUG..CRITICAL.
    """
    level = logging.WARNING - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Console threshold. Ignored in debug mode, which always uses DEBUG.
        debug_mode: Show timestamps, logger names, and source locations.
        color: Let Rich pick a color system; False disables color entirely.

    Returns:
        RichHandler: Handler ready to attach to the root logger.
    """

    # follows click-extra's --color/--no-color
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter(fmt=DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder.

    Up to ``capacity`` records are held in memory and written to ``path`` when
    a record at ``flush_level`` or above arrives, or when the handler closes if
    ``flush_on_close`` is set. The file is truncated on first write and is not
    created at all when nothing is ever flushed.

    Args:
        path: File the buffered records are written to.
        capacity: Number of records held before an automatic flush.
        flush_level: Lowest level that triggers a flush.
        flush_on_close: Also flush whatever is buffered on close.

    Returns:
        MemoryHandler: Buffering handler with a lazily opened FileHandler target.
    """

    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(
    *,
    level: int,
    debug_mode: bool,
    color: bool,
    log_path: Path | None,
    flight_capacity: int,
    flush_on_close: bool,
) -> list[logging.Handler]:
    """Replace the root logger's handlers with the console and flight recorder.

    The root logger itself is opened up to DEBUG; each handler applies its own
    threshold. Passing ``log_path=None`` leaves the flight recorder out.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=log_path, capacity=flight_capacity, flush_on_close=flush_on_close
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    return handlers


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    flush_on_close: bool = False,
) -> None:
    """Log a one-line INFO banner, then environment details at DEBUG.

    The DEBUG lines rarely reach the console, but the flight recorder keeps
    them, so any dumped log starts with them.
    """

    logger.info(
        "ROSTER %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Click: %s", version("click"))
    logger.debug("Rich: %s", version("rich"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            str(log_path) if log_path else "<none>",
            flight_capacity,
            flush_on_close,
        )

"""Bootstrap the message bus with handlers and the in-memory directory."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from roster import config
from roster.adapters.directory import InMemoryDepartmentCollection, InMemoryDirectoryData
from roster.adapters.directory.seed import populate
from roster.service_layer.database import Database
from roster.service_layer.handlers import COMMAND_HANDLERS
from roster.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from roster.interfaces.directory import DepartmentCollection
    from roster.service_layer.commands import Command
    from roster.service_layer.responses import Response

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    departments: DepartmentCollection
    message_bus: MessageBus
    database: Database


def build_directory(seed: bool = False) -> DepartmentCollection:
    """Build a new, empty in-memory directory, optionally seeded.

    Raises:
        SeedError: If the seed fixture conflicts with itself.
    """
    departments = InMemoryDepartmentCollection(InMemoryDirectoryData())
    if seed:
        populate(departments)
        logger.info("Seeded directory with %d departments", len(departments.list()))
    return departments


def build_message_bus(
    departments: DepartmentCollection,
    command_handlers: dict[type[Command], Callable[..., Response]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"departments": departments}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(command_handlers=injected_command_handlers)


def bootstrap(seed: bool | None = None) -> AppContainer:
    """Assemble the directory, message bus, and query facade.

    Args:
        seed: Populate the directory with the seed fixture. When None, the
            `ROSTER_SEED` environment variable decides.
    """
    if seed is None:
        seed = config.get_seed()
    departments = build_directory(seed=seed)
    message_bus = build_message_bus(departments, COMMAND_HANDLERS)

    return AppContainer(
        departments=departments,
        message_bus=message_bus,
        database=Database(message_bus),
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)

"""Query facade: the single entry point for running query text.

``Database.query`` parses a line, dispatches the resulting command on the
message bus, and converts store errors into user-facing ``ERROR:`` messages.
Every query error is recoverable; the caller reports the message and carries on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from roster.interfaces.directory.errors import (
    ConflictError,
    DirectoryError,
    NotFoundError,
)

from .parser import parse
from .responses import ERROR_PREFIX, Message

if TYPE_CHECKING:
    from .messagebus import MessageBus
    from .responses import Response


# pylint: disable=too-few-public-methods


def format_query_error(error: DirectoryError) -> Message:
    """Wrap a store error in the matching ``ERROR:`` message.

    Args:
        error: A conflict or not-found error raised by a collection.

    Returns:
        ``ERROR: Query conflict: <detail>`` or ``ERROR: Query target not found: <detail>``.

    Raises:
        TypeError: If ``error`` is neither a conflict nor a not-found error.
    """
    match error:
        case ConflictError():
            return Message(f"{ERROR_PREFIX}Query conflict: {error}")
        case NotFoundError():
            return Message(f"{ERROR_PREFIX}Query target not found: {error}")
        case _:
            raise TypeError(f"cannot format {type(error).__name__} as a query error")


class Database:
    """Departmental employee directory queried with text commands.

    Args:
        bus: Message bus with a handler registered for every command type.

    Example:
        >>> from roster.bootstrap.bootstrap import bootstrap
        >>> db = bootstrap(seed=False).database
        >>> db.query("form Sales")
        Message(text='Formed "Sales" department')
    """

    def __init__(self, bus: MessageBus) -> None:
        self.bus = bus

    def query(self, text: str) -> Response:
        """Run one line of query text and return its response."""
        cmd = parse(text)
        try:
            return self.bus.handle(cmd)
        except (ConflictError, NotFoundError) as e:
            return format_query_error(e)

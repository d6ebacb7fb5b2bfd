"""Message bus implementation for handling commands."""

import logging
from collections.abc import Callable

from roster.interfaces.directory.errors import DirectoryError

from .commands import Command
from .responses import Response

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """A simple message bus for handling commands.

    The message bus routes each command to the handler registered for its exact
    type and returns the handler's response. It also logs every dispatch.
    Directory errors are expected outcomes of user queries and are logged at
    DEBUG; any other exception is logged with its traceback. Both are re-raised.

    Args:
        command_handlers: A mapping of command types to their handlers.
            Handlers must be callables that accept a single command argument;
            other dependencies (i.e. the department collection) should be
            injected via closures or other means.

    Note:
        Dispatch is synchronous and one command runs to completion before the
        next is accepted. Callers sharing a bus across threads must serialize
        calls to :meth:`handle` themselves.
    """

    def __init__(
        self,
        command_handlers: dict[type[Command], Callable[[Command], Response]],
    ) -> None:
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> Response:
        """Handle a command by dispatching it to the appropriate handler.

        Args:
            cmd: The command to handle.

        Returns:
            The handler's response.

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            Exception: If the handler raises an exception.
        """

        if handler := self._command_handlers.get(type(cmd)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling command %s with handler %s", cmd, handler_name)
            try:
                return handler(cmd)
            except DirectoryError as e:
                logger.debug("Command %s rejected by %s: %s", cmd, handler_name, e)
                raise
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling command %s with handler %s", cmd, handler_name
                )
                raise

        logger.error("No handler found for command %s", type(cmd).__name__)
        raise NoHandlerForCommand(cmd)

    @staticmethod
    def _get_handler_name(fn: Callable[..., Response]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)

"""Message bus implementation for handling commands."""

import inspect
import logging
from collections.abc import Callable

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """Route each command to the one handler registered for its type.

    Handlers are called with the command only; anything else they need (the
    registration workflow) is bound beforehand by the composition root. A
    handler may be a plain function or a coroutine function; either way its
    result is returned from `handle`.

    Args:
        command_handlers: Command type to handler.
    """

    def __init__(
        self,
        command_handlers: dict[type[Command], Callable[..., object]],
    ) -> None:
        self._command_handlers = command_handlers

    async def handle(self, cmd: Command) -> object:
        """Run the handler registered for ``type(cmd)`` and return its result.

        Raises:
            NoHandlerForCommand: Nothing is registered for the command's type.
            Exception: Whatever the handler raised, after it has been logged.
        """
        handler = self._command_handlers.get(type(cmd))
        if handler is None:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        name = handler_name(handler)
        logger.debug("Handling command %s with handler %s", type(cmd).__name__, name)
        try:
            result = handler(cmd)
            return await result if inspect.isawaitable(result) else result
        except Exception:
            logger.exception(
                "Exception handling command %s with handler %s",
                type(cmd).__name__,
                name,
            )
            raise


def handler_name(handler: Callable[..., object]) -> str:
    """Display name of a handler: its ``__name__``, a partial's target, or repr."""
    for candidate in (handler, getattr(handler, "func", None)):
        if (name := getattr(candidate, "__name__", None)) is not None:
            return name
    return repr(handler)

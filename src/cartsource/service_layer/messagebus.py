"""Command dispatch for the cart service layer."""

import functools
import logging
from collections.abc import Callable, Mapping
from typing import Any

from cartsource.domain.commands import Command
from cartsource.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)

CommandHandler = Callable[[Command], Any]

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Raised when a command type has no registered handler."""

    def __init__(self, command_type: type[Command]) -> None:
        self.command_type = command_type
        super().__init__(f"No handler registered for {command_type.__name__}")


class MessageBus:
    """Route each command to the one handler registered for its exact type.

    Handlers take only the command; their other dependencies are bound
    beforehand by `cartsource.bootstrap`. The bus hands back whatever the
    handler returns, which for cart commands is a `CommandResult`.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: Mapping[type[Command], CommandHandler],
    ) -> None:
        self.uow = uow
        self._handlers = dict(command_handlers)

    def handle(self, cmd: Command) -> Any:
        """Dispatch `cmd` and return the handler's result.

        Raises:
            NoHandlerForCommand: If nothing is registered for ``type(cmd)``.
        """
        handler = self._handlers.get(type(cmd))
        if handler is None:
            logger.error("No handler registered for %s", type(cmd).__name__)
            raise NoHandlerForCommand(type(cmd))

        name = handler_name(handler)
        logger.debug("Dispatching %r to %s", cmd, name)
        try:
            return handler(cmd)
        except Exception:
            logger.exception("%s failed on %r", name, cmd)
            raise


def handler_name(handler: Callable[..., Any]) -> str:
    """Readable name for a handler, looking through ``functools.partial``."""
    while isinstance(handler, functools.partial):
        handler = handler.func
    return getattr(handler, "__name__", None) or repr(handler)

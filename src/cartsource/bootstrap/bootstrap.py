"""Composition root: wires handlers, the unit of work and the id generator.

Library API for callers embedding the cart service; the CLI only replays events
and does not need a message bus.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from cartsource.adapters.id_generators import ULIDGenerator
from cartsource.adapters.unit_of_work import InMemoryUnitOfWork
from cartsource.service_layer.handlers import COMMAND_HANDLERS
from cartsource.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from cartsource.domain.commands import Command
    from cartsource.interfaces.id_generator import IdGenerator
    from cartsource.interfaces.unit_of_work import AbstractUnitOfWork


@dataclass(frozen=True)
class AppContainer:
    """Objects the entry points need at run time."""

    message_bus: MessageBus


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: Mapping[type[Command], Callable[..., Any]],
    event_id_generator: IdGenerator | None = None,
) -> MessageBus:
    """Bind each handler's dependencies and register it on a new bus.

    Event ids default to monotonic ULIDs.
    """
    dependencies = {
        "uow": uow,
        "event_id_generator": event_id_generator or ULIDGenerator(),
    }
    return MessageBus(
        uow,
        {
            command_type: inject_dependencies(handler, dependencies)
            for command_type, handler in command_handlers.items()
        },
    )


def bootstrap() -> AppContainer:
    """Default wiring: cart handlers over a fresh in-memory unit of work."""
    message_bus = build_message_bus(InMemoryUnitOfWork(), COMMAND_HANDLERS)
    return AppContainer(message_bus=message_bus)


def inject_dependencies(
    handler: Callable[..., Any], dependencies: Mapping[str, object]
) -> Callable[..., Any]:
    """Bind the dependencies whose names appear in the handler's signature.

    The result is a ``functools.partial``, so the bus still logs the handler
    under its own name.
    """
    wanted = inspect.signature(handler).parameters
    return functools.partial(
        handler, **{name: dep for name, dep in dependencies.items() if name in wanted}
    )

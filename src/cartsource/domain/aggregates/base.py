"""Event-sourced aggregate base class."""

import abc
from collections.abc import Iterable
from typing import ClassVar, TypeVar

from cartsource.domain.events import DomainEvent

A = TypeVar("A", bound="Aggregate")


class Aggregate(abc.ABC):
    """State rebuilt purely by applying domain events in order.

    Subclasses implement `_apply` for their closed set of events and raise
    `UnknownEventTypeError` for anything else. `version` counts every event
    applied, whether or not it changed the state.
    """

    STREAM_TYPE: ClassVar[str]
    """Stream type recorded on every envelope this aggregate's events are stored in."""

    def __init__(self, aggregate_id: str) -> None:
        self.aggregate_id: str = aggregate_id
        self._version: int = 0

    @classmethod
    def rehydrate(cls: type[A], aggregate_id: str, history: Iterable[DomainEvent]) -> A:
        """Build a fresh aggregate and replay `history` into it.

        Raises:
            UnknownEventTypeError: On the first event the aggregate cannot apply.
        """
        return cls(aggregate_id).apply_all(history)

    def apply(self: A, event: DomainEvent) -> A:
        """Apply one event, bump `version` and return the aggregate itself."""
        self._apply(event)
        self._version += 1
        return self

    def apply_all(self: A, events: Iterable[DomainEvent]) -> A:
        """Apply `events` left to right, same as calling `apply` on each."""
        for event in events:
            self.apply(event)
        return self

    @abc.abstractmethod
    def _apply(self, event: DomainEvent) -> None:
        """Mutate state for one event."""

    @property
    def version(self) -> int:
        """Number of events applied so far."""
        return self._version

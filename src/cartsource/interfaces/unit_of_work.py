"""Unit of Work port.

A unit of work scopes one command: events appended through its `eventstore`
become visible to other units only after `commit`. Leaving the ``with``
block always calls `rollback`, which discards whatever was not committed.
"""

from __future__ import annotations

import abc

from .eventstore import EventStore


class AbstractUnitOfWork(abc.ABC):
    """Transaction boundary around the event store."""

    eventstore: EventStore

    def __enter__(self) -> AbstractUnitOfWork:
        return self

    def __exit__(self, *args) -> None:
        # no-op for work that was already committed
        self.rollback()

    @abc.abstractmethod
    def commit(self) -> None:
        """Make the appended events durable and visible."""

    @abc.abstractmethod
    def rollback(self) -> None:
        """Drop everything appended since the last commit."""

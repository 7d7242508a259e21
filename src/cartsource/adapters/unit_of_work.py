"""In-memory Unit of Work for CARTSOURCE.

Appends made through the unit of work are staged and only reach the
underlying `InMemoryEventStore` on commit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from cartsource.adapters.eventstore import InMemoryEventStore
from cartsource.interfaces.eventstore import EventEnvelope, EventStore
from cartsource.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


class _StagingEventStore(EventStore):
    """Event store view that reads committed + staged events and stages appends."""

    def __init__(self, committed: InMemoryEventStore) -> None:
        self._committed = committed
        self.staged: list[Sequence[EventEnvelope]] = []

    def append(self, events: Sequence[EventEnvelope]) -> Sequence[EventEnvelope]:
        self.staged.append(list(events))
        return events

    def read_stream(
        self, stream_id: str, from_version: int = 1, to_version: int | None = None
    ) -> Iterable[EventEnvelope]:
        yield from self._committed.read_stream(stream_id, from_version, to_version)
        for batch in self.staged:
            for event in batch:
                if event.stream_id != stream_id or event.version < from_version:
                    continue
                if to_version is not None and event.version > to_version:
                    continue
                yield event


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Unit of work over a shared in-memory event store."""

    def __init__(self, store: InMemoryEventStore | None = None) -> None:
        self.store = store if store is not None else InMemoryEventStore()
        self.eventstore = _StagingEventStore(self.store)
        self.committed = False

    def __enter__(self):
        self.eventstore = _StagingEventStore(self.store)
        return super().__enter__()

    def commit(self):
        for batch in self.eventstore.staged:
            self.store.append(batch)
        logger.debug("Committed %d batch(es)", len(self.eventstore.staged))
        self.eventstore.staged = []
        self.committed = True

    def rollback(self):
        if self.eventstore.staged:
            logger.debug("Rolling back %d batch(es)", len(self.eventstore.staged))
        self.eventstore.staged = []

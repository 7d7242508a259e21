"""Repositories that load aggregates from, and record events into, an event store."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Generic, TypeVar

from cartsource.domain.aggregates import Aggregate, Cart

from .errors import AggregateNotFoundError
from .event_mapper import EventMapper

if TYPE_CHECKING:
    from cartsource.domain.events import DomainEvent
    from cartsource.interfaces.eventstore import EventEnvelope, EventStore
    from cartsource.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Aggregate)


class EventSourcedRepository(Generic[T]):
    """One stream per aggregate, keyed by the aggregate id.

    Loading replays the whole stream. Recording applies the new events to the
    in-memory aggregate first, then appends them at the versions that follow
    the aggregate's current version, so the event store's optimistic check
    catches concurrent writers.
    """

    def __init__(
        self,
        event_store: EventStore,
        event_id_generator: IdGenerator,
        event_mapper: EventMapper | None = None,
        *,
        aggregate_cls: type[T],
    ) -> None:
        self.event_store = event_store
        self.event_id_generator = event_id_generator
        self.event_mapper = event_mapper or EventMapper()
        self.aggregate_cls = aggregate_cls

    def load(self, aggregate_id: str) -> T:
        """Replay the stream of `aggregate_id`.

        Raises:
            AggregateNotFoundError: If the stream is empty.
        """
        history = [
            self.event_mapper.to_domain_event(envelope)
            for envelope in self.event_store.read_stream(aggregate_id)
        ]
        if not history:
            raise AggregateNotFoundError(self.aggregate_cls.__name__, aggregate_id)
        return self.aggregate_cls.rehydrate(aggregate_id, history)

    def get_or_create(self, aggregate_id: str) -> T:
        """Like `load`, but an empty stream yields a new, empty aggregate."""
        try:
            return self.load(aggregate_id)
        except AggregateNotFoundError:
            logger.debug(
                "%s %s has no events; starting empty",
                self.aggregate_cls.__name__,
                aggregate_id,
            )
            return self.aggregate_cls(aggregate_id)

    def append(self, aggregate: T, events: Sequence[DomainEvent]) -> None:
        """Apply `events` to `aggregate` and append them to its stream in one batch.

        The stream id is taken before applying, so an event that reassigns the
        aggregate id still lands in the stream the aggregate was loaded from.
        """
        stream_id = aggregate.aggregate_id
        first_version = aggregate.version + 1
        aggregate.apply_all(events)
        self.event_store.append(
            [
                self._envelope(aggregate, stream_id, version, event)
                for version, event in enumerate(events, start=first_version)
            ]
        )

    def _envelope(
        self, aggregate: T, stream_id: str, version: int, event: DomainEvent
    ) -> EventEnvelope:
        return self.event_mapper.to_envelope(
            stream_id=stream_id,
            stream_type=aggregate.STREAM_TYPE,
            version=version,
            event_id=self.event_id_generator.new_id(),
            event=event,
        )


class CartRepository(EventSourcedRepository[Cart]):
    """Repository for `Cart` streams."""

    def __init__(
        self,
        event_store: EventStore,
        event_id_generator: IdGenerator,
        event_mapper: EventMapper | None = None,
    ) -> None:
        super().__init__(
            event_store, event_id_generator, event_mapper, aggregate_cls=Cart
        )

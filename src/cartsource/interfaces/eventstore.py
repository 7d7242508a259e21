"""Event store port for CARTSOURCE.

Domain events are persisted wrapped in an `EventEnvelope`. Each cart owns one
stream whose versions run 1, 2, 3, ... without gaps; the store enforces that
on append, which is what makes concurrent writers to the same cart fail
instead of silently interleaving.

Append contract:
- A batch belongs to one stream, has contiguous versions and carries no
  `global_seq` yet (`InvalidEnvelopeError` otherwise).
- The first version of the batch must be the stream tip + 1
  (`VersionConflictError` otherwise).
- Event ids are unique across the store (`DuplicateEventIdError`).
- The store assigns `global_seq` and a UTC `recorded_at` and returns the
  envelopes in input order.

Read contract:
- `read_stream(stream_id, from_version=1, to_version=None)` yields by ascending
  version with inclusive bounds; unknown streams yield nothing; invalid
  ranges raise `ValueError`.
"""

import abc
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any


class EventStoreError(Exception):
    """Base class for event store errors."""


class VersionConflictError(EventStoreError):
    """The batch does not continue the stream at its current tip."""


class DuplicateEventIdError(EventStoreError):
    """An event id is already stored."""


class InvalidEnvelopeError(EventStoreError):
    """An envelope or batch breaks the envelope invariants."""


@dataclass(frozen=True, slots=True)
class EventEnvelope:
    """A serialized domain event and its position in a stream.

    `global_seq` and `recorded_at` are filled in by the store on append.
    """

    # pylint: disable=too-many-instance-attributes

    stream_id: str
    stream_type: str
    version: int
    event_id: str
    event_type: str
    payload: dict[str, Any]
    metadata: dict[str, Any] | None = None
    recorded_at: datetime | None = None
    global_seq: int | None = None

    def __post_init__(self) -> None:
        if self.version < 1:
            raise InvalidEnvelopeError("version must be >= 1")
        if self.global_seq is not None and self.global_seq < 1:
            raise InvalidEnvelopeError("global_seq must be >= 1 when set")
        if self.recorded_at is not None:
            offset = self.recorded_at.utcoffset()
            if offset is None:
                raise InvalidEnvelopeError("recorded_at must be tz-aware.")
            if offset != timedelta(0):
                raise InvalidEnvelopeError("recorded_at must be UTC.")
        identifiers = (self.stream_id, self.stream_type, self.event_type, self.event_id)
        if not all(value.strip() for value in identifiers):
            raise InvalidEnvelopeError(
                "stream_id, stream_type, event_id and event_type must be non-empty."
            )


def check_batch(events: Sequence[EventEnvelope]) -> None:
    """Check the append-batch invariants that do not depend on stored state.

    Raises:
        InvalidEnvelopeError: On the first invariant the batch breaks.
    """
    if not events:
        raise InvalidEnvelopeError("Empty batch is not allowed.")

    stream = (events[0].stream_id, events[0].stream_type)
    if any((e.stream_id, e.stream_type) != stream for e in events):
        raise InvalidEnvelopeError("Mixed streams in a single batch.")
    if any(e.global_seq is not None for e in events):
        raise InvalidEnvelopeError("global_seq must be None before persistence.")
    if len({e.event_id for e in events}) != len(events):
        raise InvalidEnvelopeError("Duplicate event_id within batch.")

    first = events[0].version
    if [e.version for e in events] != list(range(first, first + len(events))):
        raise InvalidEnvelopeError("Versions in batch must be contiguous and ordered.")


class EventStore(abc.ABC):
    """Append-only store of event streams."""

    @abc.abstractmethod
    def append(self, events: Sequence[EventEnvelope]) -> Sequence[EventEnvelope]:
        """Atomically append a single-stream batch; see the module docstring.

        Returns:
            The stored envelopes, in input order, with `global_seq` and
            `recorded_at` set.
        """

    @abc.abstractmethod
    def read_stream(
        self, stream_id: str, from_version: int = 1, to_version: int | None = None
    ) -> Iterable[EventEnvelope]:
        """Yield the events of one stream between two versions (inclusive).

        Raises:
            ValueError: If `from_version` < 1 or `to_version` < `from_version`.
        """

"""Non-durable event store.

Streams live in a dict for the lifetime of the instance. Used by the
in-memory unit of work, the CLI and the tests.
"""

import dataclasses
from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone

from cartsource.interfaces.eventstore import (
    DuplicateEventIdError,
    EventEnvelope,
    EventStore,
    VersionConflictError,
    check_batch,
)


class InMemoryEventStore(EventStore):
    """Event store keeping each stream as a version-ordered list."""

    def __init__(self) -> None:
        self._streams: defaultdict[str, list[EventEnvelope]] = defaultdict(list)
        self._event_ids: set[str] = set()
        self._global_seq = 0

    def append(self, events: Sequence[EventEnvelope]) -> Sequence[EventEnvelope]:
        check_batch(events)
        stream = self._streams[events[0].stream_id]

        expected = len(stream) + 1
        if events[0].version != expected:
            raise VersionConflictError(
                f"expected first version {expected}, got {events[0].version}"
            )
        if duplicates := self._event_ids.intersection(e.event_id for e in events):
            raise DuplicateEventIdError(f"duplicate event_id {min(duplicates)}")

        recorded_at = datetime.now(timezone.utc)
        stored = []
        for event in events:
            self._global_seq += 1
            stored.append(
                dataclasses.replace(
                    event, global_seq=self._global_seq, recorded_at=recorded_at
                )
            )

        stream.extend(stored)
        self._event_ids.update(e.event_id for e in stored)
        return stored

    def read_stream(
        self, stream_id: str, from_version: int = 1, to_version: int | None = None
    ) -> Iterable[EventEnvelope]:
        if from_version < 1:
            raise ValueError("from_version must be >= 1")
        if to_version is not None and to_version < from_version:
            raise ValueError("to_version must be >= from_version")

        # versions are 1-based and gapless, so they double as list positions
        stream = self._streams.get(stream_id, [])
        yield from stream[from_version - 1 : to_version]

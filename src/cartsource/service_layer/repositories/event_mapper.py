"""Conversions between DomainEvents and EventEnvelopes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, fields
from typing import TYPE_CHECKING, Any, get_type_hints

from cartsource.domain.events import DOMAIN_EVENT_REGISTRY
from cartsource.interfaces.eventstore import EventEnvelope

if TYPE_CHECKING:
    from cartsource.domain.events import DomainEvent


class EventMapper:
    """Maps between DomainEvents and EventEnvelopes."""

    def __init__(
        self, event_registry: dict[str, type[DomainEvent]] | None = None
    ) -> None:
        self.event_registry = (
            event_registry if event_registry is not None else DOMAIN_EVENT_REGISTRY
        )

    @staticmethod
    def to_envelope(
        stream_id: str,
        stream_type: str,
        version: int,
        event_id: str,
        event: DomainEvent,
    ) -> EventEnvelope:
        """Convert a DomainEvent to an EventEnvelope."""
        return EventEnvelope(
            stream_id=stream_id,
            stream_type=stream_type,
            version=version,
            event_id=event_id,
            event_type=type(event).__name__,
            payload=asdict(event),
        )

    def to_domain_event(self, envelope: EventEnvelope) -> DomainEvent:
        """Convert an EventEnvelope back to a DomainEvent."""
        return self._build(envelope.event_type, envelope.payload)

    def from_record(self, record: Mapping[str, Any]) -> DomainEvent:
        """Build a DomainEvent from a plain `{"event_type": ..., "payload": ...}` mapping.

        Raises:
            ValueError: If the record is malformed or names an unknown event type.
        """
        if not isinstance(record, Mapping) or not isinstance(
            record.get("event_type"), str
        ):
            raise ValueError(f"Malformed event record: {record!r}")
        payload = record.get("payload") or {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"Malformed event payload: {payload!r}")
        return self._build(record["event_type"], payload)

    def _build(self, event_type: str, payload: Mapping[str, Any]) -> DomainEvent:
        if not (cls := self.event_registry.get(event_type)):
            raise ValueError(f"Unknown event type: {event_type}")
        _check_field_types(cls, event_type, payload)
        try:
            return cls(**payload)
        except TypeError as e:
            raise ValueError(f"Invalid payload for {event_type}: {e}") from e


def _check_field_types(
    cls: type[DomainEvent], event_type: str, payload: Mapping[str, Any]
) -> None:
    """Reject payload values whose JSON type does not match the event field.

    Missing and unexpected keys are left to the dataclass constructor.
    """
    hints = get_type_hints(cls)
    for field in fields(cls):
        if field.name not in payload:
            continue
        expected, value = hints[field.name], payload[field.name]
        # bool is an int subclass; quantities and prices must be real integers
        if isinstance(value, bool) or not isinstance(value, expected):
            raise ValueError(
                f"Invalid payload for {event_type}: "
                f"{field.name} must be {expected.__name__}, got {value!r}"
            )

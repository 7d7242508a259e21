"""Package for repository implementations."""

from .event_mapper import EventMapper
from .event_sourced import CartRepository, EventSourcedRepository

__all__ = ["CartRepository", "EventMapper", "EventSourcedRepository"]

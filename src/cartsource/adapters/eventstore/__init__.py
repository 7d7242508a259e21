"""Event store adapters."""

from .memory import InMemoryEventStore

__all__ = ["InMemoryEventStore"]

"""Event store module."""

from .event_store import EventStore, IEventStore

__all__ = ["EventStore", "IEventStore"]

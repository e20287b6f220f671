"""In-memory event store shared by all request handlers."""

import threading
from typing import Protocol

from ..logging_config import get_logger
from ..models import Event

logger = get_logger(__name__)


class IEventStore(Protocol):
    """Ordered, lock-protected holder of not-yet-consumed events."""

    def add(self, event: Event) -> None:
        """Append an event at the tail."""
        ...

    def snapshot(self) -> list[Event]:
        """Copy of the stored events in arrival order."""
        ...

    def drain(self) -> list[Event]:
        """Atomically return the stored events and empty the store."""
        ...

    def __len__(self) -> int:
        ...


class EventStore:
    """Thread-safe append-only-until-drained list of events.

    One lock guards the list. It is held only for the append, copy or swap,
    so callers encode and decode JSON outside of it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._events: list[Event] = []

    def add(self, event: Event) -> None:
        """Append an event at the tail."""
        with self._lock:
            self._events.append(event)
            count = len(self._events)
        logger.debug("Now have %d events", count)

    def snapshot(self) -> list[Event]:
        """Copy of the stored events in arrival order."""
        with self._lock:
            return self._events.copy()

    def drain(self) -> list[Event]:
        """Atomically return the stored events and empty the store."""
        with self._lock:
            events, self._events = self._events, []
        return events

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

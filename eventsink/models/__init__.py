"""Data models for the event collector."""

from .events import BulkEvent, BulkItem, Event, encode_events

__all__ = [
    "Event",
    "BulkEvent",
    "BulkItem",
    "encode_events",
]

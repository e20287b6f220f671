"""Management event data models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Event(BaseModel):
    """A normalized management event reported by a node.

    Decoding is strict: unknown fields are rejected and JSON types are not
    coerced. host/hostport are filled in from the peer address on ingest.
    """

    model_config = ConfigDict(extra="forbid", strict=True, allow_inf_nan=False)

    host: str = ""
    hostport: str = ""
    node: str = ""
    seq: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    version: int = Field(default=0, ge=-128, le=127)
    time: float = 0.0
    data: dict[str, Any] | None = None  # opaque payload
    event: str = ""
    bulked: bool = False


class BulkItem(Event):
    """Event nested in a bulk envelope; unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore", strict=True)


class BulkEvent(BaseModel):
    """Envelope carrying several events in one submission."""

    model_config = ConfigDict(extra="ignore", strict=True, allow_inf_nan=False)

    node: str = ""
    seq: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    version: int = Field(default=0, ge=-128, le=127)
    time: float = 0.0
    data: list[BulkItem] | None = None
    event: str = ""


_EVENT_LIST = TypeAdapter(list[Event])


def encode_events(events: list[Event]) -> bytes:
    """Serialize events as a JSON array, every field included."""
    return _EVENT_LIST.dump_json(events)

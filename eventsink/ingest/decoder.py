"""Decoding of POST bodies into normalized events."""

from typing import Any

from pydantic import BaseModel, ValidationError
from pydantic_core import from_json

from ..errors import DecodeError
from ..logging_config import get_logger
from ..models import BulkEvent, Event

logger = get_logger(__name__)


def describe_validation_error(exc: ValidationError) -> str:
    """One-line, deterministic rendering of a pydantic error."""
    parts = []
    for err in exc.errors(include_url=False):
        location = ".".join(str(p) for p in err["loc"]) or exc.title
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


def parse_json(body: bytes) -> Any:
    """Parse a body as standard JSON; NaN and Infinity are not JSON.

    Raises:
        DecodeError: body is not valid JSON.
    """
    try:
        return from_json(body, allow_inf_nan=False)
    except ValueError as e:
        raise DecodeError(f"{Event.__name__}: Invalid JSON: {e}") from e


def _validate(model: type[BaseModel], obj: Any) -> tuple[BaseModel | None, str | None]:
    """Validate parsed JSON against model, returning (result, error message)."""
    try:
        return model.model_validate(obj), None
    except ValidationError as e:
        return None, describe_validation_error(e)


def decode_events(body: bytes) -> list[Event]:
    """
    Decode a request body into events.

    The body is parsed once, then tried as a standalone event with the
    strict Event schema. If that fails it is tried as a bulk envelope, whose
    nested events are marked bulked and returned in order; an envelope
    without data carries no events. When both fail the single-event error
    is raised.

    Raises:
        DecodeError: body is neither an event nor a bulk envelope.
    """
    obj = parse_json(body)

    single, single_error = _validate(Event, obj)
    if single_error is None:
        return [single.model_copy(update={"bulked": False})]

    bulk, bulk_error = _validate(BulkEvent, obj)
    if bulk_error is None:
        # TODO: reject envelopes whose event tag is not "eventsink_bulk"
        # once every node version sends it.
        events = [
            Event.model_validate({**item.model_dump(), "bulked": True})
            for item in bulk.data or []
        ]
        logger.debug("Unwrapped %d bulked events from node %s", len(events), bulk.node)
        return events

    logger.debug("Body is not a bulk envelope either: %s", bulk_error)
    raise DecodeError(single_error)

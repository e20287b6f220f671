"""Ingestion of event submissions."""

from .decoder import decode_events, describe_validation_error, parse_json
from .peer import peer_address

__all__ = ["decode_events", "describe_validation_error", "parse_json", "peer_address"]

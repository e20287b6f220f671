"""Errors raised while handling collector requests."""


class EventSinkError(Exception):
    """Base class; status_code is the HTTP status the error maps to."""

    status_code = 500


class RoutingError(EventSinkError):
    """Wrong path for the request method."""

    status_code = 400

    def __init__(self, method: str, path: str):
        super().__init__(f"Invalid {method} path {path}")
        self.method = method
        self.path = path


class DecodeError(EventSinkError):
    """Request body is not a valid event or bulk envelope."""

    status_code = 400


class PeerAddressError(EventSinkError):
    """Transport did not supply a usable ip:port for the caller."""

    status_code = 500

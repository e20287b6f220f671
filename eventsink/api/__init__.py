"""HTTP API for the event collector."""

from .app import create_fastapi_app

__all__ = ["create_fastapi_app"]

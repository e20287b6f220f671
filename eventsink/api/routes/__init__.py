"""API routes."""

from .events import create_events_router

__all__ = ["create_events_router"]

"""HTTP collector for node management events."""

from .api import create_fastapi_app
from .app import Application, IApplication
from .config import Credential, Settings, load_settings
from .errors import DecodeError, EventSinkError, PeerAddressError, RoutingError
from .ingest import decode_events, peer_address
from .models import BulkEvent, Event
from .store import EventStore, IEventStore

__all__ = [
    # Application
    "Application",
    "IApplication",
    "create_fastapi_app",
    # Configuration
    "Settings",
    "Credential",
    "load_settings",
    # Models
    "Event",
    "BulkEvent",
    # Components
    "IEventStore",
    "EventStore",
    "decode_events",
    "peer_address",
    # Errors
    "EventSinkError",
    "RoutingError",
    "DecodeError",
    "PeerAddressError",
]

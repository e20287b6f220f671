"""Pytest configuration and fixtures."""

import copy
import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

PEER = ("1.2.3.4", 5)

_SAMPLE_EVENT = {
    "node": "10.44.131.22",
    "seq": 3,
    "version": 1,
    "time": 1576815614.906535,
    "data": {
        "protocol": "H323",
        "is_presenting": False,
        "connect_time": None,
        "service_tag": "",
        "conference": "meet.qa",
        "display_name": "pexep_67_ep4_Jordan@vp.pexip.com",
        "uuid": "d5fc4ce0-d0cc-4582-8c67-c033ff397c72",
        "role": "chair",
        "has_media": True,
        "nested": {"streams": [{"kind": "audio", "bitrate": 64.5}, {"kind": "video"}]},
    },
    "event": "participant_connected",
}


@pytest.fixture
def sample_event():
    """A participant event as sent by a conferencing node."""
    return copy.deepcopy(_SAMPLE_EVENT)


@pytest.fixture
def settings():
    """Default settings, auth disabled."""
    from eventsink.config import Settings

    return Settings()


@pytest.fixture
def store():
    """Create an empty event store."""
    from eventsink.store import EventStore

    return EventStore()


@pytest.fixture
def application(settings, store):
    """Create Application around the store."""
    from eventsink.app import Application

    return Application(settings, store)


@pytest.fixture
def fastapi_app(application):
    """Create FastAPI app for the application."""
    from eventsink.api import create_fastapi_app

    return create_fastapi_app(application)


@pytest.fixture
def make_client():
    """Factory for HTTP clients talking to an app in-process from a peer address."""

    def _make(app, client=PEER, auth=None) -> httpx.AsyncClient:
        transport = httpx.ASGITransport(app=app, client=client)
        return httpx.AsyncClient(transport=transport, base_url="http://testserver", auth=auth)

    return _make


@pytest_asyncio.fixture
async def client(fastapi_app, make_client):
    """Async HTTP client connected from PEER."""
    async with make_client(fastapi_app) as c:
        yield c

"""SIM implementation - a fake conferencing node emitting events."""

import asyncio
import random
import time
import uuid
from typing import Any, Protocol

import httpx

from eventsink.logging_config import get_logger

logger = get_logger(__name__)


class ISim(Protocol):
    """Generate test traffic against a running collector."""

    async def start(self) -> None:
        """Start hardcoded scenario."""
        ...

    async def stop(self) -> None:
        """Stop scenario."""
        ...


class Sim:
    """Node simulator with a hardcoded call scenario."""

    def __init__(
        self,
        api_url: str = "http://localhost:8000",
        node: str = "10.44.131.21",
        auth: tuple[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        delay: tuple[float, float] = (0.5, 1.5),
    ):
        self._api_url = api_url.rstrip("/")
        self._node = node
        self._auth = auth
        self._transport = transport
        self._delay = delay
        self._seq = 0
        self._running = False
        self._task: asyncio.Task | None = None
        self._client: httpx.AsyncClient | None = None

    @property
    def seq(self) -> int:
        """Last sequence number used."""
        return self._seq

    def _next_event(self, event: str, data: dict[str, Any]) -> dict[str, Any]:
        self._seq += 1
        return {
            "node": self._node,
            "seq": self._seq,
            "version": 1,
            "time": time.time(),
            "data": data,
            "event": event,
        }

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._api_url,
                auth=self._auth,
                transport=self._transport,
                timeout=10.0,
            )
        return self._client

    async def start(self) -> None:
        """Start hardcoded scenario."""
        if self._running:
            return

        self._running = True
        self._ensure_client()

        # Start background task
        self._task = asyncio.create_task(self._run_scenario())

    async def wait(self) -> None:
        """Wait for the scenario to finish."""
        if self._task:
            await self._task

    async def stop(self) -> None:
        """Stop scenario."""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        if self._client:
            await self._client.aclose()
            self._client = None

    async def _run_scenario(self) -> None:
        """Run hardcoded scenario: startup, a call, then a bulk flush."""
        participants = [
            {"display_name": "Alice", "role": "chair", "protocol": "WebRTC"},
            {"display_name": "Bob", "role": "guest", "protocol": "SIP"},
            {"display_name": "Charlie", "role": "guest", "protocol": "H323"},
        ]
        conference = "meet.qa"

        try:
            await self.send_event("eventsink_started", {})

            uuids = []
            for participant in participants:
                if not self._running:
                    return
                participant_uuid = str(uuid.uuid4())
                uuids.append(participant_uuid)
                await self.send_event(
                    "participant_connected",
                    {
                        "conference": conference,
                        "uuid": participant_uuid,
                        "is_muted": False,
                        "connect_time": None,
                        **participant,
                    },
                )
                await asyncio.sleep(random.uniform(*self._delay))

            if not self._running:
                return
            await self.send_bulk(
                [
                    ("participant_disconnected", {"conference": conference, "uuid": u})
                    for u in uuids
                ]
                + [("conference_ended", {"name": conference})]
            )

        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error("SIM scenario error: %s", e)
        finally:
            self._running = False

    async def _post(self, payload: dict[str, Any]) -> bool:
        client = self._ensure_client()
        try:
            response = await client.post("/", json=payload)
        except httpx.HTTPError as e:
            logger.error("SIM: Failed to send event: %s", e)
            return False

        if response.status_code != 200:
            logger.error(
                "SIM: Error sending event: %s %s",
                response.status_code,
                response.text.strip(),
            )
            return False
        return True

    async def send_event(self, event: str, data: dict[str, Any]) -> bool:
        """Send one standalone event."""
        payload = self._next_event(event, data)
        ok = await self._post(payload)
        if ok:
            logger.info("SIM: %s seq=%d -> %s", self._node, payload["seq"], event)
        return ok

    async def send_bulk(self, events: list[tuple[str, dict[str, Any]]]) -> bool:
        """Send several events wrapped in one bulk envelope."""
        nested = [self._next_event(event, data) for event, data in events]
        envelope = self._next_event("eventsink_bulk", {})
        envelope["data"] = nested
        ok = await self._post(envelope)
        if ok:
            logger.info("SIM: %s sent bulk of %d events", self._node, len(nested))
        return ok

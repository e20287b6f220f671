"""Event submission and retrieval routes."""

from fastapi import APIRouter, Request, Response

from ...app import IApplication
from ...errors import RoutingError
from ...ingest import decode_events, peer_address
from ...logging_config import get_logger
from ...models import encode_events

logger = get_logger(__name__)

EVENTS_CONTENT_TYPE = "text/json"


def create_events_router(app: IApplication) -> APIRouter:
    """Create events router."""
    router = APIRouter(tags=["events"])

    @router.get("/events")
    async def get_events(request: Request) -> Response:
        """Return stored events; drain the store when ?clear is given."""
        if "clear" in request.query_params:
            events = app.store.drain()
        else:
            events = app.store.snapshot()
        logger.info("Returning %d events", len(events))

        # Explicit header keeps Starlette from appending a charset
        return Response(
            content=encode_events(events) + b"\n",
            headers={"Content-type": EVENTS_CONTENT_TYPE},
        )

    @router.post("/")
    async def post_events(request: Request) -> Response:
        """Accept a single event or a bulk envelope."""
        body = await request.body()
        events = decode_events(body)

        host, port = peer_address(request)
        logger.info(
            "Received %d events",
            len(events),
            extra={"context": {"peer": f"{host}:{port}", "count": len(events)}},
        )
        for event in events:
            app.store.add(event.model_copy(update={"host": host, "hostport": port}))
        return Response(status_code=200)

    @router.api_route("/{path:path}", methods=["GET", "POST"], include_in_schema=False)
    async def invalid_path(request: Request) -> Response:
        raise RoutingError(request.method, request.url.path)

    return router

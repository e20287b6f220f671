"""FastAPI application setup."""

import logging
from contextlib import asynccontextmanager
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..app import Application, IApplication
from ..errors import EventSinkError
from ..logging_config import get_logger
from .auth import BasicAuthMiddleware
from .routes import create_events_router

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its peer address."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:  # type: ignore[override]
        peer = f"{request.client.host}:{request.client.port}" if request.client else "-"
        logger.info(
            "Handling %s to url %s from %s",
            request.method,
            request.url,
            peer,
            extra={"context": {"peer": peer, "method": request.method, "path": request.url.path}},
        )
        return await call_next(request)


async def handle_eventsink_error(request: Request, exc: EventSinkError) -> Response:
    """Turn collector errors into plain-text responses."""
    level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
    logger.log(
        level,
        "%s %s failed: %s",
        request.method,
        request.url.path,
        exc,
        extra={"context": {"error": type(exc).__name__, "status_code": exc.status_code}},
    )
    return PlainTextResponse(f"{exc}\n", status_code=exc.status_code)


def create_fastapi_app(application: IApplication | None = None) -> FastAPI:
    """Create and configure FastAPI application around one collector."""
    application = application or Application()

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI):
        """Manage application lifespan."""
        await application.start()
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="Event Sink",
        description="Collector for node management events",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    fastapi_app.state.application = application

    fastapi_app.add_exception_handler(EventSinkError, handle_eventsink_error)

    credential = application.settings.credential
    if credential is not None:
        fastapi_app.add_middleware(BasicAuthMiddleware, credential=credential)
    # Added last so it wraps the auth gate
    fastapi_app.add_middleware(RequestLoggingMiddleware)

    fastapi_app.include_router(create_events_router(application))

    return fastapi_app

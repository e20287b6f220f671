"""HTTP Basic authentication gate."""

import base64
import secrets

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from ..config import AUTH_REALM, Credential
from ..logging_config import get_logger

logger = get_logger(__name__)

UNAUTHORIZED_MESSAGE = "You are Unauthorized to access the application.\n"


def parse_basic_auth(header: str | None) -> tuple[str, str] | None:
    """Extract (username, password) from an Authorization header."""
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "basic" or not token:
        return None
    try:
        decoded = base64.b64decode(token.strip(), validate=True).decode("utf-8")
    except ValueError:
        return None
    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return username, password


class BasicAuthMiddleware(BaseHTTPMiddleware):
    """Require Basic credentials on every path except the exempt ones."""

    def __init__(
        self,
        app,
        credential: Credential,
        realm: str = AUTH_REALM,
        exempt_paths: tuple[str, ...] = ("/events",),
    ) -> None:  # type: ignore[no-untyped-def]
        super().__init__(app)
        self.credential = credential
        self.realm = realm
        self.exempt_paths = exempt_paths

    def _authorized(self, request: Request) -> bool:
        parsed = parse_basic_auth(request.headers.get("authorization"))
        username, password = parsed if parsed is not None else ("", "")
        # Both comparisons always run
        user_ok = secrets.compare_digest(username.encode(), self.credential.username.encode())
        pass_ok = secrets.compare_digest(password.encode(), self.credential.password.encode())
        return parsed is not None and user_ok and pass_ok

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        if request.url.path in self.exempt_paths or self._authorized(request):
            return await call_next(request)

        peer = f"{request.client.host}:{request.client.port}" if request.client else "-"
        logger.warning("Bad username/password from %s", peer, extra={"context": {"peer": peer}})
        return PlainTextResponse(
            UNAUTHORIZED_MESSAGE,
            status_code=401,
            headers={"WWW-Authenticate": f'Basic realm="{self.realm}"'},
        )

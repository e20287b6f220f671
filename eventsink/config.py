"""Collector configuration loaded from the environment."""

import os
from dataclasses import dataclass

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_TLS_CERT = "/etc/certs/server.pem"
DEFAULT_TLS_KEY = "/etc/certs/privatekey.pem"
AUTH_REALM = "events"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Credential:
    """Username/password pair for the Basic auth gate."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credential(username={self.username!r}, password='***')"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for one collector process."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    use_tls: bool = False
    tls_cert: str = DEFAULT_TLS_CERT
    tls_key: str = DEFAULT_TLS_KEY
    username: str = ""
    password: str = ""
    log_level: str = "INFO"
    log_file: str | None = None

    @property
    def credential(self) -> Credential | None:
        """Auth pair, or None when the gate is disabled."""
        if self.username and self.password:
            return Credential(self.username, self.password)
        return None


def parse_bool(raw: str | None, default: bool = False) -> bool:
    """Parse a boolean environment value."""
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"invalid boolean value: {raw!r}")


def parse_port(raw: str | int) -> int:
    """Parse and range-check a TCP port."""
    try:
        port = int(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid port: {raw!r}") from e
    if not 0 < port < 65536:
        raise ValueError(f"port out of range: {port}")
    return port


def load_settings() -> Settings:
    """Build Settings from EVENTSINK_* and LOG_* environment variables."""
    return Settings(
        host=os.getenv("EVENTSINK_HOST", DEFAULT_HOST),
        port=parse_port(os.getenv("EVENTSINK_PORT", str(DEFAULT_PORT))),
        use_tls=parse_bool(os.getenv("EVENTSINK_USE_TLS")),
        tls_cert=os.getenv("EVENTSINK_TLS_CERT", DEFAULT_TLS_CERT),
        tls_key=os.getenv("EVENTSINK_TLS_KEY", DEFAULT_TLS_KEY),
        username=os.getenv("EVENTSINK_USER", ""),
        password=os.getenv("EVENTSINK_PASSWORD", ""),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_file=os.getenv("LOG_FILE") or None,
    )

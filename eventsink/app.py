"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .config import Settings
from .logging_config import get_logger
from .store import EventStore, IEventStore

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    @property
    def settings(self) -> Settings:
        ...

    @property
    def store(self) -> IEventStore:
        ...

    async def start(self) -> None:
        """Called once the server is about to accept requests."""
        ...

    async def stop(self) -> None:
        """Called on server shutdown."""
        ...


class Application:
    """One collector instance: its settings and its event store."""

    def __init__(self, settings: Settings | None = None, store: IEventStore | None = None):
        self._settings = settings or Settings()
        self._store = store if store is not None else EventStore()
        self._started = False

    async def start(self) -> None:
        """Log startup parameters."""
        logger.info(
            "Starting event server (port=%d, useTLS=%s, auth=%s)",
            self._settings.port,
            self._settings.use_tls,
            "on" if self._settings.credential else "off",
        )
        self._started = True

    async def stop(self) -> None:
        """Log shutdown; stored events are not persisted."""
        if not self._started:
            return
        pending = len(self._store)
        if pending:
            logger.warning("Stopping with %d undelivered events", pending)
        else:
            logger.info("Stopping event server")
        self._started = False

    @property
    def settings(self) -> Settings:
        """Get settings."""
        return self._settings

    @property
    def store(self) -> IEventStore:
        """Get event store instance."""
        return self._store

    @property
    def started(self) -> bool:
        return self._started

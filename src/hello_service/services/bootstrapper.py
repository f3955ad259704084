"""External connection bootstrapper.

Brings up the cache store and then the relational database, each awaited
to completion, and hands both back in an AppContext.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from hello_service.config import Settings, get_settings
from hello_service.entities import StartupPhase
from hello_service.protocols import ExternalConnection
from hello_service.repositories import PostgresConnection, RedisConnection

logger = logging.getLogger(__name__)

PhaseCallback = Callable[[StartupPhase], None]


@dataclass(frozen=True)
class AppContext:
    """Long-lived handles constructed at startup.

    Passed explicitly to the HTTP app instead of living in module globals.
    Variant A runs with an empty context.
    """

    cache: ExternalConnection | None = None
    database: ExternalConnection | None = None

    @property
    def connections(self) -> list[ExternalConnection]:
        return [c for c in (self.cache, self.database) if c is not None]

    async def close(self) -> None:
        """Close held connections in reverse order of opening."""
        for connection in reversed(self.connections):
            await connection.close()


class ConnectionBootstrapper:
    """Establishes external connections in a fixed order.

    The database is attempted only after the cache store is connected.
    If the database fails, the already-open cache connection is closed
    before the error propagates.

    Example:
        ```python
        bootstrapper = ConnectionBootstrapper.create()
        context = await bootstrapper.bootstrap()
        ```
    """

    def __init__(
        self,
        cache: ExternalConnection,
        database: ExternalConnection,
    ) -> None:
        self._cache = cache
        self._database = database

    @classmethod
    def create(cls, settings: Settings | None = None) -> "ConnectionBootstrapper":
        """Factory method wiring Redis and PostgreSQL from settings."""
        settings = settings or get_settings()
        return cls(
            cache=RedisConnection.create(settings),
            database=PostgresConnection.create(settings),
        )

    async def bootstrap(self, on_phase: PhaseCallback | None = None) -> AppContext:
        """Connect the cache store, then the database.

        Args:
            on_phase: Called with CONNECTING_CACHE and CONNECTING_DB as each
                step begins.

        Returns:
            AppContext holding both connected handles

        Raises:
            ConnectionBootstrapError: If either connection fails
        """
        notify = on_phase or (lambda phase: None)

        notify(StartupPhase.CONNECTING_CACHE)
        logger.info("Connecting to %s at %s", self._cache.name, self._cache.target)
        await self._cache.connect()

        notify(StartupPhase.CONNECTING_DB)
        logger.info("Connecting to %s at %s", self._database.name, self._database.target)
        try:
            await self._database.connect()
        except BaseException:
            await self._cache.close()
            raise

        return AppContext(cache=self._cache, database=self._database)

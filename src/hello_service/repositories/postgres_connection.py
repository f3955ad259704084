"""PostgreSQL implementation of ExternalConnection."""

import asyncio
import logging
from typing import Any, Awaitable, Callable

import asyncpg

from hello_service.config import Settings, get_settings
from hello_service.entities import ConnectionState
from hello_service.exceptions import ConnectionBootstrapError

logger = logging.getLogger(__name__)

Connector = Callable[..., Awaitable[asyncpg.Connection]]


class PostgresConnection:
    """Relational-database connection backed by ``asyncpg``.

    Holds a single authenticated connection for the process lifetime.
    """

    name = "postgres"

    def __init__(
        self,
        host: str,
        port: int,
        database: str,
        user: str,
        password: str,
        timeout: float | None = None,
        connector: Connector | None = None,
    ) -> None:
        self._host = host
        self._port = port
        self._database = database
        self._user = user
        self._password = password
        self._timeout = timeout
        self._connector = connector or asyncpg.connect
        self._connection: asyncpg.Connection | None = None
        self._state = ConnectionState.IDLE

    @classmethod
    def create(cls, settings: Settings | None = None) -> "PostgresConnection":
        """Factory method to create PostgresConnection from settings.

        Raises:
            ConfigurationError: If POSTGRES_PORT or CONNECT_TIMEOUT is invalid
        """
        settings = settings or get_settings()
        return cls(
            host=settings.postgres_host,
            port=settings.resolve_postgres_port(),
            database=settings.postgres_db,
            user=settings.postgres_user,
            password=settings.postgres_password,
            timeout=settings.resolve_connect_timeout(),
        )

    @property
    def target(self) -> str:
        return f"postgresql://{self._host}:{self._port}/{self._database}"

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def connection(self) -> asyncpg.Connection:
        """The connected asyncpg connection.

        Raises:
            RuntimeError: If the connection has not been established
        """
        if self._connection is None or self._state is not ConnectionState.CONNECTED:
            raise RuntimeError("PostgreSQL connection is not established")
        return self._connection

    async def connect(self) -> None:
        self._state = ConnectionState.CONNECTING
        connect_kwargs: dict[str, Any] = {
            "host": self._host,
            "port": self._port,
            "database": self._database,
            "user": self._user,
            "password": self._password,
        }
        try:
            self._connection = await asyncio.wait_for(
                self._connector(**connect_kwargs), timeout=self._timeout
            )
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError) as e:
            self._state = ConnectionState.FAILED
            raise ConnectionBootstrapError(self.name, self.target, e) from e

        self._state = ConnectionState.CONNECTED
        logger.info("Connected to postgres at %s", self.target)

    async def close(self) -> None:
        connection, self._connection = self._connection, None
        if connection is None:
            return
        await connection.close()
        self._state = ConnectionState.CLOSED
        logger.info("Closed postgres connection")

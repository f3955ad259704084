"""Redis implementation of ExternalConnection.

The client is created lazily: ``redis.asyncio`` opens no socket until the
first command, so ``connect()`` triggers the connection with a PING.
"""

import asyncio
import logging
from typing import Callable
from urllib.parse import urlsplit, urlunsplit

from redis.asyncio import Redis
from redis.exceptions import RedisError

from hello_service.config import Settings, get_settings
from hello_service.entities import ConnectionState
from hello_service.exceptions import ConnectionBootstrapError

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], Redis]


def _default_client_factory(url: str) -> Redis:
    return Redis.from_url(url, decode_responses=True)


def mask_password(url: str) -> str:
    """Replace the password in a Redis URL with '***'."""
    parts = urlsplit(url)
    if parts.password is None:
        return url
    host = parts.netloc.rpartition("@")[2]
    return urlunsplit(parts._replace(netloc=f"{parts.username or ''}:***@{host}"))


class RedisConnection:
    """Cache-store connection backed by ``redis.asyncio``.

    This class satisfies the ExternalConnection protocol through structural
    typing - no explicit inheritance needed.
    """

    name = "redis"

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        """Initialize the Redis connection handle.

        Args:
            url: Redis URL, e.g. ``redis://localhost:6379``.
            timeout: Seconds to wait for the PING. None waits forever.
            client_factory: Builds the client from the URL. Defaults to
                ``Redis.from_url``.
        """
        self._url = url
        self._timeout = timeout
        self._client_factory = client_factory or _default_client_factory
        self._client: Redis | None = None
        self._state = ConnectionState.IDLE

    @classmethod
    def create(cls, settings: Settings | None = None) -> "RedisConnection":
        """Factory method to create RedisConnection from settings.

        Args:
            settings: Application settings. If None, uses cached settings.

        Returns:
            Configured, not yet connected RedisConnection

        Raises:
            ConfigurationError: If CONNECT_TIMEOUT is invalid
        """
        settings = settings or get_settings()
        return cls(url=settings.redis_url, timeout=settings.resolve_connect_timeout())

    @property
    def target(self) -> str:
        return mask_password(self._url)

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def client(self) -> Redis:
        """The connected client.

        Raises:
            RuntimeError: If the connection has not been established
        """
        if self._client is None or self._state is not ConnectionState.CONNECTED:
            raise RuntimeError("Redis connection is not established")
        return self._client

    async def connect(self) -> None:
        self._state = ConnectionState.CONNECTING
        try:
            self._client = self._client_factory(self._url)
            await asyncio.wait_for(self._client.ping(), timeout=self._timeout)
        except (RedisError, OSError, ValueError, asyncio.TimeoutError) as e:
            self._state = ConnectionState.FAILED
            await self._release()
            raise ConnectionBootstrapError(self.name, self.target, e) from e

        self._state = ConnectionState.CONNECTED
        logger.info("Connected to redis at %s", self.target)

    async def close(self) -> None:
        if self._client is None:
            return
        await self._release()
        self._state = ConnectionState.CLOSED
        logger.info("Closed redis connection")

    async def _release(self) -> None:
        client, self._client = self._client, None
        if client is not None:
            await client.aclose()

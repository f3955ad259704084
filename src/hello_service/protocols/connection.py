"""External connection protocol.

Defines the interface for any long-lived connection the service opens at
startup and holds for its lifetime.

Implementations include:
- Redis (cache store)
- PostgreSQL (relational database)
"""

from typing import Protocol, runtime_checkable

from hello_service.entities import ConnectionState


@runtime_checkable
class ExternalConnection(Protocol):
    """Protocol for external connection handles.

    Any type that implements these members satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from hello_service.protocols import ExternalConnection

        cache: ExternalConnection = RedisConnection.create(settings)
        await cache.connect()
        ```
    """

    name: str

    @property
    def target(self) -> str:
        """Address of the remote endpoint, without credentials."""
        ...

    @property
    def state(self) -> ConnectionState:
        """Current connection state."""
        ...

    async def connect(self) -> None:
        """Open the connection and wait until it is usable.

        Raises:
            ConnectionBootstrapError: If the connection cannot be established
        """
        ...

    async def close(self) -> None:
        """Release the connection. Safe to call in any state."""
        ...

"""Hello Service - minimal greeting API with an ordered startup sequence.

Layers:
    - protocols: Interface contracts (ExternalConnection)
    - repositories: Redis and PostgreSQL connection handles
    - services: Connection bootstrapper and AppContext
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Startup state and results (internal)

Usage:
    ```python
    import asyncio
    from hello_service.server import init

    # Variant A: plain server
    asyncio.run(init())

    # Variant B: Redis and PostgreSQL first
    asyncio.run(init(connect=True))
    ```

For HTTP API:
    ```python
    from hello_service.api.app import app
    ```
"""

from hello_service.config import Settings, get_settings
from hello_service.entities import ConnectionState, StartupPhase, StartupResult
from hello_service.exceptions import ConnectionBootstrapError, ListenerBindError
from hello_service.protocols import ExternalConnection
from hello_service.repositories import PostgresConnection, RedisConnection
from hello_service.server import Entrypoint, init
from hello_service.services import AppContext, ConnectionBootstrapper

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Protocols (interfaces)
    "ExternalConnection",
    # Connections
    "RedisConnection",
    "PostgresConnection",
    # Services
    "AppContext",
    "ConnectionBootstrapper",
    # Entrypoint
    "Entrypoint",
    "init",
    # Entities
    "ConnectionState",
    "StartupPhase",
    "StartupResult",
    # Errors
    "ConnectionBootstrapError",
    "ListenerBindError",
]

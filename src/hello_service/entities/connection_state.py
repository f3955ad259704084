"""Connection and startup state enums."""

from enum import Enum


class ConnectionState(str, Enum):
    """Lifecycle of an external connection handle."""

    IDLE = "idle"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    FAILED = "failed"
    CLOSED = "closed"


class StartupPhase(str, Enum):
    """Phases of process startup.

    ``FAILED`` is absorbing: once entered, the entrypoint never leaves it.
    """

    INIT = "init"
    CONNECTING_CACHE = "connecting_cache"
    CONNECTING_DB = "connecting_db"
    BINDING = "binding"
    LISTENING = "listening"
    FAILED = "failed"


class StartupFailure(str, Enum):
    """Kind of startup failure."""

    CONFIG = "config"
    CONNECTION = "connection"
    BIND = "bind"

"""Domain entities for internal representation.

Frozen dataclasses and enums describing connection and startup state.
They are NOT used for API contracts - use DTOs from the dto package for that.
"""

from .connection_state import ConnectionState, StartupFailure, StartupPhase
from .startup_result import (
    EXIT_BIND_FAILED,
    EXIT_CONFIG_FAILED,
    EXIT_CONNECTION_FAILED,
    EXIT_OK,
    StartupResult,
)

__all__ = [
    "ConnectionState",
    "StartupFailure",
    "StartupPhase",
    "StartupResult",
    "EXIT_OK",
    "EXIT_CONNECTION_FAILED",
    "EXIT_BIND_FAILED",
    "EXIT_CONFIG_FAILED",
]

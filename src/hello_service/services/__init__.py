"""Service layer for startup orchestration.

Services depend on protocols (interfaces), not concrete connections,
making them testable with fakes.
"""

from .bootstrapper import AppContext, ConnectionBootstrapper

__all__ = [
    "AppContext",
    "ConnectionBootstrapper",
]

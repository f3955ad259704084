"""Connection implementations for external services.

All classes satisfy the ExternalConnection protocol.
"""

from .postgres_connection import PostgresConnection
from .redis_connection import RedisConnection

__all__ = [
    "PostgresConnection",
    "RedisConnection",
]

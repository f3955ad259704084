"""Protocol interfaces for swappable implementations.

Protocols enable:
- Swapping connection backends without touching the bootstrapper
- Unit testing with fake connections
"""

from .connection import ExternalConnection

__all__ = [
    "ExternalConnection",
]

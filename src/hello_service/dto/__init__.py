"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
"""

from .responses import MessageResponse

__all__ = [
    "MessageResponse",
]

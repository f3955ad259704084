"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Response DTO carrying a single fixed message."""

    message: str = Field(..., description="Human-readable message")

"""
Common response models.

Error schemas shared by the routers.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema for JSON endpoints."""

    success: bool = False
    error: str = Field(description="Error message")
    details: dict | None = Field(default=None, description="Additional error context")


class RelayErrorResponse(BaseModel):
    """Error body of the chat relay, read by the streaming client."""

    error: str = Field(description="User-facing error message")

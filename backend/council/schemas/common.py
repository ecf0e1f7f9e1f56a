"""
Student Council API — Shared Schema Building Blocks
=====================================================

What:  Base model and cross-cutting response shapes used by every route.

Wire Format:
    Python attributes are snake_case; JSON keys are camelCase
    (created_at ↔ createdAt). CamelModel sets this up once through
    pydantic's alias generator. FastAPI serializes response models by alias,
    and populate_by_name lets request bodies use either spelling.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every request/response schema in the API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(CamelModel):
    """
    Standardized error body for every non-2xx response.

    Example:
        {
            "success": false,
            "error": "not_found",
            "message": "Meeting with ID '42' was not found",
            "requestId": "a1b2c3d4"
        }
    """

    success: bool = Field(default=False)
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(CamelModel):
    status: str = Field(description="Always 'OK' while the process is serving")
    message: str
    version: str
    uptime_seconds: float = Field(description="Seconds since the service started")

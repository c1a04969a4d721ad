"""Health and error response schemas."""

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class HealthResponse(BaseModel):
    """Liveness response. Never calls Stripe."""

    status: Literal["healthy"] = Field(default="healthy", description="Current health status")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    version: str = Field(default="0.1.0", description="API version")
    webhooks_configured: bool = Field(default=False, description="Whether a webhook signing secret is set")


class ErrorResponse(BaseModel):
    """Body returned for every APIError."""

    error: str = Field(description="Error type, e.g. provider_error or webhook_not_handled")
    message: str = Field(description="Human-readable error description")
    request_id: str | None = Field(default=None, description="X-Request-ID of the failed request")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")

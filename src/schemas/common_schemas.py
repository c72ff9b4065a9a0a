"""Schemas shared across API endpoints."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """GET /api/v1/health.

    Each flag is False when the corresponding store's ping failed; the
    ping failure itself is never surfaced.
    """

    status: str = Field(..., examples=["healthy", "degraded"])
    identity: bool = Field(..., description="Identity store reachable")
    log_store: bool = Field(..., description="Log store reachable")

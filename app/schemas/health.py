"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class StorageHealthResponse(BaseModel):
    """Response for GET /health/storage: active provider and whether its sink is ready."""

    status: str = Field(default="ok", description="'ok' or 'degraded'")
    provider: str = Field(..., description="local, gcp or r2")
    ready: bool = Field(..., description="False when the sink failed to initialize")

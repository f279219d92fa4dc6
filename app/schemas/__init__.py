"""Pydantic request/response schemas for the API."""

from app.schemas.health import HealthResponse, StorageHealthResponse
from app.schemas.project import (
    ProjectDeleteResponse,
    ProjectResponse,
    ProjectSummaryResponse,
)

__all__ = [
    "HealthResponse",
    "ProjectDeleteResponse",
    "ProjectResponse",
    "ProjectSummaryResponse",
    "StorageHealthResponse",
]

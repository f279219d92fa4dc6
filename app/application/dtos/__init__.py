"""Application DTOs: plain dataclasses passed between layers."""

from app.application.dtos.project import (
    ProjectAssets,
    ProjectCreate,
    ProjectDetails,
    ProjectListItem,
    ProjectResult,
)
from app.application.dtos.upload import UploadRequest

__all__ = [
    "ProjectAssets",
    "ProjectCreate",
    "ProjectDetails",
    "ProjectListItem",
    "ProjectResult",
    "UploadRequest",
]

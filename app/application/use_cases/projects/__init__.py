"""Project use cases: create (uploads + record) and query (gallery, details)."""

from app.application.use_cases.projects.project_operations import (
    MAX_PROJECT_IMAGES,
    MIN_PROJECT_IMAGES,
    ProjectCreateService,
    ProjectQueryService,
)

__all__ = [
    "MAX_PROJECT_IMAGES",
    "MIN_PROJECT_IMAGES",
    "ProjectCreateService",
    "ProjectQueryService",
]

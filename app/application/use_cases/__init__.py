"""Application use cases: one entry point per workflow."""

from app.application.use_cases.projects import (
    ProjectCreateService,
    ProjectQueryService,
)

__all__ = [
    "ProjectCreateService",
    "ProjectQueryService",
]

"""Repositories: SQLAlchemy data access returning application DTOs."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.project_repo import ProjectRepository

__all__ = [
    "BaseRepository",
    "ProjectRepository",
]

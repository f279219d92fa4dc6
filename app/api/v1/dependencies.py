"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the storage dispatcher and
project use cases. Use cases are built from infrastructure implementations
here; routes depend only on these dependencies, not on infra directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.use_cases.projects import (
    ProjectCreateService,
    ProjectQueryService,
)
from app.infrastructure.exceptions import StorageNotInitializedError
from app.infrastructure.external.storage import StorageDispatcher
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import ProjectRepository


def get_storage(request: Request) -> StorageDispatcher:
    """Process-wide storage dispatcher built in the lifespan (app.state.storage)."""
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise StorageNotInitializedError("storage", "application startup did not run")
    return storage


async def get_project_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProjectRepository:
    """Project repository for read operations."""
    return ProjectRepository(db)


async def get_project_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> ProjectRepository:
    """Project repository for create/delete (transactional)."""
    return ProjectRepository(db)


async def get_project_create_service(
    storage: Annotated[StorageDispatcher, Depends(get_storage)],
    project_repo: Annotated[ProjectRepository, Depends(get_project_repo_for_write)],
) -> ProjectCreateService:
    """Build ProjectCreateService (storage dispatcher + transactional repo)."""
    return ProjectCreateService(uploader=storage, project_repo=project_repo)


async def get_project_query_service(
    project_repo: Annotated[ProjectRepository, Depends(get_project_repo)],
) -> ProjectQueryService:
    """Build ProjectQueryService for gallery listing and details."""
    return ProjectQueryService(project_repo=project_repo)

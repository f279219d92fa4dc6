"""Project repository. Returns application DTOs."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.project import ProjectCreate, ProjectListItem, ProjectResult
from app.infrastructure.persistence.models.project import Project
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)


def _create_to_project(d: ProjectCreate) -> Project:
    """Map ProjectCreate (write-model) to ORM Project for persistence."""
    return Project(
        title=d.title,
        architect_name=d.architect_name,
        area_sq_ft=d.area_sq_ft,
        location=d.location,
        description=d.description,
        thumbnail_blob=d.thumbnail_blob,
        main_image_url=d.main_image_url,
        images=list(d.images),
        model_url=d.model_url,
        youtube_url=d.youtube_url,
        simulation_video_url=d.simulation_video_url,
    )


def _project_to_result(p: Project) -> ProjectResult:
    """Map ORM Project to application ProjectResult."""
    return ProjectResult(
        id=p.id,
        title=p.title,
        architect_name=p.architect_name,
        area_sq_ft=p.area_sq_ft,
        location=p.location,
        description=p.description,
        thumbnail_blob=p.thumbnail_blob,
        main_image_url=p.main_image_url,
        images=list(p.images or []),
        model_url=p.model_url,
        youtube_url=p.youtube_url,
        simulation_video_url=p.simulation_video_url,
        created_at=ensure_utc(p.created_at),
        updated_at=ensure_utc(p.updated_at),
    )


class ProjectRepository(BaseRepository[Project]):
    """Project repository. create_project() accepts ProjectCreate; reads return DTOs."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Project)

    async def create_project(self, data: ProjectCreate) -> ProjectResult:
        created = await self.create(_create_to_project(data))
        return _project_to_result(created)

    async def get_by_id(self, project_id: str) -> ProjectResult | None:
        row = await self._get_orm_by_id(project_id)
        return _project_to_result(row) if row else None

    async def list_projects(self) -> list[ProjectListItem]:
        """Gallery listing, newest first. Loads only the card columns."""
        result = await self.db.execute(
            select(
                Project.id, Project.title, Project.location, Project.thumbnail_blob
            ).order_by(Project.created_at.desc(), Project.id.desc())
        )
        return [
            ProjectListItem(
                id=row.id,
                title=row.title,
                location=row.location,
                thumbnail_blob=row.thumbnail_blob,
            )
            for row in result.all()
        ]

    async def delete_by_id(self, project_id: str) -> bool:
        """Delete project row. Returns False when it does not exist."""
        row = await self._get_orm_by_id(project_id)
        if row is None:
            return False
        await self.delete(row)
        return True

    async def _on_after_create(self, obj: Project) -> None:
        logger.info("Project created: %s (%s)", obj.id, obj.title)

    async def _on_before_delete(self, obj: Project) -> None:
        logger.info("Deleting project %s; stored assets are kept", obj.id)

"""Project API schemas. JSON uses camelCase keys (mainImageUrl, modelUrl, ...)."""

import base64
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.application.dtos.project import ProjectListItem, ProjectResult

THUMBNAIL_MIME_TYPE = "image/jpeg"


def thumbnail_data_uri(data: bytes) -> str:
    """Inline thumbnail bytes as a data URI the gallery can render directly."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{THUMBNAIL_MIME_TYPE};base64,{encoded}"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProjectSummaryResponse(_CamelModel):
    """Gallery card (GET /projects)."""

    id: str
    title: str
    location: str
    thumbnail: str

    @classmethod
    def from_item(cls, item: ProjectListItem) -> "ProjectSummaryResponse":
        return cls(
            id=item.id,
            title=item.title,
            location=item.location,
            thumbnail=thumbnail_data_uri(item.thumbnail_blob),
        )


class ProjectResponse(_CamelModel):
    """Full project (GET /projects/{id}, POST /projects)."""

    id: str
    title: str
    architect_name: str | None = None
    area_sq_ft: float | None = None
    location: str
    description: str | None = None
    thumbnail: str
    main_image_url: str = ""
    images: list[str] = []
    model_url: str = ""
    youtube_url: str | None = None
    simulation_video_url: str = ""
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_result(cls, project: ProjectResult) -> "ProjectResponse":
        return cls(
            id=project.id,
            title=project.title,
            architect_name=project.architect_name,
            area_sq_ft=project.area_sq_ft,
            location=project.location,
            description=project.description,
            thumbnail=thumbnail_data_uri(project.thumbnail_blob),
            main_image_url=project.main_image_url,
            images=project.images,
            model_url=project.model_url,
            youtube_url=project.youtube_url,
            simulation_video_url=project.simulation_video_url,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class ProjectDeleteResponse(BaseModel):
    """Response for DELETE /projects/{id}."""

    message: str = "Project deleted successfully"

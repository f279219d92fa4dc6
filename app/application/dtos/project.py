"""DTOs for project use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime

from app.application.dtos.upload import UploadRequest


@dataclass(frozen=True)
class ProjectCreate:
    """Input for creating a project record (write-model). Asset URLs are already uploaded."""

    title: str
    location: str
    thumbnail_blob: bytes
    architect_name: str | None = None
    area_sq_ft: float | None = None
    description: str | None = None
    youtube_url: str | None = None
    main_image_url: str = ""
    images: list[str] = field(default_factory=list)
    model_url: str = ""
    simulation_video_url: str = ""


@dataclass(frozen=True)
class ProjectResult:
    """Project read-model (result of get_by_id and create)."""

    id: str
    title: str
    architect_name: str | None
    area_sq_ft: float | None
    location: str
    description: str | None
    thumbnail_blob: bytes
    main_image_url: str
    images: list[str]
    model_url: str
    youtube_url: str | None
    simulation_video_url: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ProjectListItem:
    """Gallery card: id, title, location and the inline thumbnail bytes."""

    id: str
    title: str
    location: str
    thumbnail_blob: bytes


@dataclass(frozen=True)
class ProjectDetails:
    """Text fields of the create-project form."""

    title: str
    location: str
    architect_name: str | None = None
    area_sq_ft: float | None = None
    description: str | None = None
    youtube_url: str | None = None


@dataclass(frozen=True)
class ProjectAssets:
    """Files of the create-project form, already read into memory.

    The thumbnail is stored inline on the record; every other asset goes
    through the storage dispatcher.
    """

    thumbnail: UploadRequest | None
    main_image: UploadRequest | None = None
    images: list[UploadRequest] = field(default_factory=list)
    model: UploadRequest | None = None
    video: UploadRequest | None = None

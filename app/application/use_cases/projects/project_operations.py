"""Project operations: create (write) and query (read) with single responsibilities."""

from __future__ import annotations

import asyncio

from app.application.dtos.project import (
    ProjectAssets,
    ProjectCreate,
    ProjectDetails,
    ProjectListItem,
    ProjectResult,
)
from app.application.dtos.upload import UploadRequest
from app.application.interfaces.repositories import IProjectRepository
from app.application.interfaces.storage import IAssetUploader
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.shared.enums import AssetFolder

MIN_PROJECT_IMAGES = 2
MAX_PROJECT_IMAGES = 15


async def _upload_optional(
    uploader: IAssetUploader, request: UploadRequest | None, folder: AssetFolder
) -> str:
    if request is None:
        return ""
    return await uploader.upload_file(request, folder.value)


class ProjectCreateService:
    """Single responsibility: upload project assets and create the project record."""

    def __init__(
        self,
        uploader: IAssetUploader,
        project_repo: IProjectRepository,
    ) -> None:
        self.uploader = uploader
        self.project_repo = project_repo

    @staticmethod
    def validate_assets(assets: ProjectAssets) -> bytes:
        """Check required thumbnail, gallery size and that no part is empty.

        Runs before any upload starts. Returns the thumbnail bytes.
        """
        if assets.thumbnail is None or not assets.thumbnail.data:
            raise ValidationException("Thumbnail is required", field="thumbnail")
        count = len(assets.images)
        if count < MIN_PROJECT_IMAGES or count > MAX_PROJECT_IMAGES:
            raise ValidationException(
                f"Please upload between {MIN_PROJECT_IMAGES} and "
                f"{MAX_PROJECT_IMAGES} project images.",
                field="images",
            )
        parts = [
            ("mainImage", assets.main_image),
            *(("images", image) for image in assets.images),
            ("model", assets.model),
            ("video", assets.video),
        ]
        for field_name, part in parts:
            if part is not None and not part.data:
                raise ValidationException(
                    f"Uploaded file is empty: {part.original_name}", field=field_name
                )
        return assets.thumbnail.data

    async def create_project(
        self, details: ProjectDetails, assets: ProjectAssets
    ) -> ProjectResult:
        """Upload every asset, then persist the project with the returned URLs.

        All uploads run concurrently. If one fails the error propagates and no
        record is written; assets that already landed are not removed.
        """
        thumbnail = self.validate_assets(assets)

        main_image_url, image_urls, model_url, video_url = await asyncio.gather(
            _upload_optional(self.uploader, assets.main_image, AssetFolder.IMAGES),
            self.uploader.upload_many(assets.images, AssetFolder.IMAGES.value),
            _upload_optional(self.uploader, assets.model, AssetFolder.MODELS),
            _upload_optional(self.uploader, assets.video, AssetFolder.VIDEOS),
        )

        return await self.project_repo.create_project(
            ProjectCreate(
                title=details.title,
                location=details.location,
                architect_name=details.architect_name,
                area_sq_ft=details.area_sq_ft,
                description=details.description,
                youtube_url=details.youtube_url,
                thumbnail_blob=thumbnail,
                main_image_url=main_image_url,
                images=image_urls,
                model_url=model_url,
                simulation_video_url=video_url,
            )
        )


class ProjectQueryService:
    """Single responsibility: gallery listing and project details."""

    def __init__(self, project_repo: IProjectRepository) -> None:
        self.project_repo = project_repo

    async def list_projects(self) -> list[ProjectListItem]:
        return await self.project_repo.list_projects()

    async def get_project(self, project_id: str) -> ProjectResult:
        """Return project; raise ResourceNotFoundException if missing."""
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise ResourceNotFoundException("project", project_id)
        return project

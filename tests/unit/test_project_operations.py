"""Unit tests for ProjectCreateService and ProjectQueryService (mocked ports)."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.project import (
    ProjectAssets,
    ProjectCreate,
    ProjectDetails,
    ProjectResult,
)
from app.application.dtos.upload import UploadRequest
from app.application.use_cases.projects import ProjectCreateService, ProjectQueryService
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.infrastructure.exceptions import StorageUploadError


def _file(name: str, data: bytes = b"bytes") -> UploadRequest:
    return UploadRequest(data=data, original_name=name, mime_type="image/png")


def _result(data: ProjectCreate) -> ProjectResult:
    now = datetime.now(UTC)
    return ProjectResult(
        id="p1",
        title=data.title,
        architect_name=data.architect_name,
        area_sq_ft=data.area_sq_ft,
        location=data.location,
        description=data.description,
        thumbnail_blob=data.thumbnail_blob,
        main_image_url=data.main_image_url,
        images=list(data.images),
        model_url=data.model_url,
        youtube_url=data.youtube_url,
        simulation_video_url=data.simulation_video_url,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def uploader() -> AsyncMock:
    mock = AsyncMock()
    mock.upload_file.side_effect = lambda req, folder: f"/uploads/{folder}/{req.original_name}"
    mock.upload_many.side_effect = lambda reqs, folder: [
        f"/uploads/{folder}/{r.original_name}" for r in reqs
    ]
    return mock


@pytest.fixture
def repo() -> AsyncMock:
    mock = AsyncMock()
    mock.create_project.side_effect = _result
    return mock


DETAILS = ProjectDetails(title="Lake House", location="Kampala", area_sq_ft=2400.0)


class TestValidateAssets:
    def test_missing_thumbnail(self) -> None:
        with pytest.raises(ValidationException, match="Thumbnail is required"):
            ProjectCreateService.validate_assets(
                ProjectAssets(thumbnail=None, images=[_file("a.png"), _file("b.png")])
            )

    def test_empty_thumbnail(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            ProjectCreateService.validate_assets(
                ProjectAssets(thumbnail=_file("t.jpg", b""), images=[_file("a.png")] * 2)
            )
        assert exc_info.value.details == {"field": "thumbnail"}

    @pytest.mark.parametrize("count", [0, 1, 16])
    def test_image_count_out_of_range(self, count: int) -> None:
        with pytest.raises(ValidationException, match="between 2 and 15"):
            ProjectCreateService.validate_assets(
                ProjectAssets(
                    thumbnail=_file("t.jpg"),
                    images=[_file(f"{i}.png") for i in range(count)],
                )
            )

    @pytest.mark.parametrize("count", [2, 15])
    def test_image_count_bounds_accepted(self, count: int) -> None:
        thumb = ProjectCreateService.validate_assets(
            ProjectAssets(
                thumbnail=_file("t.jpg", b"thumb"),
                images=[_file(f"{i}.png") for i in range(count)],
            )
        )
        assert thumb == b"thumb"

    @pytest.mark.parametrize(
        ("field_name", "assets"),
        [
            (
                "images",
                ProjectAssets(
                    thumbnail=_file("t.jpg"), images=[_file("a.png"), _file("b.png", b"")]
                ),
            ),
            (
                "mainImage",
                ProjectAssets(
                    thumbnail=_file("t.jpg"),
                    main_image=_file("hero.png", b""),
                    images=[_file("a.png"), _file("b.png")],
                ),
            ),
            (
                "model",
                ProjectAssets(
                    thumbnail=_file("t.jpg"),
                    images=[_file("a.png"), _file("b.png")],
                    model=_file("house.glb", b""),
                ),
            ),
            (
                "video",
                ProjectAssets(
                    thumbnail=_file("t.jpg"),
                    images=[_file("a.png"), _file("b.png")],
                    video=_file("walk.mp4", b""),
                ),
            ),
        ],
    )
    def test_empty_part_rejected(self, field_name: str, assets: ProjectAssets) -> None:
        with pytest.raises(ValidationException, match="Uploaded file is empty") as exc_info:
            ProjectCreateService.validate_assets(assets)
        assert exc_info.value.details == {"field": field_name}


async def test_create_uploads_assets_to_folders(uploader: AsyncMock, repo: AsyncMock) -> None:
    service = ProjectCreateService(uploader=uploader, project_repo=repo)
    assets = ProjectAssets(
        thumbnail=_file("t.jpg", b"thumb"),
        main_image=_file("hero.png"),
        images=[_file("a.png"), _file("b.png")],
        model=_file("house.glb"),
        video=_file("walk.mp4"),
    )

    result = await service.create_project(DETAILS, assets)

    assert result.thumbnail_blob == b"thumb"
    assert result.main_image_url == "/uploads/images/hero.png"
    assert result.images == ["/uploads/images/a.png", "/uploads/images/b.png"]
    assert result.model_url == "/uploads/models/house.glb"
    assert result.simulation_video_url == "/uploads/videos/walk.mp4"
    created: ProjectCreate = repo.create_project.call_args.args[0]
    assert created.title == "Lake House"
    assert created.area_sq_ft == 2400.0


async def test_optional_assets_default_to_empty(uploader: AsyncMock, repo: AsyncMock) -> None:
    service = ProjectCreateService(uploader=uploader, project_repo=repo)
    result = await service.create_project(
        DETAILS,
        ProjectAssets(thumbnail=_file("t.jpg"), images=[_file("a.png"), _file("b.png")]),
    )
    assert result.main_image_url == ""
    assert result.model_url == ""
    assert result.simulation_video_url == ""
    assert uploader.upload_file.await_count == 0


async def test_validation_failure_uploads_nothing(uploader: AsyncMock, repo: AsyncMock) -> None:
    service = ProjectCreateService(uploader=uploader, project_repo=repo)
    with pytest.raises(ValidationException):
        await service.create_project(
            DETAILS, ProjectAssets(thumbnail=_file("t.jpg"), images=[_file("a.png")])
        )
    uploader.upload_many.assert_not_called()
    repo.create_project.assert_not_called()


async def test_upload_failure_skips_record(uploader: AsyncMock, repo: AsyncMock) -> None:
    uploader.upload_file.side_effect = StorageUploadError("models/x.glb", "boom")
    service = ProjectCreateService(uploader=uploader, project_repo=repo)
    with pytest.raises(StorageUploadError):
        await service.create_project(
            DETAILS,
            ProjectAssets(
                thumbnail=_file("t.jpg"),
                images=[_file("a.png"), _file("b.png")],
                model=_file("x.glb"),
            ),
        )
    repo.create_project.assert_not_called()


async def test_get_project_missing_raises() -> None:
    repo = AsyncMock()
    repo.get_by_id.return_value = None
    with pytest.raises(ResourceNotFoundException):
        await ProjectQueryService(project_repo=repo).get_project("nope")


async def test_empty_video_rejected_before_any_upload(
    uploader: AsyncMock, repo: AsyncMock
) -> None:
    service = ProjectCreateService(uploader=uploader, project_repo=repo)
    with pytest.raises(ValidationException):
        await service.create_project(
            DETAILS,
            ProjectAssets(
                thumbnail=_file("t.jpg"),
                main_image=_file("hero.png"),
                images=[_file("a.png"), _file("b.png")],
                video=_file("walk.mp4", b""),
            ),
        )
    uploader.upload_file.assert_not_called()
    uploader.upload_many.assert_not_called()
    repo.create_project.assert_not_called()

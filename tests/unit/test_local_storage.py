"""Tests for the local filesystem sink."""

from pathlib import Path

import pytest

from app.application.dtos.upload import UploadRequest
from app.infrastructure.exceptions import StorageUploadError
from app.infrastructure.external.storage.local_storage import LocalStorageService


@pytest.fixture
def storage(tmp_path: Path) -> LocalStorageService:
    return LocalStorageService(storage_root=tmp_path / "uploads")


def test_root_created_on_init(tmp_path: Path) -> None:
    LocalStorageService(storage_root=tmp_path / "nested" / "root")
    assert (tmp_path / "nested" / "root").is_dir()


async def test_upload_writes_exact_bytes(storage: LocalStorageService) -> None:
    data = b"\x89PNG\r\n\x1a\n" + bytes(range(256))
    url = await storage.upload(UploadRequest(data, "plan.png", "image/png"), "images")

    assert url.startswith("/uploads/images/")
    assert url.endswith("-plan.png")
    assert storage.resolve(url).read_bytes() == data


async def test_same_name_twice_gives_distinct_urls(storage: LocalStorageService) -> None:
    first = await storage.upload(UploadRequest(b"one", "plan.png"), "images")
    second = await storage.upload(UploadRequest(b"two", "plan.png"), "images")

    assert first != second
    assert storage.resolve(first).read_bytes() == b"one"
    assert storage.resolve(second).read_bytes() == b"two"


async def test_folder_is_path_segment(storage: LocalStorageService) -> None:
    url = await storage.upload(UploadRequest(b"glb", "tower model.glb"), "models")
    assert url.split("/")[2] == "models"
    assert url.endswith("-tower-model.glb")
    assert (storage.storage_root / "models").is_dir()


async def test_write_failure_raises_upload_error(storage: LocalStorageService) -> None:
    # A regular file where the folder should be makes mkdir fail.
    (storage.storage_root / "videos").write_bytes(b"")
    with pytest.raises(StorageUploadError) as exc_info:
        await storage.upload(UploadRequest(b"mp4", "walk.mp4"), "videos")
    assert exc_info.value.error_code == "STORAGE_UPLOAD_ERROR"


def test_always_ready(storage: LocalStorageService) -> None:
    assert storage.ready is True
    assert storage.provider.value == "local"

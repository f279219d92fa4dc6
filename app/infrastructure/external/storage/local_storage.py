"""Local filesystem storage served by the app under /uploads."""

from __future__ import annotations

from pathlib import Path

import aiofiles

from app.application.dtos.upload import UploadRequest
from app.infrastructure.exceptions import StorageUploadError
from app.infrastructure.external.storage.keys import MonotonicMillisClock, build_file_name
from app.shared.enums import StorageProvider

UPLOAD_URL_PREFIX = "/uploads"


class LocalStorageService:
    """Local filesystem sink.

    Files land in ``<storage_root>/<folder>/<timestamp>-<name>`` and are
    addressed by the root-relative path ``/uploads/<folder>/<filename>``,
    which the static mount in app.main serves. Always ready.
    """

    provider = StorageProvider.LOCAL

    def __init__(
        self,
        storage_root: str | Path,
        clock: MonotonicMillisClock | None = None,
    ) -> None:
        """Initialize local storage and create the root directory.

        Args:
            storage_root: Base directory for all uploaded files.
            clock: Optional timestamp source (tests inject a fixed one).
        """
        self.storage_root = Path(storage_root).resolve()
        self._clock = clock
        self.storage_root.mkdir(parents=True, exist_ok=True)

    @property
    def ready(self) -> bool:
        return True

    async def upload(self, request: UploadRequest, folder: str) -> str:
        """Write the buffer and return '/uploads/<folder>/<filename>'.

        Partial files are not cleaned up when the write fails.
        """
        file_name = build_file_name(request.original_name, self._clock)
        target_dir = self.storage_root / folder
        target_path = target_dir / file_name
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(target_path, "wb") as f:
                await f.write(request.data)
        except OSError as e:
            raise StorageUploadError(f"{folder}/{file_name}", str(e)) from e
        return f"{UPLOAD_URL_PREFIX}/{folder}/{file_name}"

    def resolve(self, url_path: str) -> Path:
        """Map a '/uploads/...' path returned by upload() back to its file on disk."""
        rel = url_path.removeprefix(UPLOAD_URL_PREFIX).lstrip("/")
        return self.storage_root / rel

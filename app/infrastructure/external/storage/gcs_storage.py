"""Google Cloud Storage sink (google-cloud-storage)."""

from __future__ import annotations

import asyncio
from typing import Any

from google.api_core.exceptions import GoogleAPIError

from app.application.dtos.upload import UploadRequest
from app.infrastructure.exceptions import StorageUploadError
from app.infrastructure.external.storage.keys import MonotonicMillisClock, build_object_key
from app.shared.enums import StorageProvider
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

GCS_PUBLIC_BASE = "https://storage.googleapis.com"


class GCSStorageService:
    """GCS sink: one upload_from_string call per buffer.

    Buffers up to the client library's multipart limit (8 MiB) go out as a
    single multipart request. Larger ones go through a resumable session; the
    object only appears once the final chunk is committed, so a failed upload
    still leaves nothing behind.

    Takes a pre-authenticated bucket handle built once at startup
    (see StorageFactory). Blocking client calls run in a worker thread.
    """

    provider = StorageProvider.GCP

    def __init__(self, bucket: Any, clock: MonotonicMillisClock | None = None) -> None:
        self.bucket = bucket
        self._clock = clock

    @property
    def ready(self) -> bool:
        return True

    @property
    def bucket_name(self) -> str:
        return self.bucket.name

    async def upload(self, request: UploadRequest, folder: str) -> str:
        """Upload under '<folder>/<timestamp>-<name>' and return the public object URL."""
        key = build_object_key(folder, request.original_name, self._clock)

        def _upload() -> None:
            blob = self.bucket.blob(key)
            blob.upload_from_string(request.data, content_type=request.mime_type)

        try:
            await asyncio.to_thread(_upload)
        except (GoogleAPIError, OSError) as e:
            logger.error("GCS upload failed for %s: %s", key, e)
            raise StorageUploadError(key, str(e)) from e
        return f"{GCS_PUBLIC_BASE}/{self.bucket_name}/{key}"

"""Storage dispatcher: the single upload entry point used by the project API."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from app.application.dtos.upload import UploadRequest
from app.infrastructure.exceptions import StorageException, StorageValidationError
from app.infrastructure.external.storage.protocol import StorageProtocol
from app.shared.enums import StorageProvider
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class StorageDispatcher:
    """Route uploads to the sink chosen at startup.

    The sink is fixed for the process lifetime. Each call writes exactly once
    to exactly one backend; failures propagate unchanged (no retry, no fallback).
    """

    def __init__(self, sink: StorageProtocol) -> None:
        self.sink = sink

    @property
    def provider(self) -> StorageProvider:
        return self.sink.provider

    @property
    def ready(self) -> bool:
        return self.sink.ready

    async def upload(
        self,
        data: bytes,
        original_name: str,
        mime_type: str,
        folder: str,
    ) -> str:
        """Store one buffer under folder and return its URL."""
        return await self.upload_file(
            UploadRequest(data=data, original_name=original_name, mime_type=mime_type),
            folder,
        )

    async def upload_file(self, request: UploadRequest, folder: str) -> str:
        """Store one upload request under folder and return its URL.

        Raises:
            StorageValidationError: Empty buffer (nothing is written).
            StorageException: Whatever the sink raised.
        """
        if not request.data:
            raise StorageValidationError(request.original_name, "empty file")
        try:
            url = await self.sink.upload(request, folder)
        except StorageException as e:
            logger.error(
                "Upload of %s to %s/%s failed: %s",
                request.original_name,
                self.provider.value,
                folder,
                e.message,
            )
            raise
        logger.info(
            "Uploaded %s (%d bytes) to %s/%s: %s",
            request.original_name,
            request.size,
            self.provider.value,
            folder,
            url,
        )
        return url

    async def upload_many(
        self, requests: Sequence[UploadRequest], folder: str
    ) -> list[str]:
        """Upload all requests concurrently; URLs come back in input order.

        No concurrency cap. The first failure is raised; files already written
        by sibling uploads stay in storage.
        """
        return list(
            await asyncio.gather(*(self.upload_file(r, folder) for r in requests))
        )

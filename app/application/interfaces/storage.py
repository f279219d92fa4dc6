"""Storage interface (port) used by project use cases."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.upload import UploadRequest


class IAssetUploader(Protocol):
    """Upload entry point implemented by the storage dispatcher."""

    async def upload_file(self, request: UploadRequest, folder: str) -> str:
        """Store one file under folder; return its public URL."""

    async def upload_many(
        self, requests: Sequence[UploadRequest], folder: str
    ) -> list[str]:
        """Store files concurrently; URLs in input order."""

"""Storage sink protocol (DIP). Implementations: LocalStorageService, GCSStorageService, R2StorageService, DisabledStorageService."""

from typing import Protocol

from app.application.dtos.upload import UploadRequest
from app.shared.enums import StorageProvider


class StorageProtocol(Protocol):
    """Protocol for object storage sinks (local disk, GCS, S3-compatible R2)."""

    provider: StorageProvider

    @property
    def ready(self) -> bool:
        """True once the sink was constructed with its client handle."""
        ...

    async def upload(self, request: UploadRequest, folder: str) -> str:
        """Store request.data under folder and return its public URL (or root-relative path)."""
        ...

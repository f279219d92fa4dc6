"""Placeholder sink for a backend whose startup initialization did not succeed."""

from __future__ import annotations

from app.application.dtos.upload import UploadRequest
from app.infrastructure.exceptions import StorageNotInitializedError
from app.shared.enums import StorageProvider


class DisabledStorageService:
    """Uninitialized sink: every upload fails immediately, nothing is attempted.

    There is no path back to ready; a restart with valid configuration is required.
    """

    def __init__(self, provider: StorageProvider, reason: str) -> None:
        self.provider = provider
        self.reason = reason

    @property
    def ready(self) -> bool:
        return False

    async def upload(self, request: UploadRequest, folder: str) -> str:
        raise StorageNotInitializedError(self.provider.value, self.reason)

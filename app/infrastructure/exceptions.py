"""Infrastructure exceptions for storage operations.

Storage errors extend PortfolioException so presentation can map them
to HTTP responses consistently.
"""

from app.domain.exceptions import PortfolioException


class StorageException(PortfolioException):
    """Base exception for storage operations."""


class StorageConfigurationError(StorageException):
    """Required storage setting (bucket name, credentials) is absent."""

    def __init__(self, backend: str, setting: str) -> None:
        super().__init__(
            f"{setting} not configured for {backend} storage",
            "STORAGE_CONFIGURATION_ERROR",
            {"backend": backend, "setting": setting},
        )


class StorageNotInitializedError(StorageException):
    """Sink was selected but never came up ready at startup."""

    def __init__(self, backend: str, reason: str) -> None:
        super().__init__(
            f"{backend} storage not initialized",
            "STORAGE_NOT_INITIALIZED",
            {"backend": backend, "reason": reason},
        )


class StorageUploadError(StorageException):
    """File upload failed."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to upload file: {file_path}",
            "STORAGE_UPLOAD_ERROR",
            {"file_path": file_path, "reason": reason},
        )


class StorageValidationError(StorageException):
    """Upload request rejected before reaching a sink (e.g. empty buffer)."""

    def __init__(self, original_name: str, reason: str) -> None:
        super().__init__(
            f"Invalid upload: {original_name}",
            "STORAGE_VALIDATION_ERROR",
            {"original_name": original_name, "reason": reason},
        )

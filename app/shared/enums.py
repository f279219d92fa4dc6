"""Shared enumerations for the portfolio application.

Cross-cutting enums used by application and infrastructure (storage
provider selection, asset folders).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class StorageProvider(_ValuesMixin, str, Enum):
    """Object storage backend selected once at startup (STORAGE_PROVIDER)."""

    LOCAL = "local"
    GCP = "gcp"
    R2 = "r2"

    @classmethod
    def resolve(cls, value: str | None) -> "StorageProvider":
        """Map a raw setting to a provider; unset or unknown values mean LOCAL."""
        normalized = (value or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            return cls.LOCAL


class AssetFolder(_ValuesMixin, str, Enum):
    """Logical category used as the object key prefix for project assets."""

    IMAGES = "images"
    MODELS = "models"
    VIDEOS = "videos"

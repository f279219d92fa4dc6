"""Shared utilities: request context, enums, telemetry, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.context import get_request_id, set_request_id
from app.shared.enums import AssetFolder, StorageProvider
from app.shared.utils import ensure_utc, generate_cuid, utc_now

__all__ = [
    "get_request_id",
    "set_request_id",
    "AssetFolder",
    "StorageProvider",
    "generate_cuid",
    "utc_now",
    "ensure_utc",
]

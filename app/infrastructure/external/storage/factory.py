"""Storage factory: builds the configured sink once and wraps it in a dispatcher."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from app.infrastructure.external.storage.disabled_storage import DisabledStorageService
from app.infrastructure.external.storage.dispatcher import StorageDispatcher
from app.infrastructure.external.storage.local_storage import LocalStorageService
from app.infrastructure.external.storage.protocol import StorageProtocol
from app.shared.enums import StorageProvider
from app.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from app.core.config import Settings

logger = get_logger(__name__)


class StorageFactory:
    """Factory for storage sinks based on configuration.

    Cloud SDKs are imported inside their builders so a local-only
    deployment never loads them. A cloud sink whose credentials are
    missing, or whose client fails to construct, becomes a
    DisabledStorageService instead of raising at startup.
    """

    @staticmethod
    def create_dispatcher(settings: "Settings | None" = None) -> StorageDispatcher:
        """Create the process-wide dispatcher from settings.

        Args:
            settings: Application settings; if None, uses get_settings().

        Returns:
            StorageDispatcher around the selected sink (ready or disabled).
        """
        from app.core.config import get_settings

        s = settings or get_settings()
        provider = StorageProvider.resolve(s.storage_provider)
        if s.storage_provider and provider.value != s.storage_provider.strip().lower():
            logger.warning(
                "Unknown STORAGE_PROVIDER %r; falling back to %s. Supported: %s",
                s.storage_provider,
                provider.value,
                ", ".join(StorageProvider.values()),
            )
        sink = StorageFactory.create_storage_service(provider, s)
        if sink.ready:
            logger.info("Storage provider %s ready", provider.value)
        else:
            logger.warning(
                "Storage provider %s disabled: %s",
                provider.value,
                getattr(sink, "reason", "unknown"),
            )
        return StorageDispatcher(sink)

    @staticmethod
    def create_storage_service(
        provider: StorageProvider, settings: "Settings"
    ) -> StorageProtocol:
        """Build one sink for provider."""
        if provider is StorageProvider.GCP:
            return StorageFactory._create_gcs(settings)
        if provider is StorageProvider.R2:
            return StorageFactory._create_r2(settings)
        return LocalStorageService(storage_root=settings.upload_dir)

    @staticmethod
    def _create_gcs(settings: "Settings") -> StorageProtocol:
        key_path = Path(settings.gcp_key_path) if settings.gcp_key_path else None
        has_key_file = key_path is not None and key_path.is_file()
        if not has_key_file and not settings.gcp_project_id:
            return DisabledStorageService(
                StorageProvider.GCP,
                "GCP_PROJECT_ID not set and no service-account key file found",
            )
        try:
            from google.cloud import storage

            from app.infrastructure.external.storage.gcs_storage import GCSStorageService

            if has_key_file:
                client = storage.Client.from_service_account_json(
                    str(key_path), project=settings.gcp_project_id
                )
            else:
                client = storage.Client(project=settings.gcp_project_id)
            bucket = client.bucket(settings.gcp_bucket_name)
        except Exception as e:
            logger.warning("Failed to initialize GCP Storage: %s", e)
            return DisabledStorageService(StorageProvider.GCP, str(e))
        return GCSStorageService(bucket)

    @staticmethod
    def _create_r2(settings: "Settings") -> StorageProtocol:
        secret = (
            settings.r2_secret_access_key.get_secret_value()
            if settings.r2_secret_access_key
            else None
        )
        missing = [
            name
            for name, value in (
                ("R2_ACCOUNT_ID", settings.r2_account_id),
                ("R2_ACCESS_KEY_ID", settings.r2_access_key_id),
                ("R2_SECRET_ACCESS_KEY", secret),
            )
            if not value
        ]
        if missing:
            return DisabledStorageService(
                StorageProvider.R2, f"missing {', '.join(missing)}"
            )
        try:
            from app.infrastructure.external.storage.r2_storage import R2StorageService

            return R2StorageService(
                account_id=settings.r2_account_id or "",
                access_key=settings.r2_access_key_id or "",
                secret_key=secret or "",
                bucket=settings.r2_bucket_name,
                public_url=settings.r2_public_url,
            )
        except Exception as e:
            logger.warning("Failed to initialize R2 client: %s", e)
            return DisabledStorageService(StorageProvider.R2, str(e))

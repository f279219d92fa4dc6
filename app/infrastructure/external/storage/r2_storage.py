"""Cloudflare R2 storage over the S3 API (boto3)."""

from __future__ import annotations

import asyncio
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.application.dtos.upload import UploadRequest
from app.infrastructure.exceptions import StorageConfigurationError, StorageUploadError
from app.infrastructure.external.storage.keys import MonotonicMillisClock, build_object_key
from app.shared.enums import StorageProvider
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

R2_REGION = "auto"
CACHE_CONTROL = "max-age=31536000"


def r2_endpoint(account_id: str) -> str:
    """S3 API endpoint for an R2 account. Uploads always go here, never to the public domain."""
    return f"https://{account_id}.r2.cloudflarestorage.com"


class R2StorageService:
    """R2 sink: one put_object per upload, public URL from a base or the account endpoint.

    Uses boto3 (sync) via asyncio.to_thread for the async API.
    """

    provider = StorageProvider.R2

    def __init__(
        self,
        account_id: str,
        access_key: str,
        secret_key: str,
        bucket: str | None = None,
        public_url: str | None = None,
        client: Any | None = None,
        clock: MonotonicMillisClock | None = None,
    ) -> None:
        """Initialize the S3 client against the R2 endpoint.

        Args:
            account_id: Cloudflare account id (endpoint and fallback URL host).
            access_key: R2 access key id.
            secret_key: R2 secret access key.
            bucket: Target bucket; checked on every upload.
            public_url: Optional public base (custom domain or r2.dev gateway).
            client: Prebuilt S3 client (tests).
            clock: Optional timestamp source for object keys.
        """
        self.account_id = account_id
        self.bucket = bucket
        self.public_url = public_url.rstrip("/") if public_url else None
        self._clock = clock
        self._client = client or boto3.client(
            "s3",
            region_name=R2_REGION,
            endpoint_url=r2_endpoint(account_id),
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
        )

    @property
    def ready(self) -> bool:
        return True

    def public_url_for(self, key: str) -> str:
        """Public base + key when configured, else the bucket virtual-host URL."""
        if self.public_url:
            return f"{self.public_url}/{key}"
        return f"https://{self.bucket}.{self.account_id}.r2.cloudflarestorage.com/{key}"

    async def upload(self, request: UploadRequest, folder: str) -> str:
        """PUT the whole buffer under '<folder>/<timestamp>-<name>' and return its URL."""
        if not self.bucket:
            raise StorageConfigurationError("r2", "R2_BUCKET_NAME")
        bucket = self.bucket
        key = build_object_key(folder, request.original_name, self._clock)

        def _put() -> None:
            self._client.put_object(
                Bucket=bucket,
                Key=key,
                Body=request.data,
                ContentType=request.mime_type,
                CacheControl=CACHE_CONTROL,
            )

        try:
            await asyncio.to_thread(_put)
        except (BotoCoreError, ClientError) as e:
            logger.error("R2 upload failed for %s: %s", key, e)
            raise StorageUploadError(key, str(e)) from e
        return self.public_url_for(key)

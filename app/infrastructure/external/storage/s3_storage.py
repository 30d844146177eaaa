"""S3-compatible object storage (Cloudflare R2, AWS S3, MinIO)."""

from __future__ import annotations

import asyncio
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.application.dtos.storage import StoredObject
from app.infrastructure.exceptions import (
    StorageDownloadError,
    StorageNotFoundError,
    StorageUploadError,
)

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


class S3StorageService:
    """S3-compatible storage with a single client built from explicit settings.

    Uses boto3 (sync) via asyncio.to_thread for async API. Pass client= to
    substitute a stub in tests.
    """

    def __init__(
        self,
        bucket: str,
        region: str = "auto",
        endpoint_url: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        client: object | None = None,
    ) -> None:
        """Initialize S3 client.

        Args:
            bucket: Bucket name.
            region: Region ("auto" for R2).
            endpoint_url: Custom endpoint (R2 account endpoint, MinIO).
            access_key: Optional; uses env/IAM if not set.
            secret_key: Optional.
            client: Pre-built boto3 client (tests).
        """
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url
        if client is not None:
            self._client = client
            return
        extra = {} if endpoint_url is None else {"endpoint_url": endpoint_url}
        self._client = boto3.client(
            "s3",
            region_name=region,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            **extra,
        )

    async def put_object(self, key: str, body: bytes, content_type: str) -> None:
        """Upload body under key. No existence check, no retry."""
        def _put() -> None:
            self._client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )

        try:
            await asyncio.to_thread(_put)
        except (ClientError, BotoCoreError) as e:
            logger.warning("put_object failed in bucket %s: %s", self.bucket, e)
            raise StorageUploadError(key, str(e)) from e
        logger.debug("Stored %d bytes in bucket %s", len(body), self.bucket)

    async def get_object(self, key: str) -> StoredObject:
        """Read the whole object body and its content type."""
        def _get() -> StoredObject:
            resp = self._client.get_object(Bucket=self.bucket, Key=key)
            return StoredObject(
                body=resp["Body"].read(),
                content_type=resp.get("ContentType") or "application/octet-stream",
            )

        try:
            return await asyncio.to_thread(_get)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in _NOT_FOUND_CODES:
                raise StorageNotFoundError(key) from e
            raise StorageDownloadError(key, str(e)) from e
        except BotoCoreError as e:
            raise StorageDownloadError(key, str(e)) from e

"""Storage service factory: creates the S3-compatible backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.interfaces.storage import IStorageService
from app.domain.exceptions import ConfigurationError

if TYPE_CHECKING:
    from app.core.config import Settings


class StorageFactory:
    """Factory for storage service instances based on configuration."""

    @staticmethod
    def check_settings(settings: "Settings") -> None:
        """Raise ConfigurationError naming the first missing storage setting.

        Order: bucket, endpoint, access key id, secret access key.
        """
        secret = settings.r2_secret_access_key
        required = (
            ("R2_BUCKET_NAME", settings.r2_bucket_name),
            ("R2_ENDPOINT", settings.r2_endpoint),
            ("R2_ACCESS_KEY_ID", settings.r2_access_key_id),
            ("R2_SECRET_ACCESS_KEY", secret.get_secret_value() if secret else None),
        )
        for name, value in required:
            if not value:
                raise ConfigurationError(name)

    @staticmethod
    def create_storage_service(settings: "Settings | None" = None) -> IStorageService:
        """Create storage service from settings.

        Args:
            settings: Application settings; if None, uses get_settings().

        Returns:
            S3StorageService bound to the configured bucket and endpoint.

        Raises:
            ConfigurationError: Bucket, endpoint or access keys are not configured.
        """
        from app.core.config import get_settings

        s = settings or get_settings()
        StorageFactory.check_settings(s)

        from app.infrastructure.external.storage.s3_storage import S3StorageService

        return S3StorageService(
            bucket=s.r2_bucket_name,
            region=s.r2_region,
            endpoint_url=s.r2_endpoint,
            access_key=s.r2_access_key_id,
            secret_key=s.r2_secret_access_key.get_secret_value(),
        )

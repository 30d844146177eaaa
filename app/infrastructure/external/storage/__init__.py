"""Storage: S3-compatible object storage backend (Cloudflare R2, S3, MinIO).

Factory creates the backend from app.core.config. The implementation is
loaded lazily inside StorageFactory.create_storage_service() so importing
the package does not construct a boto3 client.

Implementations satisfy IStorageService (put_object, get_object).
"""

from app.infrastructure.external.storage.factory import StorageFactory

__all__ = [
    "StorageFactory",
]

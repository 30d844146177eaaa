"""Storage service interface (port). Implementation: S3StorageService."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.storage import StoredObject


class IStorageService(Protocol):
    """Protocol for object storage backends (S3-compatible)."""

    bucket: str

    async def put_object(self, key: str, body: bytes, content_type: str) -> None:
        """Store body under key in a single put. Raises StorageUploadError."""
        ...

    async def get_object(self, key: str) -> StoredObject:
        """Return object body and content type. Raises StorageNotFoundError."""
        ...

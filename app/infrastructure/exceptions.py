"""Infrastructure exceptions for storage and external operations.

Storage errors extend the domain exceptions so presentation can map them
to HTTP responses consistently: failures are upstream (500), a missing
object is a 404.
"""

from app.domain.exceptions import MelaException, UpstreamError


def _folder(storage_key: str) -> str:
    # Keys embed the owner email after the folder; only the folder is logged.
    return storage_key.partition("/")[0]


class StorageException(UpstreamError):
    """Base exception for storage operations."""


class StorageNotFoundError(MelaException):
    """Object not found in storage."""

    def __init__(self, storage_key: str) -> None:
        super().__init__(
            f"Object not found: {storage_key}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": "object", "resource_id": storage_key},
        )


class StorageUploadError(StorageException):
    """Object upload failed."""

    def __init__(self, storage_key: str, reason: str) -> None:
        super().__init__(
            "Failed to upload file",
            reason,
            "STORAGE_UPLOAD_ERROR",
            {"storage_folder": _folder(storage_key)},
        )


class StorageDownloadError(StorageException):
    """Object download failed."""

    def __init__(self, storage_key: str, reason: str) -> None:
        super().__init__(
            "Failed to load file",
            reason,
            "STORAGE_DOWNLOAD_ERROR",
            {"storage_folder": _folder(storage_key)},
        )


class AuthServiceError(UpstreamError):
    """Auth verification service could not be reached or answered unexpectedly."""

    def __init__(self, reason: str) -> None:
        super().__init__("Failed to verify auth token", reason, "AUTH_SERVICE_ERROR")

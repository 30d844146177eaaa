"""DTOs for object storage reads and upload results."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StoredObject:
    """Object body and content type as read back from storage."""

    body: bytes
    content_type: str


@dataclass(frozen=True)
class UploadResult:
    """Derived storage key and the public URL it is served from."""

    key: str
    url: str

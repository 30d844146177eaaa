"""Application DTOs (no ORM dependency)."""

from app.application.dtos.auth import AuthUser
from app.application.dtos.stall import StallItem, StallPayload, StallSubmissionResult
from app.application.dtos.storage import StoredObject, UploadResult

__all__ = [
    "AuthUser",
    "StallItem",
    "StallPayload",
    "StallSubmissionResult",
    "StoredObject",
    "UploadResult",
]

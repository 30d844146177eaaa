"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.allowlist_repo import AllowlistRepository
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.stall_submission_repo import (
    StallSubmissionRepository,
)

__all__ = [
    "AllowlistRepository",
    "BaseRepository",
    "StallSubmissionRepository",
]

"""Persistence models: ORM entities mapped onto the managed tables."""

from app.infrastructure.persistence.models.allowlist import AllowedClub, AllowedOwner
from app.infrastructure.persistence.models.stall_submission import StallSubmission

__all__ = [
    "AllowedClub",
    "AllowedOwner",
    "StallSubmission",
]

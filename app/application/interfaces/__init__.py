"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure.
"""

from app.application.interfaces.repositories import (
    IAllowlistRepository,
    IStallSubmissionRepository,
)
from app.application.interfaces.services import IAuthVerifier
from app.application.interfaces.storage import IStorageService

__all__ = [
    "IAllowlistRepository",
    "IAuthVerifier",
    "IStallSubmissionRepository",
    "IStorageService",
]

"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repos, storage, auth verifier).
"""

from app.application.interfaces import (
    IAllowlistRepository,
    IAuthVerifier,
    IStallSubmissionRepository,
    IStorageService,
)
from app.application.use_cases import ClubCatalogService, ClubCatalogView, UploadService

__all__ = [
    "ClubCatalogService",
    "ClubCatalogView",
    "IAllowlistRepository",
    "IAuthVerifier",
    "IStallSubmissionRepository",
    "IStorageService",
    "UploadService",
]

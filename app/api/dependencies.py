"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the storage backend, the auth verifier,
repositories and the upload/catalog use cases. All use cases are built
from infrastructure implementations here; routes depend only on these
dependencies, not on infra directly. Tests replace any of them through
app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.application.interfaces import (
    IAllowlistRepository,
    IAuthVerifier,
    IStallSubmissionRepository,
    IStorageService,
)
from app.application.use_cases import ClubCatalogService, UploadService
from app.core.config import Settings, get_settings
from app.domain.exceptions import ConfigurationError
from app.infrastructure.external.auth import AuthVerifierFactory
from app.infrastructure.external.storage import StorageFactory
from app.infrastructure.persistence.repositories import (
    AllowlistRepository,
    StallSubmissionRepository,
)


def get_storage_service(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> IStorageService | None:
    """Storage backend for the configured bucket, or None when no bucket is set.

    A bucket without its endpoint or access keys raises ConfigurationError.
    The client is built once and kept on app.state.
    """
    if not settings.r2_bucket_name:
        return None
    StorageFactory.check_settings(settings)
    storage = getattr(request.app.state, "storage_service", None)
    if (
        storage is None
        or storage.bucket != settings.r2_bucket_name
        or storage.endpoint_url != settings.r2_endpoint
    ):
        storage = StorageFactory.create_storage_service(settings)
        request.app.state.storage_service = storage
    return storage


def require_storage_service(
    storage: Annotated[IStorageService | None, Depends(get_storage_service)],
) -> IStorageService:
    """Storage backend; ConfigurationError (500) when the bucket is not configured."""
    if storage is None:
        raise ConfigurationError("R2_BUCKET_NAME")
    return storage


def get_auth_verifier(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> IAuthVerifier:
    """Bearer-token verifier for settings.auth_backend (shared HTTP client from lifespan)."""
    http_client = getattr(request.app.state, "auth_http_client", None)
    return AuthVerifierFactory.create_auth_verifier(settings, http_client=http_client)


def get_allowlist_repo() -> IAllowlistRepository:
    return AllowlistRepository()


def get_submission_repo() -> IStallSubmissionRepository:
    return StallSubmissionRepository()


def get_upload_service(
    storage: Annotated[IStorageService, Depends(require_storage_service)],
    auth_verifier: Annotated[IAuthVerifier, Depends(get_auth_verifier)],
    allowlist_repo: Annotated[IAllowlistRepository, Depends(get_allowlist_repo)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> UploadService:
    """Build UploadService. Storage is resolved first so a missing bucket fails before auth."""
    return UploadService(
        auth_verifier=auth_verifier,
        allowlist_repo=allowlist_repo,
        storage=storage,
        public_base_url=settings.r2_public_base_url,
        default_folder=settings.default_upload_folder,
    )


def get_club_catalog_service(
    allowlist_repo: Annotated[IAllowlistRepository, Depends(get_allowlist_repo)],
    submission_repo: Annotated[
        IStallSubmissionRepository, Depends(get_submission_repo)
    ],
) -> ClubCatalogService:
    return ClubCatalogService(allowlist_repo=allowlist_repo, submission_repo=submission_repo)

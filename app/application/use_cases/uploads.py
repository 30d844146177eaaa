"""Upload use case: authorize the caller against the allowlists and store the body."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from app.application.dtos.storage import UploadResult
from app.application.interfaces.repositories import IAllowlistRepository
from app.application.interfaces.services import IAuthVerifier
from app.application.interfaces.storage import IStorageService
from app.application.services.storage_keys import (
    DEFAULT_FILENAME,
    build_public_url,
    build_storage_key,
)
from app.domain.exceptions import (
    BadRequestException,
    ConfigurationError,
    ForbiddenException,
    UnauthorizedException,
    UpstreamError,
)
from app.shared.telemetry.tracing import traced
from app.shared.utils.datetime import utc_now_ms

logger = logging.getLogger(__name__)

DEFAULT_FOLDER = "stalls"
DEFAULT_CONTENT_TYPE = "application/octet-stream"
_BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token of an "Authorization: Bearer <token>" header, else None."""
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        return None
    token = authorization[len(_BEARER_PREFIX) :].strip()
    return token or None


class UploadService:
    """Authorize an upload and forward the body to object storage.

    Checks run in a fixed order and stop at the first failure: storage
    configured, bearer token present, token resolves to a user with an
    email, email on the owners or clubs allowlist, body non-empty. Nothing
    is retried.
    """

    def __init__(
        self,
        auth_verifier: IAuthVerifier,
        allowlist_repo: IAllowlistRepository,
        storage: IStorageService | None,
        public_base_url: str | None,
        default_folder: str = DEFAULT_FOLDER,
        clock: Callable[[], int] = utc_now_ms,
    ) -> None:
        self.auth_verifier = auth_verifier
        self.allowlist_repo = allowlist_repo
        self.storage = storage
        self.public_base_url = public_base_url
        self.default_folder = default_folder
        self.clock = clock

    async def authorize(self, authorization: str | None) -> str:
        """Return the caller's lowercased email if it may upload.

        Raises:
            UnauthorizedException: Missing, rejected, or unverifiable token.
            ForbiddenException: User has no email, or email is on neither allowlist.
            UpstreamError: An allowlist lookup failed.
        """
        token = extract_bearer_token(authorization)
        if token is None:
            raise UnauthorizedException("Missing auth token")

        try:
            user = await self.auth_verifier.get_user(token)
        except UpstreamError as e:
            logger.warning("Auth service error while verifying upload token: %s", e.reason)
            raise UnauthorizedException("Invalid auth token") from e
        if user is None:
            raise UnauthorizedException("Invalid auth token")

        email = (user.email or "").lower()
        if not email:
            raise ForbiddenException("Email not found")

        owner_result, club_result = await asyncio.gather(
            self.allowlist_repo.is_owner(email),
            self.allowlist_repo.is_club(email),
            return_exceptions=True,
        )
        for result in (owner_result, club_result):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                reason = result.reason if isinstance(result, UpstreamError) else str(result)
                raise UpstreamError("Failed to verify email", reason) from result

        if not owner_result and not club_result:
            logger.info("Upload refused: user %s is not on an allowlist", user.id)
            raise ForbiddenException("Email not authorized")
        return email

    @traced("upload.store")
    async def upload(
        self,
        authorization: str | None,
        body: bytes,
        filename: str | None = None,
        folder: str | None = None,
        content_type: str | None = None,
    ) -> UploadResult:
        """Authorize, derive the storage key, store body, return key and public URL.

        Args:
            authorization: Raw Authorization header value.
            body: Request body bytes, stored as-is.
            filename: x-file-name header; defaults to "upload".
            folder: folder query parameter; defaults to the configured folder.
            content_type: Content-Type header; defaults to application/octet-stream.

        Raises:
            ConfigurationError: Storage or public base URL not configured.
            UnauthorizedException, ForbiddenException, UpstreamError: see authorize().
            BadRequestException: Empty body.
            StorageUploadError: The put failed.
        """
        if self.storage is None:
            raise ConfigurationError("R2_BUCKET_NAME")

        email = await self.authorize(authorization)

        if len(body) == 0:
            raise BadRequestException("Empty upload", field="body")

        key = build_storage_key(
            folder or self.default_folder,
            email,
            self.clock(),
            filename or DEFAULT_FILENAME,
        )
        await self.storage.put_object(
            key=key,
            body=body,
            content_type=content_type or DEFAULT_CONTENT_TYPE,
        )
        logger.info("Stored upload in %s (%d bytes)", folder or self.default_folder, len(body))

        if not self.public_base_url:
            raise ConfigurationError("R2_PUBLIC_BASE_URL")
        return UploadResult(key=key, url=build_public_url(self.public_base_url, key))

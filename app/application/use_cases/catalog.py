"""Club catalog use cases: the public club stall query and the catalog view."""

from __future__ import annotations

import logging
from typing import Any

from app.application.dtos.stall import StallPayload
from app.application.interfaces.repositories import (
    IAllowlistRepository,
    IStallSubmissionRepository,
)
from app.application.services.catalog_filter import filter_stalls
from app.domain.enums import CatalogStatus
from app.domain.exceptions import MelaException, UpstreamError
from app.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)


def _payload_category(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    category = payload.get("category")
    return category.lower() if isinstance(category, str) else None


class ClubCatalogService:
    """Public listing of stalls submitted by club accounts.

    Club membership is read from the allowlist on every call; nothing is cached.
    """

    def __init__(
        self,
        allowlist_repo: IAllowlistRepository,
        submission_repo: IStallSubmissionRepository,
    ) -> None:
        self.allowlist_repo = allowlist_repo
        self.submission_repo = submission_repo

    @traced("catalog.list_club_stalls")
    async def list_club_stalls(self, category: str | None = None) -> list[Any]:
        """Return club submission payloads verbatim, newest first.

        Args:
            category: Optional; keeps payloads whose own category equals it
                case-insensitively. Blank means no filter.

        Raises:
            UpstreamError: Allowlist or submissions could not be loaded.
        """
        try:
            rows = await self.allowlist_repo.list_club_emails()
        except UpstreamError as e:
            raise UpstreamError("Failed to load club allowlist", e.reason) from e

        club_emails = {e.lower() for e in rows if isinstance(e, str) and e}
        if not club_emails:
            return []

        try:
            submissions = await self.submission_repo.list_by_owner_emails(club_emails)
        except UpstreamError as e:
            raise UpstreamError("Failed to load club stalls", e.reason) from e

        wanted = (category or "").lower()
        payloads = [s.payload for s in submissions]
        if wanted:
            payloads = [p for p in payloads if _payload_category(p) == wanted]
        logger.debug(
            "Club catalog: %d clubs, %d submissions, %d returned",
            len(club_emails),
            len(submissions),
            len(payloads),
        )
        return payloads

    async def find_club_stall(self, category: str, slug: str) -> StallPayload | None:
        """Newest club stall in category whose slug matches case-insensitively."""
        wanted = slug.lower()
        for payload in await self.list_club_stalls(category):
            stall = StallPayload.from_raw(payload)
            if (stall.slug or "").lower() == wanted:
                return stall
        return None


class ClubCatalogView:
    """One load of the club catalog plus in-memory filtering.

    Status moves idle -> loading -> ready or error exactly once; load() on a
    view that already left idle does nothing.
    """

    DEFAULT_ERROR = "Failed to load club stalls"

    def __init__(self, catalog: ClubCatalogService) -> None:
        self.catalog = catalog
        self.status = CatalogStatus.IDLE
        self.stalls: list[StallPayload] = []
        self.error_message: str | None = None

    async def load(self) -> None:
        if self.status is not CatalogStatus.IDLE:
            return
        self.status = CatalogStatus.LOADING
        try:
            payloads = await self.catalog.list_club_stalls()
        except MelaException as e:
            logger.warning("Club catalog failed to load: %s", e.message)
            self.error_message = e.message or self.DEFAULT_ERROR
            self.status = CatalogStatus.ERROR
            return
        self.stalls = [StallPayload.from_raw(p) for p in payloads]
        self.status = CatalogStatus.READY

    def visible(self, category: str | None = None, query: str | None = None) -> list[StallPayload]:
        """Stalls matching category and query; empty unless ready."""
        if self.status is not CatalogStatus.READY:
            return []
        return filter_stalls(self.stalls, category, query)

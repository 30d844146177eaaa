"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.stall import StallSubmissionResult


class IAllowlistRepository(Protocol):
    """Protocol for the owner and club allowlists (read-only).

    Implementations raise UpstreamError when the backing store fails.
    """

    async def is_owner(self, email: str) -> bool:
        """Return True if email (already lowercased) is in the owners allowlist."""

    async def is_club(self, email: str) -> bool:
        """Return True if email (already lowercased) is in the clubs allowlist."""

    async def list_club_emails(self) -> list[str | None]:
        """Return every email column value of the clubs allowlist, as stored."""


class IStallSubmissionRepository(Protocol):
    """Protocol for stall submissions (read-only)."""

    async def list_by_owner_emails(
        self, emails: Collection[str]
    ) -> list[StallSubmissionResult]:
        """Return submissions whose owner_email is in emails, newest first."""

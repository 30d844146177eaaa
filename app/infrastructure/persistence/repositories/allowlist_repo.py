"""Allowlist repository: owner and club email membership (read-only)."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.models.allowlist import AllowedClub, AllowedOwner
from app.infrastructure.persistence.repositories.base import BaseRepository


class AllowlistRepository(BaseRepository):
    """Membership checks against allowed_owners / allowed_clubs.

    Stored emails are compared case-insensitively; callers pass lowercased emails.
    """

    async def _exists(self, model: type[AllowedOwner] | type[AllowedClub], email: str) -> bool:
        async def query(session: AsyncSession) -> bool:
            result = await session.execute(
                select(model.email).where(func.lower(model.email) == email).limit(1)
            )
            return result.scalar_one_or_none() is not None

        return await self._run(query, f"Failed to check {model.__tablename__}")

    async def is_owner(self, email: str) -> bool:
        """Return True if email is in allowed_owners."""
        return await self._exists(AllowedOwner, email)

    async def is_club(self, email: str) -> bool:
        """Return True if email is in allowed_clubs."""
        return await self._exists(AllowedClub, email)

    async def list_club_emails(self) -> list[str | None]:
        """Return every email in allowed_clubs as stored (not normalized)."""
        async def query(session: AsyncSession) -> list[str | None]:
            result = await session.execute(select(AllowedClub.email))
            return list(result.scalars().all())

        return await self._run(query, "Failed to load club allowlist")

"""Stall submission repository. Returns application DTOs."""

from __future__ import annotations

from collections.abc import Collection

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.stall import StallSubmissionResult
from app.infrastructure.persistence.models.stall_submission import StallSubmission
from app.infrastructure.persistence.repositories.base import BaseRepository


def _submission_to_result(s: StallSubmission) -> StallSubmissionResult:
    """Map ORM StallSubmission to application StallSubmissionResult."""
    return StallSubmissionResult(
        owner_email=s.owner_email,
        stall_slug=s.stall_slug,
        payload=s.payload,
        created_at=s.created_at,
    )


class StallSubmissionRepository(BaseRepository):
    """Read access to stall_submissions."""

    async def list_by_owner_emails(
        self, emails: Collection[str]
    ) -> list[StallSubmissionResult]:
        """Submissions whose owner_email (case-folded) is in emails, newest first."""
        wanted = sorted({e.lower() for e in emails})
        if not wanted:
            return []

        async def query(session: AsyncSession) -> list[StallSubmissionResult]:
            result = await session.execute(
                select(StallSubmission)
                .where(func.lower(StallSubmission.owner_email).in_(wanted))
                .order_by(StallSubmission.created_at.desc(), StallSubmission.id)
            )
            return [_submission_to_result(s) for s in result.scalars().all()]

        return await self._run(query, "Failed to load club stalls")

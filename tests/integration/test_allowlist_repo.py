"""Integration tests for the allowlist and stall submission repositories.

Require a Postgres DATABASE_URL; skipped otherwise. Tables are created if
missing and rows written here are removed afterwards.
"""

import uuid

import pytest
from sqlalchemy import delete, insert

from app.infrastructure.persistence.models import AllowedClub, AllowedOwner, StallSubmission
from app.infrastructure.persistence.repositories import (
    AllowlistRepository,
    StallSubmissionRepository,
)

pytestmark = pytest.mark.requires_db


@pytest.fixture
async def emails(db_session_factory):
    tag = uuid.uuid4().hex[:8]
    owner = f"Owner-{tag}@Example.com"
    club = f"club-{tag}@example.com"
    async with db_session_factory() as session:
        async with session.begin():
            await session.execute(insert(AllowedOwner).values(email=owner))
            await session.execute(insert(AllowedClub).values(email=club))
    yield owner, club
    async with db_session_factory() as session:
        async with session.begin():
            await session.execute(delete(AllowedOwner).where(AllowedOwner.email == owner))
            await session.execute(delete(AllowedClub).where(AllowedClub.email == club))
            await session.execute(delete(StallSubmission).where(StallSubmission.owner_email == club))


async def test_membership_is_case_insensitive(db_session_factory, emails) -> None:
    owner, club = emails
    repo = AllowlistRepository(db_session_factory)
    assert await repo.is_owner(owner.lower())
    assert not await repo.is_club(owner.lower())
    assert await repo.is_club(club)
    assert club in await repo.list_club_emails()


async def test_submissions_for_clubs_newest_first(db_session_factory, emails) -> None:
    _, club = emails
    async with db_session_factory() as session:
        async with session.begin():
            for slug in ("first", "second"):
                session.add(
                    StallSubmission(owner_email=club, stall_slug=slug, payload={"slug": slug})
                )
                await session.flush()
    repo = StallSubmissionRepository(db_session_factory)
    rows = await repo.list_by_owner_emails({club.upper()})
    assert len(rows) == 2
    assert {r.payload["slug"] for r in rows} == {"first", "second"}

"""Seed a development database with allowlist rows and sample stall submissions.

Adds one club email and one owner email to the allowlists, then stores each
built-in sample stall as a submission of the club account, so /clubs and
/api/public/clubs have something to show. Re-running is safe: allowlist
rows are skipped when present and submissions are replaced per
(owner_email, stall_slug).

Usage:
    uv run python -m scripts.seed_dev_data [--club-email EMAIL] [--owner-email EMAIL] [--create-tables]

Requires: DATABASE_URL (Postgres). --create-tables creates the three tables
when they do not exist (dev databases only; production schema is managed
outside this service).
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.sql import func

from app.domain.sample_stalls import SAMPLE_STALLS
from app.infrastructure.persistence import database
from app.infrastructure.persistence.models import (
    AllowedClub,
    AllowedOwner,
    StallSubmission,
)

DEFAULT_CLUB_EMAIL = "club@mela.local"
DEFAULT_OWNER_EMAIL = "owner@mela.local"


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--club-email", default=DEFAULT_CLUB_EMAIL)
    parser.add_argument("--owner-email", default=DEFAULT_OWNER_EMAIL)
    parser.add_argument("--create-tables", action="store_true")
    return parser.parse_args(argv)


async def seed(club_email: str, owner_email: str, create_tables: bool) -> int:
    """Insert allowlist rows and sample submissions. Returns submissions written."""
    session_factory = database.get_session_factory()
    if create_tables:
        async with database.engine.begin() as conn:
            await conn.run_sync(database.Base.metadata.create_all)

    club_email = club_email.lower()
    owner_email = owner_email.lower()
    async with session_factory() as session:
        async with session.begin():
            await session.execute(
                insert(AllowedClub).values(email=club_email).on_conflict_do_nothing()
            )
            await session.execute(
                insert(AllowedOwner).values(email=owner_email).on_conflict_do_nothing()
            )
            for stall in SAMPLE_STALLS:
                stmt = insert(StallSubmission).values(
                    owner_email=club_email,
                    stall_slug=stall.slug,
                    payload=stall.to_payload(),
                )
                await session.execute(
                    stmt.on_conflict_do_update(
                        constraint="uq_stall_submissions_owner_slug",
                        set_={"payload": stmt.excluded.payload, "created_at": func.now()},
                    )
                )
    return len(SAMPLE_STALLS)


async def main() -> None:
    _load_env()
    args = _parse_args(sys.argv[1:])
    try:
        count = await seed(args.club_email, args.owner_email, args.create_tables)
    finally:
        await database.dispose_engine()
    print(f"Club allowlist: {args.club_email.lower()}")
    print(f"Owner allowlist: {args.owner_email.lower()}")
    print(f"Seeded {count} stall submissions")


if __name__ == "__main__":
    asyncio.run(main())

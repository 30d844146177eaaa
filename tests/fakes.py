"""In-memory stand-ins for the storage backend, auth verifier and repositories.

Wired into the app by the client fixture in conftest.py through
app.dependency_overrides, and used directly by unit tests.
"""

from collections.abc import Collection
from datetime import datetime, timedelta, timezone
from typing import Any

from app.application.dtos import AuthUser, StallSubmissionResult, StoredObject
from app.domain.exceptions import UpstreamError
from app.infrastructure.exceptions import StorageNotFoundError

TEST_BUCKET = "mela-test"
TEST_PUBLIC_BASE_URL = "https://cdn.example.com/"
VALID_TOKEN = "valid-token"


class FakeAuthVerifier:
    """Maps tokens to users; unknown tokens resolve to None."""

    def __init__(self, users: dict[str, AuthUser] | None = None) -> None:
        self.users = dict(users or {})
        self.error: Exception | None = None
        self.calls: list[str] = []

    async def get_user(self, token: str) -> AuthUser | None:
        self.calls.append(token)
        if self.error is not None:
            raise self.error
        return self.users.get(token)


class FakeAllowlistRepo:
    """Owners/clubs as sets of stored emails (compared lowercased)."""

    def __init__(
        self,
        owners: Collection[str] = (),
        clubs: Collection[str | None] = (),
    ) -> None:
        self.owners = list(owners)
        self.clubs = list(clubs)
        self.owner_error: Exception | None = None
        self.club_error: Exception | None = None
        self.list_error: Exception | None = None

    async def is_owner(self, email: str) -> bool:
        if self.owner_error is not None:
            raise self.owner_error
        return email in {o.lower() for o in self.owners}

    async def is_club(self, email: str) -> bool:
        if self.club_error is not None:
            raise self.club_error
        return email in {c.lower() for c in self.clubs if c}

    async def list_club_emails(self) -> list[str | None]:
        if self.list_error is not None:
            raise self.list_error
        return list(self.clubs)


class FakeSubmissionRepo:
    """Submissions held in memory; records every query."""

    def __init__(self, submissions: list[StallSubmissionResult] | None = None) -> None:
        self.submissions = list(submissions or [])
        self.error: Exception | None = None
        self.queries: list[set[str]] = []

    async def list_by_owner_emails(
        self, emails: Collection[str]
    ) -> list[StallSubmissionResult]:
        wanted = {e.lower() for e in emails}
        self.queries.append(wanted)
        if self.error is not None:
            raise self.error
        rows = [s for s in self.submissions if s.owner_email.lower() in wanted]
        return sorted(rows, key=lambda s: s.created_at, reverse=True)


class FakeStorage:
    """Object store keyed by storage key."""

    def __init__(self, bucket: str = TEST_BUCKET) -> None:
        self.bucket = bucket
        self.objects: dict[str, StoredObject] = {}
        self.put_error: Exception | None = None
        self.get_error: Exception | None = None

    async def put_object(self, key: str, body: bytes, content_type: str) -> None:
        if self.put_error is not None:
            raise self.put_error
        self.objects[key] = StoredObject(body=body, content_type=content_type)

    async def get_object(self, key: str) -> StoredObject:
        if self.get_error is not None:
            raise self.get_error
        if key not in self.objects:
            raise StorageNotFoundError(key)
        return self.objects[key]


def make_submission(
    owner_email: str,
    payload: Any,
    minutes_ago: int = 0,
    slug: str | None = None,
) -> StallSubmissionResult:
    created = datetime(2026, 2, 1, 12, 0, tzinfo=timezone.utc) - timedelta(minutes=minutes_ago)
    if slug is None:
        slug = payload.get("slug", "stall") if isinstance(payload, dict) else "stall"
    return StallSubmissionResult(
        owner_email=owner_email,
        stall_slug=slug,
        payload=payload,
        created_at=created,
    )


def lookup_failure(message: str = "connection refused") -> UpstreamError:
    return UpstreamError("Failed to check allowlist", message)

"""Pytest configuration and fixtures for mela.

HTTP tests run against app.main:app through httpx's ASGITransport with
the storage backend, auth verifier and repositories replaced by the
in-memory fakes from tests.fakes (app.dependency_overrides). DB-dependent
fixtures skip when Postgres is not configured. All imports use app.*.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import (
    get_allowlist_repo,
    get_auth_verifier,
    get_storage_service,
    get_submission_repo,
)
from app.application.dtos import AuthUser
from app.core.config import Settings, get_settings
from app.core.limiter import limiter
from app.main import app
from tests.fakes import (
    TEST_BUCKET,
    TEST_PUBLIC_BASE_URL,
    VALID_TOKEN,
    FakeAllowlistRepo,
    FakeAuthVerifier,
    FakeStorage,
    FakeSubmissionRepo,
)


@pytest.fixture
def settings() -> Settings:
    """Settings with storage and public base URL configured (no .env)."""
    return Settings(
        _env_file=None,
        r2_bucket_name=TEST_BUCKET,
        r2_public_base_url=TEST_PUBLIC_BASE_URL,
        supabase_url="https://auth.example.com",
        supabase_anon_key="anon-key",
    )


@pytest.fixture
def auth_verifier() -> FakeAuthVerifier:
    return FakeAuthVerifier({VALID_TOKEN: AuthUser(id="user-1", email="Vendor@Example.com")})


@pytest.fixture
def allowlist_repo() -> FakeAllowlistRepo:
    return FakeAllowlistRepo()


@pytest.fixture
def submission_repo() -> FakeSubmissionRepo:
    return FakeSubmissionRepo()


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
async def client(
    settings: Settings,
    auth_verifier: FakeAuthVerifier,
    allowlist_repo: FakeAllowlistRepo,
    submission_repo: FakeSubmissionRepo,
    storage: FakeStorage,
) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with fakes wired in.

    Tests change the fakes (or override get_storage_service again) before
    issuing requests.
    """
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_auth_verifier] = lambda: auth_verifier
    app.dependency_overrides[get_allowlist_repo] = lambda: allowlist_repo
    app.dependency_overrides[get_submission_repo] = lambda: submission_repo
    app.dependency_overrides[get_storage_service] = lambda: storage
    limiter.enabled = False
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
        limiter.enabled = True


@pytest.fixture
async def db_session_factory():
    """Session factory for repository/integration tests.

    Requires DATABASE_URL (postgresql+asyncpg://...). Skips (pytest.skip)
    when Postgres is not configured. Use @pytest.mark.requires_db to mark
    tests that need this fixture; run without DB via: pytest -m 'not requires_db'.
    """
    from app.domain.exceptions import ConfigurationError
    from app.infrastructure.persistence import database

    get_settings.cache_clear()
    try:
        factory = database.get_session_factory()
    except ConfigurationError:
        pytest.skip("Postgres not configured: set DATABASE_URL")
    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)
    yield factory
    await database.dispose_engine()

"""Tests for Settings defaults, aliases and validation."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings, get_settings


def test_defaults_do_not_require_upload_settings() -> None:
    settings = Settings(_env_file=None)
    assert settings.r2_region == "auto"
    assert settings.default_upload_folder == "stalls"
    assert settings.auth_backend == "supabase"


def test_public_base_url_reads_bucket_url_alias(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("R2_PUBLIC_BASE_URL", raising=False)
    monkeypatch.setenv("NEXT_PUBLIC_R2_BUCKET_URL", "https://pub.r2.dev/")
    assert Settings(_env_file=None).r2_public_base_url == "https://pub.r2.dev/"


def test_secrets_are_masked() -> None:
    settings = Settings(_env_file=None, r2_secret_access_key="s3cr3t")
    assert "s3cr3t" not in repr(settings)
    assert settings.r2_secret_access_key.get_secret_value() == "s3cr3t"


def test_unknown_auth_backend_rejected() -> None:
    with pytest.raises(ValidationError, match="auth_backend"):
        Settings(_env_file=None, auth_backend="ldap")


def test_upload_folder_normalized() -> None:
    assert Settings(_env_file=None, default_upload_folder="/media/").default_upload_folder == "media"
    assert Settings(_env_file=None, default_upload_folder="/").default_upload_folder == "stalls"


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
        monkeypatch.setenv("APP_NAME", "mela-test")
        get_settings.cache_clear()
        assert get_settings().app_name == "mela-test"
    finally:
        get_settings.cache_clear()

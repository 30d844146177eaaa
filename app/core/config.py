"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Values a flow needs (bucket name, public base URL,
database URL, auth service URL) are checked when that flow runs, so a
missing upload setting fails the upload path and not the whole process.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

AUTH_BACKENDS = ("supabase", "jwt")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Nothing here is required at load time; see module docstring.
    """

    # App
    app_name: str = "mela"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (managed Postgres holding allowlists and stall submissions)
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000"

    # Object storage (S3-compatible, e.g. Cloudflare R2)
    r2_endpoint: str | None = None
    r2_access_key_id: str | None = None
    r2_secret_access_key: SecretStr | None = None
    r2_bucket_name: str | None = None
    r2_region: str = "auto"
    r2_public_base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "r2_public_base_url", "next_public_r2_bucket_url"
        ),
    )
    max_upload_size: int = 25 * 1024 * 1024  # 25MB
    default_upload_folder: str = "stalls"

    # Auth: "supabase" asks the auth service for the user; "jwt" verifies locally.
    auth_backend: str = "supabase"
    supabase_url: str | None = None
    supabase_anon_key: SecretStr | None = None
    auth_jwt_secret: SecretStr | None = None
    auth_jwt_algorithm: str = "HS256"
    auth_jwt_audience: str | None = "authenticated"
    auth_http_timeout_seconds: float = 10.0

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_backends(self) -> "Settings":
        """Reject unknown auth backends; normalize the upload folder."""
        self.auth_backend = self.auth_backend.strip().lower()
        if self.auth_backend not in AUTH_BACKENDS:
            raise ValueError(
                f"auth_backend must be one of {', '.join(AUTH_BACKENDS)}, "
                f"got: {self.auth_backend!r}"
            )
        self.default_upload_folder = self.default_upload_folder.strip("/") or "stalls"
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()

"""Auth verifier factory: remote (auth service) or local JWT backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from app.application.interfaces.services import IAuthVerifier
from app.domain.exceptions import ConfigurationError

if TYPE_CHECKING:
    from app.core.config import Settings


class AuthVerifierFactory:
    """Factory for bearer-token verifiers based on configuration."""

    @staticmethod
    def create_auth_verifier(
        settings: "Settings",
        http_client: httpx.AsyncClient | None = None,
    ) -> IAuthVerifier:
        """Create verifier for settings.auth_backend.

        Raises:
            ConfigurationError: Required auth setting is missing.
        """
        if settings.auth_backend == "jwt":
            from app.infrastructure.security.jwt import JwtAuthVerifier

            if not settings.auth_jwt_secret or not settings.auth_jwt_secret.get_secret_value():
                raise ConfigurationError("AUTH_JWT_SECRET")
            return JwtAuthVerifier(
                secret=settings.auth_jwt_secret.get_secret_value(),
                algorithm=settings.auth_jwt_algorithm,
                audience=settings.auth_jwt_audience,
            )

        from app.infrastructure.external.auth.supabase_auth import SupabaseAuthVerifier

        if not settings.supabase_url:
            raise ConfigurationError("SUPABASE_URL")
        if not settings.supabase_anon_key or not settings.supabase_anon_key.get_secret_value():
            raise ConfigurationError("SUPABASE_ANON_KEY")
        if http_client is None:
            raise ConfigurationError("auth HTTP client")
        return SupabaseAuthVerifier(
            base_url=settings.supabase_url,
            api_key=settings.supabase_anon_key.get_secret_value(),
            http_client=http_client,
        )

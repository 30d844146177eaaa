"""Bearer-token verification against the Supabase auth service (GET /auth/v1/user)."""

from __future__ import annotations

import logging

import httpx

from app.application.dtos.auth import AuthUser
from app.infrastructure.exceptions import AuthServiceError

logger = logging.getLogger(__name__)


class SupabaseAuthVerifier:
    """Resolve an access token to its user by asking the auth service.

    The HTTP client is shared (created in the app lifespan) and injected;
    this class never closes it.
    """

    USER_PATH = "/auth/v1/user"

    def __init__(self, base_url: str, api_key: str, http_client: httpx.AsyncClient) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self._http = http_client

    async def get_user(self, token: str) -> AuthUser | None:
        """Return the token's user, None when the service rejects the token."""
        try:
            response = await self._http.get(
                f"{self.base_url}{self.USER_PATH}",
                headers={
                    "Authorization": f"Bearer {token}",
                    "apikey": self.api_key,
                },
            )
        except httpx.HTTPError as e:
            raise AuthServiceError(str(e)) from e

        if response.status_code >= 500:
            raise AuthServiceError(f"auth service returned {response.status_code}")
        if response.status_code != 200:
            logger.info("Auth service rejected token (status %d)", response.status_code)
            return None

        try:
            data = response.json()
        except ValueError as e:
            raise AuthServiceError("auth service returned invalid JSON") from e
        if not isinstance(data, dict) or not data.get("id"):
            return None
        email = data.get("email")
        return AuthUser(id=str(data["id"]), email=email if isinstance(email, str) else None)

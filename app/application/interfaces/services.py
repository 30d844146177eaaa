"""Service interfaces (ports) for the application layer.

Protocols define contracts for infrastructure services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.auth import AuthUser


class IAuthVerifier(Protocol):
    """Protocol for resolving a bearer token to a user."""

    async def get_user(self, token: str) -> AuthUser | None:
        """Return the user for token, or None if the token is rejected.

        Raises AuthServiceError if the auth service cannot be reached.
        """

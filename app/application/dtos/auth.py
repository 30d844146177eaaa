"""DTOs for bearer-token verification (no dependency on the auth client)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthUser:
    """User resolved from a bearer token. email may be missing on some accounts."""

    id: str
    email: str | None = None

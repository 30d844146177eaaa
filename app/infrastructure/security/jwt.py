"""Local verification of auth-service access tokens (HS256 JWTs).

Used when auth_backend is "jwt": the token is checked against the shared
JWT secret instead of calling the auth service.
"""

from typing import Any

from jose import JWTError, jwt

from app.application.dtos.auth import AuthUser


def verify_token(
    token: str,
    secret: str,
    algorithm: str = "HS256",
    audience: str | None = None,
) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp and sub. Raises ValueError if the token is
    invalid, expired, or missing required claims.

    Args:
        token: JWT string (e.g. from Authorization header).
        secret: Shared signing secret.
        algorithm: Signing algorithm.
        audience: Expected aud claim; not checked when None.

    Returns:
        Decoded payload dict.

    Raises:
        ValueError: If token is invalid, expired, or missing required claims.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            audience=audience,
            options={
                "require_exp": True,
                "require_sub": True,
                "verify_aud": audience is not None,
            },
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if "sub" not in payload:
        raise ValueError("Token missing required claim: sub")
    return payload


class JwtAuthVerifier:
    """IAuthVerifier backed by verify_token (no network call)."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        audience: str | None = None,
    ) -> None:
        self.secret = secret
        self.algorithm = algorithm
        self.audience = audience

    async def get_user(self, token: str) -> AuthUser | None:
        try:
            payload = verify_token(token, self.secret, self.algorithm, self.audience)
        except ValueError:
            return None
        email = payload.get("email")
        if not isinstance(email, str) or not email:
            email = None
        return AuthUser(id=str(payload["sub"]), email=email)

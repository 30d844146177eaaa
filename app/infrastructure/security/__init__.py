"""Security: local JWT verification of auth-service tokens."""

from app.infrastructure.security.jwt import JwtAuthVerifier, verify_token

__all__ = [
    "JwtAuthVerifier",
    "verify_token",
]

"""Auth: bearer-token verifiers (auth service over HTTP, or local JWT).

Implementations satisfy IAuthVerifier (get_user).
"""

from app.infrastructure.external.auth.factory import AuthVerifierFactory

__all__ = [
    "AuthVerifierFactory",
]

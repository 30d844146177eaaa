"""Domain exceptions for the Mela application.

Defines the failure kinds the upload and catalog flows can end in. These
exceptions are independent of infrastructure concerns. Presentation layer
maps them to HTTP responses in exception handlers.
"""

from typing import Any


class MelaException(Exception):
    """Base exception for all Mela application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. collaborator message).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(MelaException):
    """Raised when a deployment setting required by a flow is missing."""

    def __init__(self, setting: str) -> None:
        """Initialize with the missing setting name.

        Args:
            setting: Environment variable / settings field that is unset.
        """
        super().__init__(
            f"Missing {setting}",
            "CONFIGURATION_ERROR",
            {"setting": setting},
        )


class UnauthorizedException(MelaException):
    """Raised when the credential is missing or the auth service rejects it."""

    def __init__(self, message: str = "Invalid auth token") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ForbiddenException(MelaException):
    """Raised when the credential is valid but the caller is not entitled."""

    def __init__(self, message: str = "Email not authorized") -> None:
        super().__init__(message, "PERMISSION_DENIED")


class BadRequestException(MelaException):
    """Raised when request input is malformed or empty."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or parameter that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class UpstreamError(MelaException):
    """Raised when a collaborator (allowlist, submissions, storage, auth) fails.

    The collaborator's own message is kept in details["reason"] and is
    surfaced to the caller as the "details" field of the error body.
    """

    def __init__(
        self,
        message: str,
        reason: str | None = None,
        error_code: str = "UPSTREAM_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        merged: dict[str, Any] = dict(details or {})
        if reason is not None:
            merged["reason"] = reason
        super().__init__(message, error_code, merged)

    @property
    def reason(self) -> str | None:
        return self.details.get("reason")


class ResourceNotFoundException(MelaException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'stall', 'object').
            resource_id: The identifier that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )

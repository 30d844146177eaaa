"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses. Error bodies are {"error": message}, plus
"details" when an upstream collaborator supplied its own message.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import MelaException, UpstreamError
from app.middleware.request_id import current_request_id

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "CONFIGURATION_ERROR": 500,
    "AUTHENTICATION_ERROR": 401,
    "PERMISSION_DENIED": 403,
    "VALIDATION_ERROR": 400,
    "RESOURCE_NOT_FOUND": 404,
    "UPSTREAM_ERROR": 500,
    "STORAGE_UPLOAD_ERROR": 500,
    "STORAGE_DOWNLOAD_ERROR": 500,
    "AUTH_SERVICE_ERROR": 500,
}


def status_for(exc: MelaException) -> int:
    """HTTP status for a domain exception (500 for unknown codes)."""
    return _ERROR_CODE_STATUS.get(exc.error_code, 500)


def error_body(exc: MelaException) -> dict[str, Any]:
    """Render the JSON error body for a domain exception."""
    body: dict[str, Any] = {"error": exc.message}
    if isinstance(exc, UpstreamError) and exc.reason:
        body["details"] = exc.reason
    return body


def _mela_exception_handler(request: Request, exc: MelaException) -> JSONResponse:
    """Return JSON error body with the status mapped from error_code."""
    status = status_for(exc)
    if status >= 500:
        logger.error(
            "[%s] %s %s failed: %s (%s) %s",
            current_request_id(),
            request.method,
            request.url.path,
            exc.message,
            exc.error_code,
            exc.details,
        )
    return JSONResponse(status_code=status, content=error_body(exc))


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "Request validation failed",
            "details": exc.errors(),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("[%s] Unhandled exception: %s", current_request_id(), exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(status_code=500, content={"error": detail})


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: MelaException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(MelaException, _mela_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)

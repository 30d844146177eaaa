"""Request ID middleware.

Generates or forwards X-Request-ID, echoes it on the response and exposes
it to log lines through current_request_id(). Client-provided values are
sanitized (length + character set) to prevent log injection.
Uses raw ASGI (no BaseHTTPMiddleware) so streamed responses pass through.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Callable

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def current_request_id() -> str | None:
    """Request ID of the request being handled, or None outside a request."""
    return _request_id.get()


def _get_header(scope: dict, name: str) -> str | None:
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def sanitize_request_id(raw: str | None) -> str:
    """Return raw (stripped) if it is a safe ID, else a fresh UUID4."""
    candidate = (raw or "").strip()
    if not REQUEST_ID_ALLOWED_PATTERN.match(candidate):
        return str(uuid.uuid4())
    return candidate


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request ID header on each request and response. Raw ASGI."""
    header_b = header_name.lower().encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_request_id(_get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        token = _request_id.set(request_id)

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = [h for h in message.get("headers", []) if h[0].lower() != header_b]
                headers.append((header_b, request_id.encode()))
                message["headers"] = headers
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            _request_id.reset(token)

    return asgi_app

"""Security headers middleware.

Adds common security-related response headers (CSP, HSTS, X-Content-Type-Options, etc.).
Headers a route already set win, so HTML pages can ship their own CSP.
The interactive docs load their assets from a CDN and get no CSP here.
Uses raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

DEFAULT_HEADERS = {
    "Content-Security-Policy": "default-src 'none'",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
}

DOCS_PATH_PREFIXES = ("/docs", "/redoc")


def SecurityHeadersMiddleware(
    app: Callable,
    headers: dict[str, str] | None = None,
    docs_prefixes: tuple[str, ...] = DOCS_PATH_PREFIXES,
) -> Callable:
    """Set security headers on all responses unless already present. Raw ASGI."""
    resolved = headers if headers is not None else DEFAULT_HEADERS.copy()
    header_list = [(k.lower().encode(), v.encode()) for k, v in resolved.items()]
    docs_headers = [h for h in header_list if h[0] != b"content-security-policy"]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        path = scope.get("path", "")
        to_add = docs_headers if path.startswith(docs_prefixes) else header_list

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                seen = {h[0].lower() for h in headers}
                headers.extend(h for h in to_add if h[0] not in seen)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app

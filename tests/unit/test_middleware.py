"""Unit tests for the raw ASGI middleware (size limit, request ID, security headers)."""

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from httpx import ASGITransport, AsyncClient

from app.middleware import (
    RequestIDMiddleware,
    RequestSizeLimitMiddleware,
    SecurityHeadersMiddleware,
)
from app.middleware.request_id import current_request_id, sanitize_request_id


def _echo_app() -> FastAPI:
    app = FastAPI()

    @app.post("/echo")
    async def echo(request: Request) -> dict:
        body = await request.body()
        return {"size": len(body), "request_id": current_request_id()}

    @app.get("/page", response_class=HTMLResponse)
    def page() -> HTMLResponse:
        return HTMLResponse("<p>hi</p>", headers={"Content-Security-Policy": "default-src 'self'"})

    @app.get("/docs-like")
    def docs_like() -> dict:
        return {}

    return app


def _client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


async def test_body_over_limit_is_413() -> None:
    app = _echo_app()
    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=8)
    async with _client(app) as client:
        response = await client.post("/echo", content=b"123456789")
    assert response.status_code == 413
    assert response.json()["error"] == "Request body too large"


async def test_chunked_body_over_limit_is_413() -> None:
    async def chunks():
        yield b"12345"
        yield b"67890"

    app = _echo_app()
    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=8)
    async with _client(app) as client:
        response = await client.post("/echo", content=chunks())
    assert response.status_code == 413


async def test_chunked_body_within_limit_is_replayed() -> None:
    async def chunks():
        yield b"1234"
        yield b"5678"

    app = _echo_app()
    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=8)
    async with _client(app) as client:
        response = await client.post("/echo", content=chunks())
    assert response.status_code == 200
    assert response.json()["size"] == 8


async def test_request_id_visible_to_handlers() -> None:
    app = _echo_app()
    app.add_middleware(RequestIDMiddleware, header_name="X-Request-ID")
    async with _client(app) as client:
        response = await client.post("/echo", content=b"x", headers={"X-Request-ID": "req-1"})
    assert response.json()["request_id"] == "req-1"
    assert response.headers["x-request-id"] == "req-1"
    assert current_request_id() is None


def test_sanitize_request_id() -> None:
    assert sanitize_request_id(" abc_1 ") == "abc_1"
    assert sanitize_request_id("x" * 65) != "x" * 65
    assert len(sanitize_request_id(None)) == 36


async def test_security_headers_do_not_override_route_csp() -> None:
    app = _echo_app()
    app.add_middleware(SecurityHeadersMiddleware, docs_prefixes=("/docs-like",))
    async with _client(app) as client:
        page = await client.get("/page")
        docs = await client.get("/docs-like")
    assert page.headers["content-security-policy"] == "default-src 'self'"
    assert page.headers["x-frame-options"] == "DENY"
    assert "content-security-policy" not in docs.headers
    assert docs.headers["x-content-type-options"] == "nosniff"

"""Request body size limit middleware.

Rejects requests whose body exceeds max_upload_size with 413. Declared
Content-Length is checked up front; bodies without one (chunked) are
buffered up to the limit and replayed to the app.
Uses raw ASGI (no BaseHTTPMiddleware).
"""

import json
from typing import Callable


def _get_header(scope: dict, name: str) -> str | None:
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


async def _send_413(send: Callable, max_bytes: int) -> None:
    body = json.dumps(
        {
            "error": "Request body too large",
            "details": f"Request body must be at most {max_bytes} bytes",
        }
    ).encode()
    await send({
        "type": "http.response.start",
        "status": 413,
        "headers": [
            (b"content-type", b"application/json"),
            (b"content-length", str(len(body)).encode()),
        ],
    })
    await send({"type": "http.response.body", "body": body, "more_body": False})


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    """Reject requests whose body exceeds max_bytes (Content-Length or chunked). Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        declared = _get_header(scope, "content-length")
        if declared is not None:
            if declared.strip().isdigit() and int(declared) > max_bytes:
                await _send_413(send, max_bytes)
                return
            await app(scope, receive, send)
            return

        chunks: list[bytes] = []
        total = 0
        while True:
            message = await receive()
            if message["type"] == "http.disconnect":
                return
            if message["type"] != "http.request":
                continue
            chunk = message.get("body", b"")
            total += len(chunk)
            if total > max_bytes:
                await _send_413(send, max_bytes)
                return
            chunks.append(chunk)
            if not message.get("more_body", False):
                break

        body = b"".join(chunks)
        delivered = False

        async def replay() -> dict:
            nonlocal delivered
            if delivered:
                return await receive()
            delivered = True
            return {"type": "http.request", "body": body, "more_body": False}

        await app(scope, replay, send)

    return asgi_app

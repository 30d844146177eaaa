"""Application lifespan: startup and shutdown.

Single place for startup/shutdown of process-wide clients. Used by
main.py; no business logic here, only wiring of infrastructure (auth
HTTP client, telemetry flush, DB engine dispose). Telemetry itself is
configured in create_app(), before the middleware stack is built.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.persistence.database import dispose_engine
from app.shared.telemetry.telemetry import get_telemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: shared auth HTTP client. Shutdown: HTTP client close,
    telemetry shutdown, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    # Shared HTTP client for auth service calls (connection reuse).
    app.state.auth_http_client = httpx.AsyncClient(
        timeout=settings.auth_http_timeout_seconds
    )
    app.state.storage_service = None

    yield

    # ---- Shutdown ----
    if getattr(app.state, "auth_http_client", None) is not None:
        await app.state.auth_http_client.aclose()
        app.state.auth_http_client = None
        logger.info("Auth HTTP client closed")

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()

    await dispose_engine()

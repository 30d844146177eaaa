"""API router aggregation.

Includes all JSON endpoint modules under /api with consistent prefix and
tags. All routes use dependencies from app.api.dependencies (no manual
repo/service construction). HTML pages are a separate router mounted at /.
"""

from fastapi import APIRouter

from app.api.endpoints import health, media, pages, public_clubs, stalls, upload

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(upload.router, prefix="/upload", tags=["upload"])
api_router.include_router(public_clubs.router, prefix="/public", tags=["catalog"])
api_router.include_router(media.router, prefix="/media", tags=["media"])
api_router.include_router(stalls.router, prefix="/stalls", tags=["stalls"])

pages_router = pages.router

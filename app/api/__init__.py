"""HTTP presentation layer: JSON API routers, dependencies and page routes."""

from app.api.router import api_router, pages_router

__all__ = ["api_router", "pages_router"]

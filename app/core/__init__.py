"""Core: config, exception handlers, limiter, and application lifespan.

Single place for settings and app-wide wiring.
"""

from app.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]

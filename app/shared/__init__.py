"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import utc_now, utc_now_ms

__all__ = [
    "utc_now",
    "utc_now_ms",
]

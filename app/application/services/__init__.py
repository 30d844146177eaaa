"""Application services: storage key derivation and catalog filtering (pure functions)."""

from app.application.services.catalog_filter import (
    CATALOG_CATEGORIES,
    card_href,
    card_image,
    filter_stalls,
    media_url,
    normalize_category,
)
from app.application.services.storage_keys import (
    build_public_url,
    build_storage_key,
    sanitize_file_name,
)

__all__ = [
    "CATALOG_CATEGORIES",
    "build_public_url",
    "build_storage_key",
    "card_href",
    "card_image",
    "filter_stalls",
    "media_url",
    "normalize_category",
    "sanitize_file_name",
]

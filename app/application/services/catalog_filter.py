"""Catalog filtering and card presentation helpers (pure functions).

Filtering is boolean: a stall either matches the active category and the
search query or it does not. There is no ranking.
"""

from collections.abc import Iterable
from urllib.parse import quote

from app.application.dtos.stall import StallPayload
from app.domain.enums import ALL_CATEGORIES, StallCategory

CATALOG_CATEGORIES: tuple[str, ...] = (ALL_CATEGORIES, *StallCategory.values())

_FALLBACK_BANNERS = {
    StallCategory.ACCESSORIES.value: "/images/accessories.png",
    StallCategory.GAMES.value: "/images/games.png",
}
_DEFAULT_BANNER = "/images/food.png"


def normalize_category(value: str | None) -> str:
    """Lowercase value; anything outside CATALOG_CATEGORIES becomes "all"."""
    category = (value or "").strip().lower()
    return category if category in CATALOG_CATEGORIES else ALL_CATEGORIES


def normalize_query(value: str | None) -> str:
    return (value or "").strip().lower()


def search_text(stall: StallPayload) -> str:
    """Lowercased haystack: owner, name, description, highlights, offers, best sellers, items."""
    parts = [
        stall.owner_name,
        stall.name,
        stall.description,
        *(stall.highlights or []),
        *(stall.offers or []),
        *(stall.best_sellers or []),
        *stall.item_texts(),
    ]
    return " ".join(p for p in parts if p).lower()


def matches_category(stall: StallPayload, category: str) -> bool:
    if category == ALL_CATEGORIES:
        return True
    return (stall.category or "").lower() == category


def filter_stalls(
    stalls: Iterable[StallPayload],
    category: str | None = ALL_CATEGORIES,
    query: str | None = "",
) -> list[StallPayload]:
    """Keep stalls in category whose search text contains query (case-insensitive).

    Args:
        stalls: Loaded catalog.
        category: One of CATALOG_CATEGORIES; unknown values act as "all".
        query: Free text; blank matches everything.

    Returns:
        Matching stalls in their original order.
    """
    active = normalize_category(category)
    needle = normalize_query(query)
    return [
        s
        for s in stalls
        if matches_category(s, active) and (not needle or needle in search_text(s))
    ]


def fallback_banner(category: str | None) -> str:
    return _FALLBACK_BANNERS.get((category or "").lower(), _DEFAULT_BANNER)


def media_url(value: str, bucket_base_url: str | None) -> str:
    """Route images hosted on the public bucket through /api/media; leave others as-is."""
    if not bucket_base_url:
        return value
    base = bucket_base_url.rstrip("/")
    if value.startswith(base):
        key = value[len(base) + 1 :]
        return f"/api/media?key={quote(key, safe='')}"
    return value


def card_image(stall: StallPayload, bucket_base_url: str | None = None) -> str:
    """Logo, else banner, else the category fallback; bucket URLs go through the media proxy."""
    image = (
        (stall.logo_image or "").strip()
        or (stall.banner_image or "").strip()
        or fallback_banner(stall.category)
    )
    return media_url(image, bucket_base_url)


def card_href(stall: StallPayload) -> str:
    return f"/{(stall.category or '').lower()}/{(stall.slug or '').lower()}"

"""Unit tests for catalog filtering and card helpers."""

from app.application.dtos.stall import StallPayload
from app.application.services.catalog_filter import (
    card_href,
    card_image,
    filter_stalls,
    media_url,
    normalize_category,
    search_text,
)

CHAAT = StallPayload.from_raw(
    {
        "name": "Chaat Corner",
        "slug": "chaat",
        "category": "Food",
        "ownerName": "Meera Iyer",
        "highlights": ["Fresh daily"],
        "items": [{"name": "Pani Puri", "price": "₹50"}, "Bhel"],
    }
)
RINGS = StallPayload.from_raw(
    {"name": "Ring Toss", "slug": "rings", "category": "games", "offers": ["2 for 1"]}
)
BEADS = StallPayload.from_raw(
    {"name": "Beads", "category": "accessories", "bestSellers": ["Anklet"]}
)
STALLS = [CHAAT, RINGS, BEADS]


def test_all_category_matches_everything() -> None:
    assert filter_stalls(STALLS, "all", "") == STALLS


def test_category_match_is_case_insensitive() -> None:
    assert filter_stalls(STALLS, "FOOD", None) == [CHAAT]


def test_unknown_category_acts_as_all() -> None:
    assert normalize_category("books") == "all"
    assert filter_stalls(STALLS, "books", "") == STALLS


def test_search_covers_listed_fields() -> None:
    assert filter_stalls(STALLS, "all", "meera") == [CHAAT]
    assert filter_stalls(STALLS, "all", "fresh") == [CHAAT]
    assert filter_stalls(STALLS, "all", "2 for") == [RINGS]
    assert filter_stalls(STALLS, "all", "ANKLET") == [BEADS]
    assert filter_stalls(STALLS, "all", "bhel") == [CHAAT]


def test_item_objects_contribute_name_and_price() -> None:
    assert "pani puri ₹50" in search_text(CHAAT)
    assert filter_stalls(STALLS, "all", "puri ₹50") == [CHAAT]


def test_numeric_prices_are_searchable() -> None:
    stall = StallPayload.from_raw({"name": "Chaat", "items": [{"name": "Pani Puri", "price": 50}]})
    assert filter_stalls([stall], "all", "pani puri 50") == [stall]


def test_query_is_trimmed_and_blank_matches_all() -> None:
    assert filter_stalls(STALLS, "all", "   ") == STALLS
    assert filter_stalls(STALLS, "food", "  chaat  ") == [CHAAT]


def test_no_match_is_empty() -> None:
    assert filter_stalls(STALLS, "games", "chaat") == []


def test_stall_without_category_only_matches_all() -> None:
    bare = StallPayload.from_raw({"name": "Mystery"})
    assert filter_stalls([bare], "food", "") == []
    assert filter_stalls([bare], "all", "") == [bare]


class TestCardImage:
    def test_logo_preferred_over_banner(self) -> None:
        stall = StallPayload(logo_image=" /l.png ", banner_image="/b.png", category="food")
        assert card_image(stall) == "/l.png"

    def test_blank_logo_falls_back_to_banner(self) -> None:
        stall = StallPayload(logo_image="  ", banner_image="/b.png")
        assert card_image(stall) == "/b.png"

    def test_category_fallbacks(self) -> None:
        assert card_image(StallPayload(category="Accessories")) == "/images/accessories.png"
        assert card_image(StallPayload(category="games")) == "/images/games.png"
        assert card_image(StallPayload(category="food")) == "/images/food.png"
        assert card_image(StallPayload()) == "/images/food.png"

    def test_bucket_urls_rewritten_to_media_proxy(self) -> None:
        stall = StallPayload(logo_image="https://cdn.x/stalls/a b.png")
        assert card_image(stall, "https://cdn.x/") == "/api/media?key=stalls%2Fa%20b.png"

    def test_other_urls_untouched(self) -> None:
        assert media_url("https://elsewhere/x.png", "https://cdn.x") == "https://elsewhere/x.png"
        assert media_url("/images/food.png", None) == "/images/food.png"


def test_card_href_lowercased() -> None:
    assert card_href(StallPayload(category="Food", slug="Chaat-Corner")) == "/food/chaat-corner"

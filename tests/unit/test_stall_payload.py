"""Unit tests for the loosely typed StallPayload read model."""

from app.application.dtos.stall import StallItem, StallPayload


def test_camel_case_keys_are_read() -> None:
    stall = StallPayload.from_raw(
        {"ownerName": "Meera", "bannerImage": "/b.png", "logoImage": "/l.png", "bestSellers": ["Tea"]}
    )
    assert stall.owner_name == "Meera"
    assert stall.banner_image == "/b.png"
    assert stall.logo_image == "/l.png"
    assert stall.best_sellers == ["Tea"]


def test_malformed_fields_are_absent() -> None:
    stall = StallPayload.from_raw(
        {"name": 42, "category": ["food"], "highlights": "not a list", "items": {"name": "x"}}
    )
    assert stall.name is None
    assert stall.category is None
    assert stall.highlights is None
    assert stall.items is None


def test_non_string_list_entries_are_dropped() -> None:
    stall = StallPayload.from_raw({"offers": ["10% off", 3, None], "items": ["Tea", 5, {"name": "Cake"}]})
    assert stall.offers == ["10% off"]
    assert stall.item_texts() == ["Tea", "Cake"]


def test_unknown_keys_are_kept() -> None:
    stall = StallPayload.from_raw({"name": "A", "stallNumber": 12})
    assert stall.model_extra == {"stallNumber": 12}


def test_non_object_payload_is_empty() -> None:
    for raw in (None, "text", [1, 2], 3):
        assert StallPayload.from_raw(raw) == StallPayload()


def test_item_text_omits_missing_parts() -> None:
    assert StallItem(name="Tea", price="₹10").text() == "Tea ₹10"
    assert StallItem(name="Tea").text() == "Tea"
    assert StallItem(price="₹10").text() == "₹10"
    assert StallItem.model_validate({"name": ["Tea"], "price": "₹5"}).text() == "₹5"


def test_numeric_item_parts_become_text() -> None:
    stall = StallPayload.from_raw(
        {"items": [{"name": "Pani Puri", "price": 50}, {"name": "Lassi", "price": 40.0}, {"name": "Tea", "price": 12.5}]}
    )
    assert stall.item_texts() == ["Pani Puri 50", "Lassi 40", "Tea 12.5"]


def test_boolean_item_parts_are_dropped() -> None:
    assert StallItem.model_validate({"name": "Tea", "price": True}).text() == "Tea"

"""DTOs for stall submissions and the stall display payload (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


@dataclass(frozen=True)
class StallSubmissionResult:
    """Stall submission read-model. payload is the opaque display record."""

    owner_email: str
    stall_slug: str
    payload: Any
    created_at: datetime


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _item_part(value: Any) -> str | None:
    # 50 and 50.0 both render as "50".
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return _str_or_none(value)


class StallItem(BaseModel):
    """Menu item: {name?, price?}. Numbers become text; other non-string parts are dropped."""

    name: str | None = None
    price: str | None = None

    @field_validator("name", "price", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str | None:
        return _item_part(v)

    def text(self) -> str:
        """Search/display text: "name price" with missing parts omitted."""
        return f"{self.name or ''} {self.price or ''}".strip()


class StallPayload(BaseModel):
    """Loosely typed stall display record read from a submission payload.

    Every field is optional. A missing or malformed field is treated as
    absent, never as an error. Unknown keys are kept.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    name: str | None = None
    slug: str | None = None
    category: str | None = None
    description: str | None = None
    banner_image: str | None = None
    logo_image: str | None = None
    images: list[str] | None = None
    owner_name: str | None = None
    owner_phone: str | None = None
    instagram: str | None = None
    highlights: list[str] | None = None
    offers: list[str] | None = None
    best_sellers: list[str] | None = None
    items: list[StallItem | str] | None = None

    @field_validator(
        "name",
        "slug",
        "category",
        "description",
        "banner_image",
        "logo_image",
        "owner_name",
        "owner_phone",
        "instagram",
        mode="before",
    )
    @classmethod
    def _text(cls, v: Any) -> str | None:
        return _str_or_none(v)

    @field_validator("images", "highlights", "offers", "best_sellers", mode="before")
    @classmethod
    def _text_list(cls, v: Any) -> list[str] | None:
        if not isinstance(v, list):
            return None
        return [s for s in v if isinstance(s, str)]

    @field_validator("items", mode="before")
    @classmethod
    def _items(cls, v: Any) -> list[Any] | None:
        if not isinstance(v, list):
            return None
        return [i for i in v if isinstance(i, (str, dict))]

    @classmethod
    def from_raw(cls, payload: Any) -> "StallPayload":
        """Build from an opaque payload; anything but a JSON object yields an empty record."""
        if not isinstance(payload, dict):
            return cls()
        return cls.model_validate(payload)

    def item_texts(self) -> list[str]:
        """Item search text: strings as-is, objects as "name price"."""
        return [i if isinstance(i, str) else i.text() for i in self.items or []]

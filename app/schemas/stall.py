"""Stall catalog API schemas (club submissions and sample stalls)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domain.sample_stalls import SampleStall


class ClubStallsResponse(BaseModel):
    """Response for GET /api/public/clubs. Payloads are returned verbatim."""

    stalls: list[Any] = Field(default_factory=list)


class SampleItemResponse(BaseModel):
    name: str
    price: str


class SampleStallResponse(BaseModel):
    """One sample stall, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    slug: str
    category: str
    description: str
    banner_image: str
    images: list[str]
    owner_name: str
    owner_phone: str
    instagram: str | None = None
    items: list[SampleItemResponse] | None = None

    @classmethod
    def from_sample(cls, stall: SampleStall) -> "SampleStallResponse":
        return cls(
            id=stall.id,
            name=stall.name,
            slug=stall.slug,
            category=stall.category.value,
            description=stall.description,
            banner_image=stall.banner_image,
            images=list(stall.images),
            owner_name=stall.owner_name,
            owner_phone=stall.owner_phone,
            instagram=stall.instagram,
            items=[SampleItemResponse(name=i.name, price=i.price) for i in stall.items]
            or None,
        )


class SampleStallListResponse(BaseModel):
    """Response for GET /api/stalls."""

    stalls: list[SampleStallResponse] = Field(default_factory=list)

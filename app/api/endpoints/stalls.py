"""Built-in sample stalls (read-only)."""

from typing import Annotated

from fastapi import APIRouter, Query

from app.domain.exceptions import ResourceNotFoundException
from app.domain.sample_stalls import SAMPLE_STALLS, get_stall_by_slug, get_stalls_by_category
from app.schemas.stall import SampleStallListResponse, SampleStallResponse

router = APIRouter()


@router.get("", response_model=SampleStallListResponse)
def list_sample_stalls(
    category: Annotated[str | None, Query()] = None,
) -> SampleStallListResponse:
    """All sample stalls, or those in one category."""
    stalls = get_stalls_by_category(category) if category else list(SAMPLE_STALLS)
    return SampleStallListResponse(
        stalls=[SampleStallResponse.from_sample(s) for s in stalls]
    )


@router.get("/{slug}", response_model=SampleStallResponse)
def get_sample_stall(slug: str) -> SampleStallResponse:
    stall = get_stall_by_slug(slug)
    if stall is None:
        raise ResourceNotFoundException("stall", slug)
    return SampleStallResponse.from_sample(stall)

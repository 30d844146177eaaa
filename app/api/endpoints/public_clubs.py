"""Public club catalog: stall submissions owned by club accounts."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_club_catalog_service
from app.application.use_cases import ClubCatalogService
from app.schemas.stall import ClubStallsResponse

router = APIRouter()


@router.get(
    "/clubs",
    response_model=ClubStallsResponse,
    responses={500: {"description": "Club allowlist or submissions could not be loaded"}},
)
async def list_club_stalls(
    catalog: Annotated[ClubCatalogService, Depends(get_club_catalog_service)],
    category: Annotated[str | None, Query()] = None,
) -> ClubStallsResponse:
    """List club stall payloads, newest first, optionally for one category."""
    stalls = await catalog.list_club_stalls(category)
    return ClubStallsResponse(stalls=stalls)

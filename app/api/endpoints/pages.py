"""Server-rendered HTML pages: landing page, club catalog and stall detail."""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from app.api.dependencies import get_club_catalog_service
from app.application.dtos.stall import StallPayload
from app.application.services.catalog_filter import normalize_category
from app.application.use_cases import ClubCatalogService, ClubCatalogView
from app.core.config import Settings, get_settings
from app.domain.enums import StallCategory
from app.domain.exceptions import ResourceNotFoundException
from app.domain.sample_stalls import get_stall_by_slug
from app.pages import (
    PAGE_CSP,
    CatalogCard,
    render_clubs_page,
    render_root_page,
    render_stall_page,
)

router = APIRouter()

_PAGE_HEADERS = {"Content-Security-Policy": PAGE_CSP}


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def root(settings: Annotated[Settings, Depends(get_settings)]) -> HTMLResponse:
    """Landing page with links to the catalog and API documentation."""
    return HTMLResponse(content=render_root_page(settings.app_name), headers=_PAGE_HEADERS)


@router.get("/clubs", response_class=HTMLResponse, include_in_schema=False)
async def clubs_page(
    catalog: Annotated[ClubCatalogService, Depends(get_club_catalog_service)],
    settings: Annotated[Settings, Depends(get_settings)],
    category: Annotated[str | None, Query()] = None,
    q: Annotated[str | None, Query()] = None,
) -> HTMLResponse:
    """Club catalog filtered by category tab and search text.

    Load failures render as an error message in the page, not as a JSON error.
    """
    view = ClubCatalogView(catalog)
    await view.load()
    active = normalize_category(category)
    query = (q or "").strip()
    cards = [
        CatalogCard.from_stall(s, settings.r2_public_base_url)
        for s in view.visible(active, query)
    ]
    html = render_clubs_page(
        status=view.status,
        cards=cards,
        category=active,
        query=query,
        error_message=view.error_message,
    )
    return HTMLResponse(content=html, headers=_PAGE_HEADERS)


def _stall_page(category: StallCategory) -> Callable[..., Awaitable[HTMLResponse]]:
    async def stall_page(
        slug: str,
        catalog: Annotated[ClubCatalogService, Depends(get_club_catalog_service)],
        settings: Annotated[Settings, Depends(get_settings)],
    ) -> HTMLResponse:
        """Club stall by slug, else the sample stall with that slug; 404 otherwise."""
        stall = await catalog.find_club_stall(category.value, slug)
        if stall is None:
            sample = get_stall_by_slug(slug.lower())
            if sample is not None and sample.category is category:
                stall = StallPayload.from_raw(sample.to_payload())
        if stall is None:
            raise ResourceNotFoundException("stall", slug)
        html = render_stall_page(stall, settings.r2_public_base_url)
        return HTMLResponse(content=html, headers=_PAGE_HEADERS)

    return stall_page


# Card links are /{category}/{slug}; only known categories are routed.
for _category in StallCategory:
    router.add_api_route(
        f"/{_category.value}/{{slug}}",
        _stall_page(_category),
        methods=["GET"],
        response_class=HTMLResponse,
        include_in_schema=False,
        name=f"{_category.value}_stall_page",
    )

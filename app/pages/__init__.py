"""Server-rendered HTML pages (landing page, club catalog and stall detail)."""

from app.pages.clubs import CatalogCard, render_clubs_page
from app.pages.root import PAGE_CSP, render_root_page
from app.pages.stall import render_stall_page

__all__ = [
    "CatalogCard",
    "PAGE_CSP",
    "render_clubs_page",
    "render_root_page",
    "render_stall_page",
]

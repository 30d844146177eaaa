"""Club catalog page: category tabs, search box and stall cards."""

from dataclasses import dataclass
from html import escape
from urllib.parse import urlencode

from app.application.dtos.stall import StallPayload
from app.application.services.catalog_filter import (
    CATALOG_CATEGORIES,
    card_href,
    card_image,
)
from app.domain.enums import ALL_CATEGORIES, CatalogStatus
from app.pages.root import BASE_STYLES

LOADING_MESSAGE = "Loading club stalls..."
EMPTY_MESSAGE = "No club stalls match yet."


@dataclass(frozen=True)
class CatalogCard:
    """Display fields of one stall card."""

    title: str
    owner_name: str
    description: str
    category: str
    image: str
    href: str

    @classmethod
    def from_stall(cls, stall: StallPayload, bucket_base_url: str | None = None) -> "CatalogCard":
        return cls(
            title=stall.name or "Untitled stall",
            owner_name=stall.owner_name or "",
            description=stall.description or "",
            category=(stall.category or "").lower(),
            image=card_image(stall, bucket_base_url),
            href=card_href(stall),
        )


def _tab_href(category: str, query: str) -> str:
    params = {"category": category}
    if query:
        params["q"] = query
    return f"/clubs?{urlencode(params)}"


def _render_tabs(active: str, query: str) -> str:
    tabs = []
    for category in CATALOG_CATEGORIES:
        cls = "tab active" if category == active else "tab"
        tabs.append(
            f'<a class="{cls}" href="{escape(_tab_href(category, query))}">'
            f"{escape(category.title())}</a>"
        )
    return "\n".join(tabs)


def _render_card(card: CatalogCard) -> str:
    owner = f'<p class="owner">by {escape(card.owner_name)}</p>' if card.owner_name else ""
    return f"""
        <a class="stall" href="{escape(card.href)}">
            <img src="{escape(card.image)}" alt="{escape(card.title)}" loading="lazy">
            <div class="body">
                <span class="badge">{escape(card.category or "stall")}</span>
                <h3>{escape(card.title)}</h3>
                {owner}
                <p>{escape(card.description)}</p>
            </div>
        </a>"""


def _render_content(
    status: CatalogStatus,
    cards: list[CatalogCard],
    error_message: str | None,
) -> str:
    if status is CatalogStatus.ERROR:
        return f'<p class="message error" role="alert">{escape(error_message or "")}</p>'
    if status is not CatalogStatus.READY:
        return f'<p class="message">{LOADING_MESSAGE}</p>'
    if not cards:
        return f'<p class="message">{EMPTY_MESSAGE}</p>'
    return '<div class="grid">' + "".join(_render_card(c) for c in cards) + "\n    </div>"


def render_clubs_page(
    *,
    status: CatalogStatus,
    cards: list[CatalogCard],
    category: str = ALL_CATEGORIES,
    query: str = "",
    error_message: str | None = None,
) -> str:
    """Return HTML for the club catalog.

    Args:
        status: Load state of the catalog view.
        cards: Cards for the stalls that passed the filter.
        category: Active category tab.
        query: Search text as typed (echoed back into the search box).
        error_message: Shown instead of the grid when status is ERROR.
    """
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Club stalls · Mela</title>
    <style>{BASE_STYLES}
        .tabs {{ display: flex; gap: 0.5rem; flex-wrap: wrap; justify-content: center; }}
        .tab {{
            padding: 0.4rem 1rem;
            border-radius: 999px;
            border: 1px solid #e6cfae;
            text-decoration: none;
            background: #fff;
        }}
        .tab.active {{ background: #2b1d0e; color: #fff; border-color: #2b1d0e; }}
        form.search {{ display: flex; gap: 0.5rem; margin: 1.25rem auto; max-width: 480px; }}
        form.search input[type=search] {{
            flex: 1;
            padding: 0.6rem 0.9rem;
            border-radius: 999px;
            border: 1px solid #e6cfae;
        }}
        .grid {{
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(220px, 1fr));
            gap: 1rem;
        }}
        .stall {{
            background: #fff;
            border: 1px solid #f0e0c8;
            border-radius: 1rem;
            overflow: hidden;
            text-decoration: none;
        }}
        .stall img {{ width: 100%; height: 150px; object-fit: cover; display: block; }}
        .stall .body {{ padding: 0.9rem 1rem; }}
        .stall h3 {{ margin: 0.4rem 0 0.2rem; }}
        .stall p {{ margin: 0.2rem 0; color: #6b5236; font-size: 0.9rem; }}
        .badge {{ font-size: 0.7rem; text-transform: uppercase; letter-spacing: 0.08em; color: #e4572e; }}
        .message {{ text-align: center; color: #8a6a45; }}
        .message.error {{ color: #b3261e; }}
    </style>
</head>
<body>
    <div class="wrap">
        <header class="hero">
            <h1>Club stalls</h1>
            <p class="tagline">Stalls run by clubs at the Mela.</p>
        </header>
        <nav class="tabs" aria-label="Categories">
{_render_tabs(category, query)}
        </nav>
        <form class="search" method="get" action="/clubs" role="search">
            <input type="hidden" name="category" value="{escape(category)}">
            <input type="search" name="q" value="{escape(query)}" placeholder="Search stalls, owners, items">
            <button class="btn" type="submit">Search</button>
        </form>
        {_render_content(status, cards, error_message)}
        <footer class="foot"><a href="/">Mela</a></footer>
    </div>
</body>
</html>
""".strip()

"""Stall detail page, the target of catalog card links."""

from html import escape
from urllib.parse import urlencode

from app.application.dtos.stall import StallPayload
from app.application.services.catalog_filter import card_image, media_url
from app.pages.root import BASE_STYLES


def _list_section(title: str, entries: list[str]) -> str:
    entries = [e.strip() for e in entries if e.strip()]
    if not entries:
        return ""
    rows = "".join(f"<li>{escape(e)}</li>" for e in entries)
    return f"<section><h2>{escape(title)}</h2><ul>{rows}</ul></section>"


def render_stall_page(stall: StallPayload, bucket_base_url: str | None = None) -> str:
    """Return HTML for one stall: banner, owner, description, items and offers."""
    category = (stall.category or "").lower()
    title = stall.name or "Untitled stall"
    owner = f'<p class="tagline">by {escape(stall.owner_name)}</p>' if stall.owner_name else ""
    contact = " · ".join(
        escape(part) for part in (stall.owner_phone, stall.instagram) if part
    )
    gallery = "".join(
        f'<img src="{escape(media_url(image, bucket_base_url))}" alt="{escape(title)}" loading="lazy">'
        for image in stall.images or []
    )
    back = f"/clubs?{urlencode({'category': category})}" if category else "/clubs"
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)} · Mela</title>
    <style>{BASE_STYLES}
        .banner {{ width: 100%; max-height: 320px; object-fit: cover; border-radius: 1rem; }}
        .badge {{ font-size: 0.75rem; text-transform: uppercase; letter-spacing: 0.08em; color: #e4572e; }}
        .gallery {{ display: flex; gap: 0.5rem; flex-wrap: wrap; margin-top: 1rem; }}
        .gallery img {{ width: 140px; height: 100px; object-fit: cover; border-radius: 0.5rem; }}
        section h2 {{ font-size: 1.1rem; margin: 1.5rem 0 0.5rem; }}
        .contact {{ color: #8a6a45; }}
    </style>
</head>
<body>
    <div class="wrap">
        <header class="hero">
            <span class="badge">{escape(category or "stall")}</span>
            <h1>{escape(title)}</h1>
            {owner}
        </header>
        <img class="banner" src="{escape(card_image(stall, bucket_base_url))}" alt="{escape(title)}">
        <p>{escape(stall.description or "")}</p>
        <p class="contact">{contact}</p>
        {_list_section("Menu", stall.item_texts())}
        {_list_section("Highlights", stall.highlights or [])}
        {_list_section("Best sellers", stall.best_sellers or [])}
        {_list_section("Offers", stall.offers or [])}
        <div class="gallery">{gallery}</div>
        <footer class="foot"><a href="{escape(back)}">All club stalls</a></footer>
    </div>
</body>
</html>
""".strip()

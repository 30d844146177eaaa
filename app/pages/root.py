"""Root landing page for the Mela stall directory."""

from html import escape

_FONTS_CSS_URL = (
    "https://fonts.googleapis.com/css2?family=DM+Sans:ital,opsz,wght@0,9..40,400;0,9..40,500;0,9..40,600;1,9..40,400"
    "&display=swap"
)

# HTML pages carry inline styles and web fonts; API responses keep the strict default.
PAGE_CSP = (
    "default-src 'self'; "
    "img-src 'self' https: data:; "
    "style-src 'self' 'unsafe-inline' https://fonts.googleapis.com; "
    "font-src https://fonts.gstatic.com"
)

BASE_STYLES = """
        * { box-sizing: border-box; }
        body {
            font-family: 'DM Sans', system-ui, sans-serif;
            margin: 0;
            min-height: 100vh;
            background: #fff8ef;
            color: #2b1d0e;
            padding: 2rem 1rem;
        }
        a { color: inherit; }
        .wrap {
            max-width: 960px;
            margin: 0 auto;
        }
        .hero {
            text-align: center;
            margin-bottom: 2.5rem;
        }
        .hero h1 {
            font-size: clamp(2rem, 6vw, 2.75rem);
            font-weight: 600;
            letter-spacing: -0.02em;
            margin: 0 0 0.5rem 0;
        }
        .hero .tagline {
            color: #8a6a45;
            font-size: 1rem;
            margin-top: 0.75rem;
        }
        a.btn {
            display: inline-block;
            padding: 0.65rem 1.25rem;
            background: #fff;
            text-decoration: none;
            border-radius: 999px;
            font-weight: 500;
            font-size: 0.9375rem;
            border: 1px solid #e6cfae;
        }
        a.btn.primary {
            background: #e4572e;
            color: #fff;
            border-color: #e4572e;
        }
        .foot {
            text-align: center;
            margin-top: 2.5rem;
            color: #b39a7c;
            font-size: 0.8125rem;
        }
"""


def render_root_page(app_name: str) -> str:
    """Return HTML for the root landing page."""
    name = escape(app_name)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
    <link rel="preconnect" href="https://fonts.googleapis.com">
    <link href="{_FONTS_CSS_URL}" rel="stylesheet">
    <style>{BASE_STYLES}
        .card {{
            max-width: 560px;
            margin: 0 auto 1.25rem;
            background: #fff;
            border: 1px solid #f0e0c8;
            border-radius: 1rem;
            padding: 1.5rem 1.75rem;
        }}
        .card p {{
            color: #6b5236;
            line-height: 1.55;
        }}
        .links {{
            display: flex;
            flex-wrap: wrap;
            gap: 0.75rem;
            margin-top: 1rem;
        }}
    </style>
</head>
<body>
    <div class="wrap">
        <header class="hero">
            <h1>Mela</h1>
            <p class="tagline">Food, accessories and games from every stall at the fair.</p>
        </header>

        <section class="card" aria-labelledby="browse-heading">
            <h2 id="browse-heading">Browse stalls</h2>
            <p>Club stalls are listed as soon as their owners submit them.
            Filter by category or search by stall, owner, or menu item.</p>
            <div class="links">
                <a href="/clubs" class="btn primary">Club stalls</a>
                <a href="/docs" class="btn">API docs</a>
            </div>
        </section>

        <footer class="foot">
            {name} · API at <code>/api</code>
        </footer>
    </div>
</body>
</html>
""".strip()

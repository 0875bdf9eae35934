"""
Page Renderer for pagewright

Builds the HTML document for a page from its SEO metadata.
"""
from html import escape
from typing import Optional

from pagewright.models.page import Page
from pagewright.services.seo_page import SeoPage
from pagewright.services.site_loader import Site


def render_page(seo_page: SeoPage, page: Optional[Page], site: Optional[Site]) -> str:
    """Render a minimal HTML document for the current page."""
    html_attributes = seo_page.render_html_attributes()
    theme = site.theme if site else "light"
    heading = escape(page.title or page.name) if page else ""
    # undecorated pages get no site chrome
    decorated = page is None or page.decorate
    header = f"<header>{escape(site.name)}</header>\n    " if site and decorated else ""

    head = "\n    ".join(
        part
        for part in (
            '<meta charset="UTF-8">',
            seo_page.render_title(),
            seo_page.render_metadatas(),
            seo_page.render_link_canonical(),
        )
        if part
    )

    return f"""<!DOCTYPE html>
<html{' ' + html_attributes if html_attributes else ''}>
<head>
    {head}
</head>
<body data-theme="{escape(theme)}">
    {header}<main id="page">
        <h1>{heading}</h1>
    </main>
</body>
</html>
"""

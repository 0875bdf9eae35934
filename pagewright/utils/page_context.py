"""
Page Context for pagewright

Per-request state shared between the site middleware, the request
listener and the endpoints.
"""
from __future__ import annotations
from typing import Optional
from dataclasses import dataclass

from starlette.requests import Request

from pagewright.models.page import Page
from pagewright.services.seo_page import SeoPage
from pagewright.services.site_loader import Site


@dataclass
class PageContext:
    """Represents the page state of a single request."""
    site: Optional[Site]
    seo_page: SeoPage
    current_page: Optional[Page] = None


def get_page_context(request: Request) -> Optional[PageContext]:
    """Get the page context attached to a request, if any."""
    return getattr(request.state, "page_context", None)

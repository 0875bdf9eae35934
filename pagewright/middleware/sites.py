"""
Site Routing Middleware for pagewright

Routes requests to the appropriate site based on the Host header.
"""
import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from pagewright.config import get_settings
from pagewright.services.seo_page import SeoPage
from pagewright.services.site_selector import get_site_selector
from pagewright.utils.page_context import PageContext

logger = logging.getLogger(__name__)


class SiteMiddleware(BaseHTTPMiddleware):
    """Middleware that attaches site and page context to each request."""

    async def dispatch(self, request: Request, call_next):
        # Get domain from Host header
        host = request.headers.get("host", "localhost")

        # Find matching site
        site = get_site_selector().resolve(host)
        if site is None:
            logger.debug("No site configured for host %s", host)

        # Attach to request state
        request.state.site = site
        request.state.page_context = PageContext(
            site=site,
            seo_page=SeoPage(title=get_settings().default_title),
        )

        return await call_next(request)

"""
Route dependencies for pagewright
"""
from fastapi import HTTPException, Request

from pagewright.config import get_settings
from pagewright.exceptions import InternalErrorException
from pagewright.listener.request_listener import RequestListener
from pagewright.services.cms_manager import get_cms_selector
from pagewright.services.decorator_strategy import get_decorator_strategy
from pagewright.services.site_selector import get_site_selector
from pagewright.utils.page_context import PageContext, get_page_context


def get_site_or_404(request: Request):
    """Get site from request state or raise 404."""
    site = getattr(request.state, "site", None)
    if not site:
        raise HTTPException(status_code=404, detail="Site not found for this domain")
    return site


def get_context_or_500(request: Request) -> PageContext:
    """Get the page context attached by SiteMiddleware."""
    context = get_page_context(request)
    if context is None:
        raise InternalErrorException("No page context, is SiteMiddleware installed?")
    return context


def page_request_listener(request: Request) -> None:
    """Run the request listener once routing has matched the request."""
    context = get_page_context(request)
    listener = RequestListener(
        get_cms_selector(),
        get_site_selector(),
        get_decorator_strategy(),
        # without a context the CMS selector reports no manager
        context.seo_page if context else None,
        slug_route=get_settings().page_slug_route,
    )
    listener.on_core_request(request)

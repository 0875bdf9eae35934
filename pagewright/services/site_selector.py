"""
Site Selector for pagewright

Picks the site serving a request from its Host header.
"""
from typing import Optional

from starlette.requests import Request

from pagewright.services.site_loader import Site, SiteLoader, get_site_loader


class HostSiteSelector:
    """Selects sites by host, falling back to the default site."""

    def __init__(self, site_loader: SiteLoader):
        self.site_loader = site_loader

    def resolve(self, host: str) -> Optional[Site]:
        """Find the site for a host name (port allowed)."""
        site = self.site_loader.get_site_by_domain(host or "")
        if site is None:
            site = self.site_loader.get_default_site()
        return site

    def retrieve(self, request: Request) -> Optional[Site]:
        """Return the site attached to the request by SiteMiddleware."""
        context = getattr(request.state, "page_context", None)
        if context is None:
            return None
        return context.site


_site_selector: Optional[HostSiteSelector] = None


def get_site_selector() -> HostSiteSelector:
    """Get the global site selector instance."""
    global _site_selector
    if _site_selector is None:
        _site_selector = HostSiteSelector(get_site_loader())
    return _site_selector

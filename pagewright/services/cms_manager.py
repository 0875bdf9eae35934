"""
CMS Manager for pagewright

Resolves pages for a request and tracks the request's current page.
"""
from __future__ import annotations
import secrets
from typing import Optional

from starlette.requests import Request

from pagewright.config import Settings, get_settings
from pagewright.exceptions import PageNotFoundException
from pagewright.models.page import Page
from pagewright.services.page_manager import PageManager, get_page_manager
from pagewright.services.site_loader import Site
from pagewright.utils.page_context import PageContext, get_page_context


class CmsPageManager:
    """Page lookups bound to the context of one request."""

    def __init__(
        self,
        page_manager: PageManager,
        context: PageContext,
        url: Optional[str] = None,
        create_missing: bool = True,
    ):
        self.page_manager = page_manager
        self.context = context
        self.url = url
        self.create_missing = create_missing

    def get_page_by_route_name(self, site: Site, route_name: str, create: Optional[bool] = None) -> Page:
        """
        Get the page decorating a route.

        A route without a page gets one created on the fly, served at the
        current request URL, unless creation is disabled.
        """
        page = self.page_manager.find_by_route_name(site, route_name)
        if page is not None:
            return page

        if create is None:
            create = self.create_missing
        if not create:
            raise PageNotFoundException(
                f"Unable to find the page : site={site.id} - route_name={route_name}"
            )

        return self.page_manager.create(site, route_name, url=self.url)

    def get_page_by_url(self, site: Site, url: str) -> Page:
        page = self.page_manager.find_by_url(site, url)
        if page is None:
            raise PageNotFoundException(f"Unable to find the page : site={site.id} - url={url}")
        return page

    def set_current_page(self, page: Page):
        self.context.current_page = page

    def get_current_page(self) -> Optional[Page]:
        return self.context.current_page


class CmsManagerSelector:
    """Hands out CMS managers and decides whether the caller is an editor."""

    def __init__(self, page_manager: PageManager, settings: Settings):
        self.page_manager = page_manager
        self.settings = settings

    def retrieve(self, request: Request) -> Optional[CmsPageManager]:
        """Get the CMS manager for a request, None without a page context."""
        context = get_page_context(request)
        if context is None:
            return None

        return CmsPageManager(
            self.page_manager,
            context,
            url=request.url.path,
            create_missing=self.settings.create_missing_pages,
        )

    def is_editor(self, request: Request) -> bool:
        """True when the request presents a configured editor token."""
        if not self.settings.editor_tokens:
            return False

        token = request.headers.get(self.settings.editor_header) or request.cookies.get(
            self.settings.editor_cookie
        )
        if not token:
            return False

        return any(
            secrets.compare_digest(token.encode(), editor_token.encode())
            for editor_token in self.settings.editor_tokens
        )


_cms_selector: Optional[CmsManagerSelector] = None


def get_cms_selector() -> CmsManagerSelector:
    """Get the global CMS manager selector instance."""
    global _cms_selector
    if _cms_selector is None:
        _cms_selector = CmsManagerSelector(get_page_manager(), get_settings())
    return _cms_selector

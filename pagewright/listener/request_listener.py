"""
Request Listener for pagewright

Runs on every routed request: resolves the CMS page decorating the matched
route, enforces the site locale and the page's enabled state, and fills in
the SEO metadata of the response.
"""
from starlette.requests import Request

from pagewright.exceptions import InternalErrorException, PageNotFoundException
from pagewright.models.page import Page
from pagewright.services.cms_manager import CmsManagerSelector
from pagewright.services.decorator_strategy import DecoratorStrategy
from pagewright.services.seo_page import SeoPage
from pagewright.services.site_selector import HostSiteSelector
from pagewright.utils.request import get_request_locale, get_route_name

PAGE_SLUG_ROUTE = "page_slug"

OG_TYPE = "article"
OG_PREFIX = "og: http://ogp.me/ns#"


def configure_seo_page(seo_page: SeoPage, page: Page):
    """Copy a page's title and meta fields into the SEO page."""
    seo_page.set_title(page.title or page.name)

    if page.meta_description:
        seo_page.add_meta("name", "description", page.meta_description)

    if page.meta_keyword:
        seo_page.add_meta("name", "keywords", page.meta_keyword)

    seo_page.add_meta("property", "og:type", OG_TYPE)
    seo_page.add_html_attributes("prefix", OG_PREFIX)


class RequestListener:
    """Attaches the CMS page matching the route to each request."""

    def __init__(
        self,
        cms_selector: CmsManagerSelector,
        site_selector: HostSiteSelector,
        decorator_strategy: DecoratorStrategy,
        seo_page: SeoPage,
        slug_route: str = PAGE_SLUG_ROUTE,
    ):
        self.cms_selector = cms_selector
        self.site_selector = site_selector
        self.decorator_strategy = decorator_strategy
        self.seo_page = seo_page
        self.slug_route = slug_route

    def on_core_request(self, request: Request) -> None:
        cms = self.cms_selector.retrieve(request)

        if not cms:
            raise InternalErrorException("No CMS Manager available")

        route_name = get_route_name(request)

        # pages served by URL are handled by the slug route itself
        if route_name == self.slug_route:
            return

        if not self.decorator_strategy.is_request_decorable(request):
            return

        site = self.site_selector.retrieve(request)

        if not site:
            raise InternalErrorException("No site available for the current request")

        locale = get_request_locale(request)
        if site.locale and site.locale != locale:
            raise PageNotFoundException(
                f"Invalid locale - site.locale={site.locale} - request._locale={locale}"
            )

        page = cms.get_page_by_route_name(site, route_name)

        if not page.enabled and not self.cms_selector.is_editor(request):
            raise PageNotFoundException(f"The page is not enabled : id={page.id}")

        cms.set_current_page(page)

        configure_seo_page(self.seo_page, page)

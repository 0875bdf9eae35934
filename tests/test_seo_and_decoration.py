"""Tests for the SEO page and the decorator strategy."""

from __future__ import annotations

import pytest

from conftest import make_request
from pagewright.services.decorator_strategy import DecoratorStrategy
from pagewright.services.seo_page import SeoPage


class TestSeoPage:
    def test_add_title_prepends(self):
        seo_page = SeoPage(title="My Site")

        seo_page.add_title("About")

        assert seo_page.get_title() == "About - My Site"

    def test_add_title_on_empty_title(self):
        assert SeoPage().add_title("About").get_title() == "About"

    def test_meta_replace_and_remove(self):
        seo_page = SeoPage()
        seo_page.add_meta("name", "description", "first")
        seo_page.add_meta("name", "description", "second")

        assert seo_page.get_metas()["name"]["description"] == ("second", {})

        seo_page.remove_meta("name", "description")
        assert not seo_page.has_meta("name", "description")

    def test_render_escapes_values(self):
        seo_page = SeoPage(title="Fish & <Chips>")
        seo_page.add_meta("name", "description", 'say "hi"')
        seo_page.add_html_attributes("prefix", "og: http://ogp.me/ns#")

        assert seo_page.render_title() == "<title>Fish &amp; &lt;Chips&gt;</title>"
        assert seo_page.render_metadatas() == (
            '<meta name="description" content="say &quot;hi&quot;" />'
        )
        assert seo_page.render_html_attributes() == 'prefix="og: http://ogp.me/ns#"'

    def test_render_charset_and_extras(self):
        seo_page = SeoPage()
        seo_page.add_meta("charset", "UTF-8", "")
        seo_page.add_meta("property", "og:image", "/logo.png", {"data-size": 64})

        lines = seo_page.render_metadatas().split("\n")

        assert '<meta charset="UTF-8" />' in lines
        assert '<meta property="og:image" content="/logo.png" data-size="64" />' in lines

    def test_link_canonical(self):
        seo_page = SeoPage()
        assert seo_page.render_link_canonical() == ""

        seo_page.set_link_canonical("http://example.com/about")

        assert seo_page.get_link_canonical() == "http://example.com/about"
        assert seo_page.render_link_canonical() == (
            '<link rel="canonical" href="http://example.com/about" />'
        )


class TestDecoratorStrategy:
    @pytest.fixture
    def strategy(self):
        return DecoratorStrategy(
            ignore_routes=["logout"],
            ignore_route_patterns=[r"^_(.*)", r"(.*)admin(.*)"],
            ignore_uri_patterns=[r"^/admin(.*)", r"^/api/(.*)"],
        )

    @pytest.mark.parametrize(
        "route_name, expected",
        [
            ("homepage", True),
            ("", False),
            (None, False),
            ("logout", False),
            ("_internal", False),
            ("page_admin_edit", False),
        ],
    )
    def test_route_names(self, strategy, route_name, expected):
        assert strategy.is_route_name_decorable(route_name) is expected

    @pytest.mark.parametrize(
        "uri, expected",
        [("/", True), ("/about", True), ("/admin/pages", False), ("/api/health", False)],
    )
    def test_uris(self, strategy, uri, expected):
        assert strategy.is_route_uri_decorable(uri) is expected

    def test_regular_request_is_decorable(self, strategy):
        assert strategy.is_request_decorable(make_request("about", path="/about"))

    def test_xhr_request_is_not_decorable(self, strategy):
        request = make_request("about", path="/about", headers={"X-Requested-With": "XMLHttpRequest"})

        assert not strategy.is_request_decorable(request)

    def test_unrouted_request_is_not_decorable(self, strategy):
        assert not strategy.is_request_decorable(make_request(None, path="/about"))

    def test_ignored_uri_is_not_decorable(self, strategy):
        assert not strategy.is_request_decorable(make_request("api_health", path="/api/health"))

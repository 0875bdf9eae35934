"""Shared fixtures for pagewright tests."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from starlette.requests import Request

from pagewright.config import Settings
from pagewright.services.cms_manager import CmsManagerSelector
from pagewright.services.page_manager import PageManager
from pagewright.services.site_loader import SiteLoader
from pagewright.services.site_selector import HostSiteSelector

SITES_CONFIG = """
defaults:
  theme: light

sites:
  default:
    name: Default Site
    domains: [localhost, www.example.com]
    default: true
  fr:
    name: Site FR
    domains: [fr.example.com]
    locale: fr
    theme: dark
"""

DEFAULT_PAGES = """
pages:
  homepage:
    url: /
    name: Homepage
    title: Welcome
    meta_description: The home page
    meta_keyword: home, welcome
  about:
    url: /about
    name: About
  drafts:
    url: /drafts
    name: Drafts
    enabled: false
"""

FR_PAGES = """
pages:
  homepage:
    url: /
    name: Accueil
    title: Bienvenue
"""


def write_sites(root, config=SITES_CONFIG, pages=None):
    """Write a sites tree under root and return its path."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "config.yaml").write_text(config)
    for site_id, content in (pages or {}).items():
        (root / site_id).mkdir(exist_ok=True)
        (root / site_id / "pages.yaml").write_text(content)
    return root


def make_request(
    route_name=None,
    path="/",
    headers=None,
    query_string=b"",
    path_params=None,
    state=None,
):
    """Build a routed Starlette request without running an app."""
    scope = {
        "type": "http",
        "method": "GET",
        "scheme": "http",
        "server": ("testserver", 80),
        "root_path": "",
        "path": path,
        "query_string": query_string,
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "path_params": path_params or {},
        "route": SimpleNamespace(name=route_name) if route_name else None,
        "state": state or {},
    }
    return Request(scope)


@pytest.fixture
def sites_dir(tmp_path):
    return write_sites(
        tmp_path / "sites",
        pages={"default": DEFAULT_PAGES, "fr": FR_PAGES},
    )


@pytest.fixture
def site_loader(sites_dir):
    return SiteLoader(sites_dir)


@pytest.fixture
def settings(sites_dir):
    return Settings(sites_path=sites_dir, editor_tokens=["s3cret"])


@pytest.fixture
def services(monkeypatch, site_loader, settings):
    """Replace the process-wide services with instances over sites_dir."""
    page_manager = PageManager()
    monkeypatch.setattr("pagewright.services.site_loader._site_loader", site_loader)
    monkeypatch.setattr(
        "pagewright.services.site_selector._site_selector", HostSiteSelector(site_loader)
    )
    monkeypatch.setattr("pagewright.services.page_manager._page_manager", page_manager)
    monkeypatch.setattr(
        "pagewright.services.cms_manager._cms_selector",
        CmsManagerSelector(page_manager, settings),
    )
    monkeypatch.setattr("pagewright.services.decorator_strategy._decorator_strategy", None)
    return SimpleNamespace(site_loader=site_loader, page_manager=page_manager, settings=settings)


@pytest.fixture
def client(services):
    from fastapi.testclient import TestClient

    from pagewright.main import create_app

    return TestClient(create_app())

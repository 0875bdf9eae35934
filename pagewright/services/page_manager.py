"""
Page Manager for pagewright

Keeps the pages of every site in memory, seeded from each site's pages.yaml.
"""
from __future__ import annotations
import logging
from datetime import datetime, timezone
from itertools import count
from typing import Dict, List, Optional
from threading import Lock

import yaml
from pydantic import ValidationError

from pagewright.models.page import Page
from pagewright.services.site_loader import Site

logger = logging.getLogger(__name__)

# Assigned by the manager, never read from pages.yaml
_MANAGED_FIELDS = {"id", "site_id", "route_name", "created_at", "updated_at"}


class PageManager:
    """
    In-memory page store.
    Pages are indexed per site by route name and by URL. A site's
    pages.yaml is read the first time the site is looked up.
    """

    def __init__(self):
        self._pages: Dict[str, Dict[str, Page]] = {}  # site_id -> route_name -> page
        self._urls: Dict[str, Dict[str, str]] = {}  # site_id -> url -> route_name
        self._ids = count(1)
        self._lock = Lock()

    def load_site(self, site: Site):
        """Seed the pages of a site from its pages.yaml, once."""
        with self._lock:
            if site.id in self._pages:
                return
            self._pages[site.id] = {}
            self._urls[site.id] = {}

            if not site.pages_path.exists():
                return

            with open(site.pages_path) as f:
                config = yaml.safe_load(f) or {}

            for route_name, page_config in (config.get("pages") or {}).items():
                page_config = dict(page_config or {})
                page_config.setdefault("name", route_name)
                try:
                    self._add(site, route_name, page_config)
                except ValidationError as e:
                    raise ValueError(
                        f"Invalid page '{route_name}' in {site.pages_path}: {e}"
                    ) from e

            logger.info("Loaded %d page(s) for site '%s'", len(self._pages[site.id]), site.id)

    def find_by_route_name(self, site: Site, route_name: str) -> Optional[Page]:
        """Get a site's page by route name, or None."""
        self.load_site(site)
        with self._lock:
            return self._pages[site.id].get(route_name)

    def find_by_url(self, site: Site, url: str) -> Optional[Page]:
        """Get a site's page by URL, or None."""
        self.load_site(site)
        with self._lock:
            route_name = self._urls[site.id].get(url)
            return self._pages[site.id].get(route_name) if route_name else None

    def create(self, site: Site, route_name: str, **fields) -> Page:
        """Create and store a page for a route, returning the existing one if any."""
        self.load_site(site)
        with self._lock:
            existing = self._pages[site.id].get(route_name)
            if existing is not None:
                return existing
            fields.setdefault("name", route_name)
            page = self._add(site, route_name, fields)

        logger.debug("Created page '%s' (id=%s) for site '%s'", route_name, page.id, site.id)
        return page

    def list_pages(self, site: Site) -> List[Page]:
        """List the pages of a site, ordered by id."""
        self.load_site(site)
        with self._lock:
            return sorted(self._pages[site.id].values(), key=lambda page: page.id)

    def _add(self, site: Site, route_name: str, fields: dict) -> Page:
        """Build and index a page. Called within lock."""
        now = datetime.now(timezone.utc)
        fields = {key: value for key, value in fields.items() if key not in _MANAGED_FIELDS}
        page = Page(
            id=next(self._ids),
            site_id=site.id,
            route_name=route_name,
            created_at=now,
            updated_at=now,
            **fields,
        )
        self._pages[site.id][route_name] = page
        if page.url:
            self._urls[site.id][page.url] = route_name
        return page


# Global page manager instance
_page_manager: Optional[PageManager] = None


def get_page_manager() -> PageManager:
    """Get the global page manager instance."""
    global _page_manager
    if _page_manager is None:
        _page_manager = PageManager()
    return _page_manager

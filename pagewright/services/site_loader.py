"""
Site Loader for pagewright

Loads site configurations and resolves domains to site folders.
"""
import logging
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field
import yaml

logger = logging.getLogger(__name__)


def strip_port(host: str) -> str:
    """Remove the port from a Host header value, keeping IPv6 brackets."""
    name, sep, port = host.rpartition(":")
    # a bare IPv6 address has colons but no port; a bracketed one ends in "]"
    if sep and port.isdigit() and (name.endswith("]") or ":" not in name):
        return name
    return host


@dataclass
class Site:
    """Represents a site configuration."""
    id: str
    path: Path
    name: str
    domains: list[str] = field(default_factory=list)
    locale: Optional[str] = None
    theme: str = "light"
    is_default: bool = False

    @property
    def pages_path(self) -> Path:
        """Path to the site's pages.yaml file."""
        return self.path / "pages.yaml"


class SiteLoader:
    """Loads and manages site configurations."""

    def __init__(self, sites_path: Path = None):
        if sites_path is None:
            from pagewright.config import get_settings
            sites_path = get_settings().sites_path
        self.sites_path = Path(sites_path)
        self._sites: dict[str, Site] = {}
        self._domain_map: dict[str, str] = {}
        self._default_site_id: Optional[str] = None
        self._load_config()

    def _load_config(self):
        """Load sites from config.yaml."""
        config_path = self.sites_path / "config.yaml"

        if not config_path.exists():
            logger.warning("No site configuration found at %s", config_path)
            return

        with open(config_path) as f:
            config = yaml.safe_load(f) or {}

        # Load defaults
        defaults = config.get("defaults", {})
        default_theme = defaults.get("theme", "light")
        default_locale = defaults.get("locale")

        for site_id, site_config in (config.get("sites") or {}).items():
            site_config = site_config or {}
            site = Site(
                id=site_id,
                path=self.sites_path / site_id,
                name=site_config.get("name", site_id),
                domains=site_config.get("domains", []),
                locale=site_config.get("locale", default_locale),
                theme=site_config.get("theme", default_theme),
                is_default=bool(site_config.get("default", False)),
            )
            self._sites[site_id] = site

            # Map each domain to its site
            for domain in site.domains:
                self._domain_map[domain.lower()] = site_id

            if site.is_default and self._default_site_id is None:
                self._default_site_id = site_id

        logger.info("Loaded %d site(s) from %s", len(self._sites), config_path)

    def get_site_by_domain(self, domain: str) -> Optional[Site]:
        """Find site matching the given domain."""
        domain = strip_port(domain.lower())
        site_id = self._domain_map.get(domain)
        return self._sites.get(site_id) if site_id else None

    def get_default_site(self) -> Optional[Site]:
        """Get the site flagged as default, if any."""
        return self._sites.get(self._default_site_id) if self._default_site_id else None

    def get_site(self, site_id: str) -> Optional[Site]:
        """Get site by ID."""
        return self._sites.get(site_id)

    def list_sites(self) -> list[Site]:
        """List all configured sites."""
        return list(self._sites.values())


# Global instance
_site_loader: Optional[SiteLoader] = None


def get_site_loader() -> SiteLoader:
    """Get the global site loader instance."""
    global _site_loader
    if _site_loader is None:
        _site_loader = SiteLoader()
    return _site_loader

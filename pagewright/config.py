"""
pagewright Configuration
"""
from __future__ import annotations
from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAGEWRIGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Application Configuration
    app_name: str = "pagewright"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS Configuration
    cors_origins: List[str] = ["*"]

    # Sites
    # Folder holding config.yaml and one sub-folder (with pages.yaml) per site
    sites_path: Path = Path(__file__).parent.parent / "sites"

    # Pages
    # Route serving pages by URL; the request listener leaves it alone
    page_slug_route: str = "page_slug"
    # Create a page on the fly when a decorable route has none yet
    create_missing_pages: bool = True

    # Decoration rules
    ignore_routes: List[str] = []
    ignore_route_patterns: List[str] = [r"^_(.*)", r"(.*)admin(.*)"]
    ignore_uri_patterns: List[str] = [r"^/admin(.*)", r"^/api/(.*)"]

    # Editor mode
    # Empty list means nobody can see disabled pages
    editor_tokens: List[str] = []
    editor_header: str = "X-Pagewright-Editor"
    editor_cookie: str = "pagewright_editor"

    # SEO
    default_title: str = "pagewright"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""
Page model for pagewright
"""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Page(BaseModel):
    """A content page routable by name within a site."""

    id: int = Field(..., description="Page identifier, unique across sites")
    site_id: str = Field(..., description="ID of the site owning the page")
    route_name: str = Field(..., description="Name of the route the page decorates")
    url: Optional[str] = Field(None, description="URL the page is served at by the slug route")
    name: str = Field(..., description="Internal page name, used when no title is set")
    title: Optional[str] = Field(None, description="SEO title")
    enabled: bool = Field(True, description="Disabled pages are only visible to editors")
    decorate: bool = Field(True, description="Whether the page is wrapped in the site layout")
    meta_description: Optional[str] = Field(None, description="Content of the description meta tag")
    meta_keyword: Optional[str] = Field(None, description="Content of the keywords meta tag")
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "site_id": "default",
                "route_name": "homepage",
                "url": "/",
                "name": "Homepage",
                "title": "Welcome",
                "enabled": True,
                "meta_description": "The home page",
            }
        }

"""
Decorator Strategy for pagewright

Decides which requests get a CMS page wrapped around them. API calls,
admin screens, internal routes and XHR requests are left alone.
"""
from __future__ import annotations
import re
from typing import Iterable, Optional

from starlette.requests import Request

from pagewright.config import get_settings
from pagewright.utils.request import get_route_name


class DecoratorStrategy:
    """Route name and URI based decoration rules."""

    def __init__(
        self,
        ignore_routes: Iterable[str] = (),
        ignore_route_patterns: Iterable[str] = (),
        ignore_uri_patterns: Iterable[str] = (),
    ):
        self.ignore_routes = set(ignore_routes)
        self.ignore_route_patterns = [re.compile(pattern) for pattern in ignore_route_patterns]
        self.ignore_uri_patterns = [re.compile(pattern) for pattern in ignore_uri_patterns]

    def is_request_decorable(self, request: Request) -> bool:
        if request.headers.get("x-requested-with") == "XMLHttpRequest":
            return False

        return self.is_route_name_decorable(get_route_name(request)) and self.is_route_uri_decorable(
            request.url.path
        )

    def is_route_name_decorable(self, route_name: Optional[str]) -> bool:
        if not route_name:
            return False

        if route_name in self.ignore_routes:
            return False

        return not any(pattern.search(route_name) for pattern in self.ignore_route_patterns)

    def is_route_uri_decorable(self, uri: str) -> bool:
        return not any(pattern.search(uri) for pattern in self.ignore_uri_patterns)


_decorator_strategy: Optional[DecoratorStrategy] = None


def get_decorator_strategy() -> DecoratorStrategy:
    """Get the global decorator strategy, built from settings."""
    global _decorator_strategy
    if _decorator_strategy is None:
        settings = get_settings()
        _decorator_strategy = DecoratorStrategy(
            ignore_routes=settings.ignore_routes,
            ignore_route_patterns=settings.ignore_route_patterns,
            ignore_uri_patterns=settings.ignore_uri_patterns,
        )
    return _decorator_strategy

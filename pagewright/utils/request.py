"""
Request helpers for pagewright
"""
from typing import Optional

from starlette.requests import Request

LOCALE_PARAMETER = "_locale"


def get_route_name(request: Request) -> Optional[str]:
    """Name of the route matched for this request, once routing has run."""
    route = request.scope.get("route")
    return getattr(route, "name", None)


def get_request_locale(request: Request) -> Optional[str]:
    """Locale requested through the `_locale` path or query parameter."""
    locale = request.path_params.get(LOCALE_PARAMETER)
    if locale is None:
        locale = request.query_params.get(LOCALE_PARAMETER)
    return locale

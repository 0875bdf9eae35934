"""pagewright middleware."""
from pagewright.middleware.sites import SiteMiddleware

__all__ = ["SiteMiddleware"]

"""pagewright routes."""
from fastapi import APIRouter

from pagewright.routes import api, pages

router = APIRouter()
router.include_router(api.router)
# catch-all slug route, keep last
router.include_router(pages.router)

__all__ = ["router"]

"""
pagewright - Main Application

A multi-site CMS page layer: every routed request is matched to a page of
the current site, which drives the SEO metadata of the response.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pagewright.config import get_settings
from pagewright.exceptions import PageError, PageErrorKind
from pagewright.middleware import SiteMiddleware
from pagewright.models.response import ErrorResponse
from pagewright.routes import router
from pagewright.routes.dependencies import page_request_listener
from pagewright.services.page_manager import get_page_manager
from pagewright.services.site_loader import get_site_loader

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)

STATUS_CODES = {
    PageErrorKind.INTERNAL_ERROR: 500,
    PageErrorKind.PAGE_NOT_FOUND: 404,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    sites = get_site_loader().list_sites()
    page_manager = get_page_manager()

    # pages.yaml files are read before the first request
    for site in sites:
        page_manager.load_site(site)

    logger.info("%s starting, %d site(s) configured", settings.app_name, len(sites))
    for site in sites:
        logger.info(
            "  %s (%s) locale=%s%s",
            site.name,
            ", ".join(site.domains[:2]) + ("..." if len(site.domains) > 2 else ""),
            site.locale or "-",
            " [default]" if site.is_default else "",
        )

    yield

    logger.info("%s shutting down", settings.app_name)


async def page_error_handler(request: Request, exc: PageError):
    """Translate page errors into HTTP responses."""
    status_code = STATUS_CODES[exc.kind]
    if status_code >= 500:
        logger.error("%s %s: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s: %s", request.method, request.url.path, exc.message)

    body = ErrorResponse(error=exc.kind.value, detail=exc.message if settings.debug else None)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Multi-site CMS pages with SEO metadata for FastAPI",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
        # runs after routing, so the matched route name is known
        dependencies=[Depends(page_request_listener)],
    )

    # Middleware stack (order matters - last added runs first)
    app.add_middleware(SiteMiddleware)  # Routes requests to sites
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PageError, page_error_handler)

    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "pagewright.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )

"""
Page Routes for pagewright

The homepage and the catch-all slug route serving CMS pages by URL.
"""
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from pagewright.exceptions import InternalErrorException, PageNotFoundException
from pagewright.listener.request_listener import configure_seo_page
from pagewright.routes.dependencies import get_context_or_500, get_site_or_404
from pagewright.services.cms_manager import get_cms_selector
from pagewright.services.renderer import render_page

router = APIRouter()


@router.get("/", response_class=HTMLResponse, name="homepage")
async def homepage(request: Request):
    """Render the page the request listener attached to the homepage route."""
    site = get_site_or_404(request)
    context = get_context_or_500(request)
    return HTMLResponse(content=render_page(context.seo_page, context.current_page, site))


@router.get("/{path:path}", response_class=HTMLResponse, name="page_slug")
def page_slug(request: Request, path: str):
    """Serve a CMS page by its URL."""
    site = get_site_or_404(request)
    context = get_context_or_500(request)
    cms_selector = get_cms_selector()

    cms = cms_selector.retrieve(request)
    if not cms:
        raise InternalErrorException("No CMS Manager available")

    page = cms.get_page_by_url(site, "/" + path)

    if not page.enabled and not cms_selector.is_editor(request):
        raise PageNotFoundException(f"The page is not enabled : id={page.id}")

    cms.set_current_page(page)
    configure_seo_page(context.seo_page, page)
    context.seo_page.set_link_canonical(str(request.url.replace(query="")))

    return HTMLResponse(content=render_page(context.seo_page, page, site))

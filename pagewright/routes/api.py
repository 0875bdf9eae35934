"""
API Routes for pagewright

Health and page listing endpoints. Their URIs are never decorated.
"""
from typing import List

from fastapi import APIRouter, HTTPException

from pagewright.models.page import Page
from pagewright.models.response import HealthResponse
from pagewright.services.page_manager import get_page_manager
from pagewright.services.site_loader import get_site_loader

router = APIRouter(prefix="/api")


@router.get("/health", response_model=HealthResponse, name="api_health")
async def health_check():
    """Health check endpoint."""
    return HealthResponse(sites=len(get_site_loader().list_sites()))


@router.get("/sites/{site_id}/pages", response_model=List[Page], name="api_site_pages")
def list_site_pages(site_id: str):
    """List the pages of a site."""
    site = get_site_loader().get_site(site_id)
    if not site:
        raise HTTPException(status_code=404, detail=f"Unknown site: {site_id}")
    return get_page_manager().list_pages(site)

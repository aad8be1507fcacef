import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from folio import dependencies as deps
from folio.schemas.sitemap import SitemapEntry
from folio.services.sitemap_service import build_sitemap, render_sitemap_xml
from folio.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sitemap", response_model=List[SitemapEntry])
def get_sitemap(
    repo=Depends(deps.get_posts_repo),
    current_settings: Settings = Depends(deps.get_settings),
):
    try:
        return build_sitemap(repo, current_settings.BASE_SITE_URL)
    except Exception as e:
        logger.error(f"Unexpected error building sitemap: {e}")
        raise HTTPException(status_code=500, detail="Failed to build sitemap")


@router.get("/sitemap.xml")
def get_sitemap_xml(
    repo=Depends(deps.get_posts_repo),
    current_settings: Settings = Depends(deps.get_settings),
):
    try:
        entries = build_sitemap(repo, current_settings.BASE_SITE_URL)
    except Exception as e:
        logger.error(f"Unexpected error building sitemap: {e}")
        raise HTTPException(status_code=500, detail="Failed to build sitemap")
    return Response(content=render_sitemap_xml(entries), media_type="application/xml")

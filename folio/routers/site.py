from fastapi import APIRouter, Depends
from fastapi.responses import Response

from folio import dependencies as deps
from folio.services.markdown_renderer import highlight_stylesheet
from folio.settings import Settings

router = APIRouter()


@router.get("/site")
def get_site_config(current_settings: Settings = Depends(deps.get_settings)):
    """Build-time toggles the frontend reads as-is."""
    return {
        "pwaEnabled": current_settings.ENABLE_PWA,
        "googleSiteVerification": current_settings.GOOGLE_SITE_VERIFICATION or None,
    }


@router.get("/assets/highlight.css")
def get_highlight_css(current_settings: Settings = Depends(deps.get_settings)):
    css = highlight_stylesheet(current_settings.CODE_THEME)
    return Response(content=css, media_type="text/css")

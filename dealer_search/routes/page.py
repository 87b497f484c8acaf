from html import escape

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from dealer_search.utils.form_page import FORM_PAGE_HTML

router = APIRouter(tags=["page"])

DEFAULT_DEALERSHIP_URL = "https://www.autonationtoyotafortmyers.com"


@router.get("/", response_class=HTMLResponse)
def form_page():
    """Serve the build form. The browser posts to /api/build and offers the zip for download."""
    html = FORM_PAGE_HTML.format(default_url=escape(DEFAULT_DEALERSHIP_URL, quote=True))
    return HTMLResponse(content=html, headers={"Cache-Control": "no-store"})


# -------------------------------------------------
# Health Check
# -------------------------------------------------
@router.get("/health")
def health():
    return {
        "status": "ok",
        "message": "Dealer Search CSV Builder is running!"
    }

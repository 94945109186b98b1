"""Landing page."""

from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from criticus.core.rate_limit import limiter

router = APIRouter(tags=["landing"])

LANDING_PAGE = Path(__file__).resolve().parents[1] / "static" / "index.html"


@lru_cache(maxsize=1)
def _landing_html() -> str:
    return LANDING_PAGE.read_text(encoding="utf-8")


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
@limiter.exempt
def landing_page() -> HTMLResponse:
    """Single-page site with the waitlist, demo, newsletter and collaborator forms."""
    return HTMLResponse(content=_landing_html(), status_code=200)

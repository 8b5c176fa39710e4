"""Page-info endpoint.

Routes
------
GET /api/v1/info?url=<page>
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from pageinfo.analyzer import AnalysisError, BaseURL, InvalidBaseURLError, analyze
from pageinfo.scraper import FetchError, fetch_page

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_URL = "invalid URL"
INTERNAL_SERVER_ERROR = "internal server error"


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class PageInfoResponse(BaseModel):
    html_version: str
    page_title: str
    headings: Dict[str, int]
    internal_links_count: int
    external_links_count: int
    inaccessible_links_count: int
    contains_login_form: bool


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.get("/info", response_model=PageInfoResponse)
def get_page_info(url: Optional[str] = None) -> Dict[str, Any]:
    """Fetch *url* and report its structure and link health.

    Runs in FastAPI's threadpool: fetching and probing are blocking.
    """
    url = (url or "").strip()
    if not url:
        raise HTTPException(status_code=400, detail=INVALID_URL)
    try:
        BaseURL.parse(url)
    except InvalidBaseURLError as exc:
        raise HTTPException(status_code=400, detail=INVALID_URL) from exc

    try:
        page = fetch_page(url)
    except FetchError as exc:
        raise HTTPException(status_code=500, detail=INTERNAL_SERVER_ERROR) from exc

    try:
        result = analyze(page.content, page.url)
    except AnalysisError as exc:
        logger.warning("Analysis of %s failed: %s", page.url, exc)
        raise HTTPException(status_code=500, detail=INTERNAL_SERVER_ERROR) from exc

    return result.to_dict()

"""HTTP fetcher for the page under analysis."""

from __future__ import annotations

import logging

import httpx

from pageinfo.config import settings
from pageinfo.scraper.models import RawPage

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """The page could not be retrieved, or the server did not answer 2xx."""


def fetch_page(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Raises:
        FetchError: On any transport error, invalid URL or host name, or
            4xx/5xx status.
    """
    try:
        with httpx.Client(
            headers={"User-Agent": settings.user_agent},
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
        logger.info("Fetching %s failed: %s", url, exc)
        raise FetchError(f"could not fetch {url}: {exc}") from exc

    logger.debug("Fetched %s (HTTP %d, %d bytes)", response.url, response.status_code, len(response.content))
    return RawPage(
        url=str(response.url),
        content=response.content,
        status_code=response.status_code,
    )

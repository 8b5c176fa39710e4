"""Scraper package - fetches the page to analyse."""

from pageinfo.scraper.fetcher import FetchError, fetch_page
from pageinfo.scraper.models import RawPage

__all__ = ["fetch_page", "FetchError", "RawPage"]

"""Analyzer package - page structure extraction and link reachability."""

from pageinfo.analyzer.core import analyze, assemble
from pageinfo.analyzer.errors import AnalysisError, InvalidBaseURLError, ParseError
from pageinfo.analyzer.models import BaseURL, LinkKind, LinkRecord, PageAnalysisResult

__all__ = [
    "analyze",
    "assemble",
    "AnalysisError",
    "InvalidBaseURLError",
    "ParseError",
    "BaseURL",
    "LinkKind",
    "LinkRecord",
    "PageAnalysisResult",
]

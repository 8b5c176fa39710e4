"""Fatal analysis errors.

Per-link probe failures are not represented here: they never leave the
prober and are only visible through ``inaccessible_links_count``.
"""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for every error :func:`pageinfo.analyzer.analyze` raises."""


class InvalidBaseURLError(AnalysisError):
    """The base URL lacks a scheme or a host, so links cannot be resolved."""


class ParseError(AnalysisError):
    """The markup could not be turned into a document tree."""

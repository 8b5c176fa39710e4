"""Data models for the page fetcher."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch.

    ``url`` is the final URL after redirects; relative links on the page
    resolve against it.
    """

    url: str
    content: bytes
    status_code: int

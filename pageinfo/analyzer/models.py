"""Data models for the page analysis pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping
from urllib.parse import urlsplit

from pageinfo.analyzer.errors import InvalidBaseURLError

HTML5 = "5.0"
HTML401 = "4.01"

HEADING_TAGS = frozenset(("h1", "h2", "h3", "h4", "h5", "h6"))


@dataclass(frozen=True)
class BaseURL:
    """Scheme, host and path of the page being analysed."""

    scheme: str
    host: str
    path: str = ""

    def __post_init__(self) -> None:
        if not self.scheme or not self.host:
            raise InvalidBaseURLError(
                f"base URL needs a scheme and a host (got scheme={self.scheme!r}, host={self.host!r})"
            )

    @classmethod
    def parse(cls, url: str) -> "BaseURL":
        """Build a :class:`BaseURL` from *url*.

        Raises:
            InvalidBaseURLError: If *url* is unparsable or has no scheme/host.
        """
        try:
            parts = urlsplit(url.strip())
        except ValueError as exc:
            raise InvalidBaseURLError(f"invalid base URL {url!r}: {exc}") from exc
        return cls(scheme=parts.scheme, host=parts.netloc, path=parts.path)

    def __str__(self) -> str:
        return f"{self.scheme}://{self.host}{self.path}"


class LinkKind(str, enum.Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"


@dataclass(frozen=True)
class LinkRecord:
    """One anchor href, classified and resolved at creation time."""

    raw_href: str
    kind: LinkKind
    resolved_url: str


@dataclass
class ExtractionState:
    """Mutable accumulator owned by a single :func:`walk` call."""

    html_version: str = HTML5
    page_title: str = ""
    title_found: bool = False
    headings: Dict[str, int] = field(default_factory=dict)
    links: List[LinkRecord] = field(default_factory=list)
    internal_links: int = 0
    external_links: int = 0
    contains_login_form: bool = False

    def set_title(self, text: str) -> None:
        if not self.title_found:
            self.page_title = text
            self.title_found = True

    def count_heading(self, tag: str) -> None:
        self.headings[tag] = self.headings.get(tag, 0) + 1

    def add_link(self, record: LinkRecord) -> None:
        self.links.append(record)
        if record.kind is LinkKind.INTERNAL:
            self.internal_links += 1
        else:
            self.external_links += 1

    @property
    def link_urls(self) -> List[str]:
        return [record.resolved_url for record in self.links]


@dataclass(frozen=True)
class PageAnalysisResult:
    """Final, immutable metadata about one page."""

    html_version: str
    page_title: str
    headings: Mapping[str, int]
    internal_links_count: int
    external_links_count: int
    inaccessible_links_count: int
    contains_login_form: bool

    def __post_init__(self) -> None:
        # Snapshot behind a read-only view so the result cannot be edited.
        object.__setattr__(self, "headings", MappingProxyType(dict(self.headings)))

    def to_dict(self) -> Dict[str, object]:
        """Return the wire representation used by the API and the CLI."""
        return {
            "html_version": self.html_version,
            "page_title": self.page_title,
            "headings": dict(self.headings),
            "internal_links_count": self.internal_links_count,
            "external_links_count": self.external_links_count,
            "inaccessible_links_count": self.inaccessible_links_count,
            "contains_login_form": self.contains_login_form,
        }

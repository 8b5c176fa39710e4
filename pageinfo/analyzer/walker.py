"""Markup parsing and the single-pass document walk.

``parse_markup`` turns raw markup into a BeautifulSoup tree; ``walk`` visits
every node of that tree exactly once, in document order, and collects the
structural facts the analysis reports.
"""

from __future__ import annotations

import logging
import re
from typing import IO, Dict, List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Doctype, NavigableString, ParserRejectedMarkup, Tag
from bs4.element import PageElement, PreformattedString

from pageinfo.analyzer.errors import ParseError
from pageinfo.analyzer.models import HEADING_TAGS, HTML401, BaseURL, ExtractionState
from pageinfo.analyzer.resolver import classify

logger = logging.getLogger(__name__)

# html.parser keeps the keyword when it is not spelled "DOCTYPE".
_LEGACY_DOCTYPE = re.compile(
    r"\s*(?:doctype\s+)?html\s+(?:public|system)\s+[\"']",
    re.IGNORECASE,
)

Markup = Union[bytes, str, IO[bytes], IO[str]]


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _keep_first_nonempty(attrs: Dict[str, str], key: str, value: str) -> None:
    """Fold a repeated attribute, keeping the first non-empty value."""
    if not attrs.get(key):
        attrs[key] = value


def parse_markup(markup: Markup) -> BeautifulSoup:
    """Parse *markup* (bytes, text or a readable stream) into a document tree.

    Raises:
        ParseError: If the stream cannot be read or the parser rejects it.
    """
    if hasattr(markup, "read"):
        try:
            markup = markup.read()
        except (OSError, ValueError) as exc:
            raise ParseError(f"could not read markup: {exc}") from exc

    try:
        return BeautifulSoup(
            markup,
            "html.parser",
            on_duplicate_attribute=_keep_first_nonempty,
        )
    except ParserRejectedMarkup as exc:
        raise ParseError(f"markup rejected by parser: {exc}") from exc


# ---------------------------------------------------------------------------
# Per-node rules
# ---------------------------------------------------------------------------

def _is_legacy_doctype(node: Doctype) -> bool:
    """``True`` for an ``html`` doctype carrying public/system identifiers.

    An identifier only counts when a ``PUBLIC`` or ``SYSTEM`` keyword is
    followed by a quoted string; other trailing tokens are ignored.
    """
    return _LEGACY_DOCTYPE.match(str(node)) is not None


def _is_text(node: PageElement) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def _visit_element(tag: Tag, state: ExtractionState, base: BaseURL) -> None:
    name = tag.name
    if name in HEADING_TAGS:
        state.count_heading(name)
    elif name == "a":
        # Repeated hrefs were folded to the first non-empty one at parse time.
        href = tag.get("href")
        if href:
            state.add_link(classify(href, base))
    elif name == "input":
        if tag.get("type") == "password":
            state.contains_login_form = True


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------

def walk(doc: BeautifulSoup, base: BaseURL) -> ExtractionState:
    """Collect version, title, headings, links and login-form flag from *doc*.

    Pre-order depth-first traversal driven by an explicit stack of
    ``(node, parent)`` pairs, so deeply nested documents cannot hit the
    recursion limit.  The tree is never modified.
    """
    state = ExtractionState()
    stack: List[Tuple[PageElement, Optional[Tag]]] = [(doc, None)]

    while stack:
        node, parent = stack.pop()

        if isinstance(node, Doctype):
            if _is_legacy_doctype(node):
                state.html_version = HTML401
        elif _is_text(node):
            if parent is not None and parent.name == "title":
                state.set_title(str(node))
        elif isinstance(node, Tag):
            if node is not doc:
                _visit_element(node, state, base)
            # Reversed so the leftmost child is popped first.
            stack.extend((child, node) for child in reversed(node.contents))

    logger.debug(
        "Walked document: version=%s title=%r headings=%s links=%d",
        state.html_version,
        state.page_title,
        state.headings,
        len(state.links),
    )
    return state

"""Analysis pipeline: walk + resolve, probe, assemble.

The three phases run strictly in sequence.  Fatal errors (bad base URL,
unparsable markup) are raised before any probe is dispatched.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from pageinfo.analyzer.models import BaseURL, ExtractionState, PageAnalysisResult
from pageinfo.analyzer.prober import probe_links
from pageinfo.analyzer.walker import Markup, parse_markup, walk

logger = logging.getLogger(__name__)


def assemble(state: ExtractionState, inaccessible: int) -> PageAnalysisResult:
    """Combine the walk results with the prober's count."""
    return PageAnalysisResult(
        html_version=state.html_version,
        page_title=state.page_title,
        headings=dict(state.headings),
        internal_links_count=state.internal_links,
        external_links_count=state.external_links,
        inaccessible_links_count=inaccessible,
        contains_login_form=state.contains_login_form,
    )


def analyze(
    markup: Markup,
    base: Union[BaseURL, str],
    *,
    concurrency: Optional[int] = None,
    timeout: Optional[float] = None,
    deadline: Optional[float] = None,
) -> PageAnalysisResult:
    """Analyse an already-fetched page.

    Args:
        markup: Response body as bytes, text or a readable stream.
        base: URL the body was fetched from, as a :class:`BaseURL` or string.
        concurrency: Override for ``settings.probe_concurrency``.
        timeout: Override for ``settings.probe_timeout``.
        deadline: Override for ``settings.probe_deadline``.

    Raises:
        InvalidBaseURLError: If *base* has no scheme or host.
        ParseError: If *markup* cannot be parsed.
    """
    if not isinstance(base, BaseURL):
        base = BaseURL.parse(base)

    doc = parse_markup(markup)
    state = walk(doc, base)

    inaccessible = probe_links(
        state.link_urls,
        concurrency=concurrency,
        timeout=timeout,
        deadline=deadline,
    )

    result = assemble(state, inaccessible)
    logger.info(
        "Analysed %s: %d internal, %d external, %d inaccessible link(s)",
        base,
        result.internal_links_count,
        result.external_links_count,
        result.inaccessible_links_count,
    )
    return result

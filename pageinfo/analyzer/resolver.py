"""URL classification and resolution of anchor hrefs.

An href carrying a scheme (``https:``, ``mailto:`` ...) is *external* and kept
verbatim.  Anything else is *internal* and resolved against the directory of
the page being analysed: a trailing file name in the base path
(``/docs/intro.html``) is never treated as a directory.

Scheme-relative hrefs (``//cdn.example.org/lib.js``) have no scheme, so they
are counted as internal, but they name their own host: they are resolved
with standard URL-join semantics (page scheme + href) rather than being
appended under the page host.
"""

from __future__ import annotations

import posixpath
from urllib.parse import urlsplit

from pageinfo.analyzer.models import BaseURL, LinkKind, LinkRecord


def is_external(href: str) -> bool:
    """Return ``True`` if *href* parses as a URL with a non-empty scheme."""
    try:
        return bool(urlsplit(href).scheme)
    except ValueError:
        return False


def _resolution_root(base_path: str) -> str:
    """Return the directory internal links are joined onto."""
    last_segment = base_path.rsplit("/", 1)[-1]
    if "." in last_segment:
        return posixpath.dirname(base_path)
    return base_path


def _clean(path: str) -> str:
    """Canonicalise *path* as an absolute path.

    Duplicate separators and ``.`` segments are collapsed; ``..`` never
    climbs above the root.
    """
    return posixpath.normpath("/" + path.lstrip("/"))


def resolve_internal(href: str, base: BaseURL) -> str:
    """Resolve the scheme-less *href* to an absolute URL on *base*'s host."""
    if href.startswith("//"):
        # Scheme-relative reference: only the scheme comes from the page.
        return f"{base.scheme}:{href}"

    if href.startswith("/"):
        path = _clean(href)
    else:
        path = _clean(posixpath.join(_resolution_root(base.path), href))

    return f"{base.scheme}://{base.host}{path}"


def classify(href: str, base: BaseURL) -> LinkRecord:
    """Classify *href* and resolve it into an immutable :class:`LinkRecord`."""
    if is_external(href):
        return LinkRecord(raw_href=href, kind=LinkKind.EXTERNAL, resolved_url=href)
    return LinkRecord(
        raw_href=href,
        kind=LinkKind.INTERNAL,
        resolved_url=resolve_internal(href, base),
    )

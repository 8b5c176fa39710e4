"""Tests for link classification and internal-link resolution."""

from __future__ import annotations

import pytest

from pageinfo.analyzer.errors import InvalidBaseURLError
from pageinfo.analyzer.models import BaseURL, LinkKind
from pageinfo.analyzer.resolver import classify, is_external, resolve_internal


def _resolve(href: str, base: str) -> str:
    return resolve_internal(href, BaseURL.parse(base))


# ---------------------------------------------------------------------------
# BaseURL
# ---------------------------------------------------------------------------

class TestBaseURL:
    def test_parse_splits_components(self) -> None:
        base = BaseURL.parse("https://example.com:8443/docs/intro.html?x=1")
        assert base.scheme == "https"
        assert base.host == "example.com:8443"
        assert base.path == "/docs/intro.html"

    def test_missing_scheme_rejected(self) -> None:
        with pytest.raises(InvalidBaseURLError):
            BaseURL.parse("github.com")

    def test_missing_host_rejected(self) -> None:
        with pytest.raises(InvalidBaseURLError):
            BaseURL.parse("https://")

    def test_direct_construction_validated(self) -> None:
        with pytest.raises(InvalidBaseURLError):
            BaseURL(scheme="", host="example.com")

    def test_unparsable_url_rejected(self) -> None:
        with pytest.raises(InvalidBaseURLError):
            BaseURL.parse("http://[::1")


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

class TestIsExternal:
    @pytest.mark.parametrize(
        "href",
        ["https://facebook.com", "http://example.org/a", "mailto:me@example.com", "ftp://host/f"],
    )
    def test_scheme_means_external(self, href: str) -> None:
        assert is_external(href) is True

    @pytest.mark.parametrize(
        "href",
        ["/world", "page.html", "../up", "#top", "?q=1", "//cdn.example.org/lib.js"],
    )
    def test_no_scheme_means_internal(self, href: str) -> None:
        assert is_external(href) is False

    def test_unparsable_href_is_internal(self) -> None:
        assert is_external("http://[::1") is False


class TestClassify:
    def test_internal_record(self) -> None:
        record = classify("/world", BaseURL.parse("https://example.com/"))
        assert record.kind is LinkKind.INTERNAL
        assert record.raw_href == "/world"
        assert record.resolved_url == "https://example.com/world"

    def test_external_record_unchanged(self) -> None:
        record = classify("https://facebook.com", BaseURL.parse("https://example.com/"))
        assert record.kind is LinkKind.EXTERNAL
        assert record.resolved_url == "https://facebook.com"


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

class TestResolveInternal:
    def test_absolute_path(self) -> None:
        assert _resolve("/world", "https://example.com/") == "https://example.com/world"

    def test_absolute_path_ignores_base_directory(self) -> None:
        assert _resolve("/world", "https://example.com/a/b/") == "https://example.com/world"

    def test_relative_to_directory_base(self) -> None:
        assert _resolve("sub/page", "https://example.com/docs/") == "https://example.com/docs/sub/page"

    def test_base_without_extension_is_a_directory(self) -> None:
        assert _resolve("sub", "https://example.com/docs") == "https://example.com/docs/sub"

    def test_file_name_in_base_is_not_a_directory(self) -> None:
        assert (
            _resolve("page2.html", "https://example.com/docs/intro.html")
            == "https://example.com/docs/page2.html"
        )

    def test_parent_segments_collapsed(self) -> None:
        assert _resolve("../a", "https://example.com/docs/intro.html") == "https://example.com/a"

    def test_parent_segments_stop_at_root(self) -> None:
        assert _resolve("../../../a", "https://example.com/docs/") == "https://example.com/a"

    def test_dot_and_duplicate_separators_collapsed(self) -> None:
        assert _resolve("/a//b/./c", "https://example.com/") == "https://example.com/a/b/c"

    def test_empty_base_path(self) -> None:
        assert _resolve("a", "https://example.com") == "https://example.com/a"

    def test_port_is_preserved(self) -> None:
        assert _resolve("y", "http://localhost:8000/x.html") == "http://localhost:8000/y"

    def test_fragment_passes_through(self) -> None:
        assert (
            _resolve("intro.html#section", "https://example.com/docs/")
            == "https://example.com/docs/intro.html#section"
        )

    def test_scheme_relative_takes_page_scheme(self) -> None:
        assert (
            _resolve("//cdn.example.org/lib.js", "https://example.com/")
            == "https://cdn.example.org/lib.js"
        )

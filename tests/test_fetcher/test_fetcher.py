"""Tests for stylesheet discovery and download."""
from __future__ import annotations

import threading

import httpx
import pytest

from darkgen._http import HttpClient
from darkgen.errors import NetworkError
from darkgen.fetcher import extract_stylesheet_links, fetch_all, fetch_page_links, pull_css

PAGE = """<!DOCTYPE html>
<html>
<head>
  <link rel="icon" href="/favicon.ico">
  <link rel="stylesheet" href="/assets/frameworks.css">
  <link rel="alternate stylesheet" href="/assets/alt.css">
  <link rel="stylesheet">
  <link crossorigin="anonymous" media="all" rel="stylesheet" href="https://cdn.example.test/github.css">
</head>
<body></body>
</html>
"""


def _client(routes: dict[str, str], seen: list[str] | None = None) -> HttpClient:
    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if seen is not None:
            seen.append(url)
        if url not in routes:
            return httpx.Response(404, text="not found")
        return httpx.Response(200, text=routes[url])

    return HttpClient(transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# Link extraction
# ---------------------------------------------------------------------------


class TestExtractStylesheetLinks:
    def test_stylesheet_links_in_document_order(self):
        assert extract_stylesheet_links(PAGE) == [
            "/assets/frameworks.css",
            "https://cdn.example.test/github.css",
        ]

    def test_rel_case_insensitive(self):
        assert extract_stylesheet_links('<link REL="StyleSheet" href="a.css">') == ["a.css"]

    def test_no_links(self):
        assert extract_stylesheet_links("<html><head></head></html>") == []

    def test_empty_href_ignored(self):
        assert extract_stylesheet_links('<link rel="stylesheet" href="">') == []


class TestFetchPageLinks:
    def test_fetches_page(self):
        client = _client({"https://example.test/": PAGE})
        assert fetch_page_links(client, "https://example.test/") == [
            "/assets/frameworks.css",
            "https://cdn.example.test/github.css",
        ]
        client.close()

    def test_page_failure_propagates(self):
        client = _client({})
        with pytest.raises(NetworkError):
            fetch_page_links(client, "https://example.test/")
        client.close()


# ---------------------------------------------------------------------------
# Concurrent download
# ---------------------------------------------------------------------------


class TestFetchAll:
    def test_joins_in_request_order(self):
        routes = {
            "https://example.test/a.css": ".a{}",
            "https://example.test/b.css": ".b{}",
            "https://example.test/c.css": ".c{}",
        }
        client = _client(routes)
        css = fetch_all(client, ["a.css", "b.css", "c.css"], "https://example.test/")
        assert css == ".a{}\n.b{}\n.c{}"
        client.close()

    def test_order_independent_of_completion(self):
        release_first = threading.Event()

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/slow.css":
                release_first.wait(timeout=5)
                return httpx.Response(200, text="slow")
            release_first.set()
            return httpx.Response(200, text="fast")

        client = HttpClient(transport=httpx.MockTransport(handler))
        css = fetch_all(client, ["/slow.css", "/fast.css"], "https://example.test/")
        assert css == "slow\nfast"
        client.close()

    def test_relative_and_absolute_hrefs_resolved(self):
        seen: list[str] = []
        routes = {
            "https://example.test/assets/x.css": "x",
            "https://cdn.example.test/y.css": "y",
        }
        client = _client(routes, seen)
        fetch_all(client, ["/assets/x.css", "https://cdn.example.test/y.css"], "https://example.test/page")
        assert sorted(seen) == sorted(routes)
        client.close()

    def test_no_hrefs(self):
        client = _client({})
        assert fetch_all(client, [], "https://example.test/") == ""
        client.close()

    def test_single_failure_aborts(self):
        client = _client({"https://example.test/a.css": ".a{}"})
        with pytest.raises(NetworkError) as exc_info:
            fetch_all(client, ["a.css", "missing.css"], "https://example.test/")
        assert exc_info.value.status_code == 404
        client.close()


class TestPullCss:
    def test_pulls_linked_stylesheets(self):
        routes = {
            "https://example.test/": PAGE,
            "https://example.test/assets/frameworks.css": ".f { color: #586069; }",
            "https://cdn.example.test/github.css": ".g { border-top: 0; }",
        }
        client = _client(routes)
        css = pull_css(client, "https://example.test/")
        assert css == ".f { color: #586069; }\n.g { border-top: 0; }"
        client.close()

"""Discover and download a page's linked stylesheets."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from darkgen._http import HttpClient

logger = logging.getLogger(__name__)


def extract_stylesheet_links(html: str) -> list[str]:
    """Return the hrefs of ``<link rel="stylesheet">`` tags in document order."""
    soup = BeautifulSoup(html, "html.parser")
    hrefs: list[str] = []
    for link in soup.find_all("link"):
        rel = link.get("rel") or []
        if isinstance(rel, str):
            rel = rel.split()
        href = link.get("href")
        if [r.lower() for r in rel] == ["stylesheet"] and href:
            hrefs.append(href)
    return hrefs


def fetch_page_links(client: HttpClient, url: str) -> list[str]:
    """Fetch *url* and return the stylesheet hrefs it links to, unresolved."""
    hrefs = extract_stylesheet_links(client.get_text(url))
    logger.info("Found %d stylesheet link(s) on %s", len(hrefs), url)
    return hrefs


def fetch_all(client: HttpClient, hrefs: Sequence[str], base_url: str) -> str:
    """Fetch every href concurrently and join the bodies with newlines.

    Bodies are joined in the order of *hrefs*, regardless of which request
    finishes first. The first failure propagates.
    """
    if not hrefs:
        return ""
    urls = [urljoin(base_url, href) for href in hrefs]
    with ThreadPoolExecutor(max_workers=len(urls)) as pool:
        bodies = list(pool.map(client.get_text, urls))
    return "\n".join(bodies)


def pull_css(client: HttpClient, url: str) -> str:
    """Return the concatenated CSS of every stylesheet linked from *url*."""
    return fetch_all(client, fetch_page_links(client, url), url)

"""HTTP fetcher for the opcode matrix index and its instruction pages."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Iterator, List

import httpx
from bs4 import BeautifulSoup

from opmatrix.config import settings
from opmatrix.scraper.cache import write_page
from opmatrix.scraper.models import CachedPage, RawPage

_DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; opmatrix/1.0)"
}


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
    """
    with httpx.Client(
        headers=_DEFAULT_HEADERS,
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(url)
        response.raise_for_status()
        html = response.text
        status_code = response.status_code

    return RawPage(url=url, html=html, status_code=status_code)


def collect_detail_links(html: str) -> List[str]:
    """Return the unique ``href`` values of anchors inside the ``wikitable`` cells.

    Raises:
        ValueError: If the page has no ``.wikitable``.
    """
    soup = BeautifulSoup(html, "html.parser")
    table = soup.select_one(".wikitable")
    if table is None:
        raise ValueError("Index page has no .wikitable")

    seen: set[str] = set()
    links: List[str] = []
    for anchor in table.select("td > a"):
        href = anchor.get("href")
        if href and href not in seen:
            seen.add(href)
            links.append(href)
    return links


def op_name_from_path(path: str) -> str:
    """Return the mnemonic segment of a wiki path (``/wiki/ADC`` -> ``ADC``)."""
    segments = path.split("/")
    if len(segments) < 3 or not segments[2]:
        raise ValueError(f"Cannot derive an opcode name from link {path!r}")
    return segments[2]


def fetch_index(index_url: str | None = None) -> List[str]:
    """Fetch the opcode matrix and return its deduplicated detail links."""
    raw = fetch_url(index_url or settings.index_url)
    return collect_detail_links(raw.html)


def fetch_opcode_pages(
    links: List[str],
    cache_dir: Path | None = None,
    base_url: str | None = None,
) -> Iterator[CachedPage]:
    """Fetch every detail link in turn and write it to the cache.

    Yields each :class:`CachedPage` right after it has been written.  Two links
    sharing an identifier write the same file; the later one wins.
    """
    target = settings.ensure_cache_dir(cache_dir)
    host = base_url or settings.base_url

    for path in links:
        op = op_name_from_path(path)
        raw = fetch_url(f"{host}{path}")
        page = CachedPage(identifier=op, html=raw.html)
        write_page(target, page)
        yield page
        if settings.rate_limit_delay:
            time.sleep(settings.rate_limit_delay)

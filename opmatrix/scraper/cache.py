"""On-disk page cache shared by the fetch and generate phases.

One file per instruction, ``<identifier>.html``, written with
``settings.cache_encoding``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from opmatrix.config import settings
from opmatrix.scraper.models import CachedPage


def page_path(cache_dir: Path, identifier: str) -> Path:
    return cache_dir / f"{identifier}.html"


def identifier_from_filename(name: str) -> str:
    """Everything before the first ``.`` of the file name."""
    return name.split(".")[0]


def write_page(cache_dir: Path, page: CachedPage) -> Path:
    """Write *page* to *cache_dir*, overwriting any file with the same identifier."""
    path = page_path(cache_dir, page.identifier)
    path.write_text(page.html, encoding=settings.cache_encoding)
    return path


def iter_cached_pages(cache_dir: Path | None = None) -> Iterator[CachedPage]:
    """Yield every cached page, ordered by file name.

    Raises:
        FileNotFoundError: If the cache directory does not exist.
    """
    source = cache_dir if cache_dir is not None else settings.cache_dir
    if not source.is_dir():
        raise FileNotFoundError(f"Cache directory not found: {source}")

    for path in sorted(source.glob("*.html")):
        yield CachedPage(
            identifier=identifier_from_filename(path.name),
            html=path.read_text(encoding=settings.cache_encoding),
        )

"""Scraper package: fetch, cache and row extraction."""

from opmatrix.scraper.cache import iter_cached_pages, write_page
from opmatrix.scraper.extractor import PageStructureError, parse_rows
from opmatrix.scraper.fetcher import (
    collect_detail_links,
    fetch_index,
    fetch_opcode_pages,
    fetch_url,
    op_name_from_path,
)
from opmatrix.scraper.models import CachedPage, NormalizedOpcodeEntry, OpcodeRow, RawPage

__all__ = [
    "fetch_url",
    "fetch_index",
    "fetch_opcode_pages",
    "collect_detail_links",
    "op_name_from_path",
    "iter_cached_pages",
    "write_page",
    "parse_rows",
    "PageStructureError",
    "RawPage",
    "CachedPage",
    "OpcodeRow",
    "NormalizedOpcodeEntry",
]

"""opmatrix CLI: scrape the 65c816 opcode matrix and generate opcode-table lines.

Usage:
    python cli/main.py --help

The two commands are run one after the other; the cache directory is the
only thing they share:
    fetch     → download the matrix and every instruction page into the cache
    generate  → parse the cached pages and print the opcode-table snippets
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from opmatrix.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import List, Optional

import httpx
import typer

from opmatrix.codegen import (
    ADDRESSING_MODES,
    FormatViolation,
    normalize_row,
    render_opcode_line,
    render_row_dump,
    summarize_labels,
)
from opmatrix.config import origin_of, settings
from opmatrix.scraper import (
    PageStructureError,
    fetch_index,
    fetch_opcode_pages,
    iter_cached_pages,
    parse_rows,
)

app = typer.Typer(
    name="opmatrix",
    help="65c816 opcode matrix scraper and opcode-table generator.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Phase 1 — fetch
# ---------------------------------------------------------------------------
@app.command("fetch")
def fetch(
    index_url: Optional[str] = typer.Option(None, help="Opcode matrix page to start from."),
    cache_dir: Optional[Path] = typer.Option(None, help="Directory for the cached pages."),
) -> None:
    """Download the opcode matrix and cache every linked instruction page."""
    url = index_url or settings.index_url
    target = cache_dir or settings.cache_dir

    try:
        typer.echo(f"[fetch] Index {url!r} …")
        links = fetch_index(url)
        typer.echo(f"[fetch] {len(links)} unique links:")
        for path in links:
            typer.echo(f"  {path}")

        count = 0
        for page in fetch_opcode_pages(links, cache_dir=target, base_url=origin_of(url)):
            count += 1
            typer.echo(f"[fetch] {page.identifier} → {target / (page.identifier + '.html')}")
    except (httpx.HTTPError, ValueError) as exc:
        typer.echo(f"❌ Error: {exc}")
        raise typer.Exit(code=1)

    typer.echo(f"[fetch] Cached {count} pages in {target}")


# ---------------------------------------------------------------------------
# Phase 2 — generate
# ---------------------------------------------------------------------------
@app.command("generate")
def generate(
    cache_dir: Optional[Path] = typer.Option(None, help="Directory holding the cached pages."),
    only: Optional[List[str]] = typer.Option(None, "--only", help="Limit to these mnemonics."),
    quiet: bool = typer.Option(False, "--quiet", help="Skip the per-row field dump."),
) -> None:
    """Print one opcode-table line per row of every cached instruction page."""
    wanted = {m.upper() for m in only} if only else None
    entries = []

    try:
        for page in iter_cached_pages(cache_dir or settings.cache_dir):
            if wanted is not None and page.identifier.upper() not in wanted:
                continue
            for row in parse_rows(page.html, source=page.identifier):
                if not quiet:
                    typer.echo(render_row_dump(page.identifier, row))
                try:
                    entry = normalize_row(page.identifier, row)
                except FormatViolation as exc:
                    typer.echo(f"❌ {page.identifier}: {exc}")
                    raise typer.Exit(code=1)
                entries.append(entry)
                typer.echo(render_opcode_line(entry))
    except (FileNotFoundError, PageStructureError) as exc:
        typer.echo(f"❌ Error: {exc}")
        raise typer.Exit(code=1)

    labels, unknown = summarize_labels(entries)
    typer.echo("")
    typer.echo(f"[generate] {len(entries)} opcodes, {len(labels)} addressing-mode labels:")
    for label in labels:
        typer.echo(f"  {label}")
    if unknown:
        typer.echo(f"[generate] {len(unknown)} labels missing from the table:")
        for label in unknown:
            typer.echo(f"  {label}")


@app.command("modes")
def modes() -> None:
    """List the addressing-mode table; unassigned labels are marked with '-'."""
    for label, symbol in ADDRESSING_MODES.items():
        typer.echo(f"  {label:<40} {symbol or '-'}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()

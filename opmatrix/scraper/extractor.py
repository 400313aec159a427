"""Row extraction: turns a cached instruction page into :class:`OpcodeRow` records."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, Tag

from opmatrix.scraper.models import OpcodeRow

# Opcode rows live in the third body section of the wikitable.
_OPCODE_TBODY_INDEX = 2
_REQUIRED_CELLS = 4


class PageStructureError(ValueError):
    """The cached page does not have the expected table layout."""


def _cell_text(cell: Tag) -> str:
    return cell.get_text().strip()


def _row_from_cells(cells: List[Tag]) -> OpcodeRow:
    return OpcodeRow(
        addressing_mode=_cell_text(cells[0]),
        opcode=_cell_text(cells[1]),
        bytes=_cell_text(cells[2]),
        clocks=_cell_text(cells[3]),
    )


def parse_rows(html: str, source: str = "page") -> List[OpcodeRow]:
    """Return one :class:`OpcodeRow` per row of the opcode table in *html*.

    Rows made only of header cells are skipped.  *source* names the page in
    error messages.

    Raises:
        PageStructureError: If the table, its opcode section, or a row's cells
            are missing.
    """
    soup = BeautifulSoup(html, "html.parser")
    table = soup.select_one(".wikitable")
    if table is None:
        raise PageStructureError(f"{source}: no .wikitable found")

    sections = table.find_all("tbody")
    if len(sections) <= _OPCODE_TBODY_INDEX:
        raise PageStructureError(
            f"{source}: expected at least {_OPCODE_TBODY_INDEX + 1} tbody "
            f"sections, found {len(sections)}"
        )

    rows: List[OpcodeRow] = []
    for tr in sections[_OPCODE_TBODY_INDEX].find_all("tr"):
        cells = tr.find_all("td")
        if not cells:
            continue
        if len(cells) < _REQUIRED_CELLS:
            raise PageStructureError(
                f"{source}: row has {len(cells)} cells, expected {_REQUIRED_CELLS}: "
                f"{tr.get_text(' ', strip=True)!r}"
            )
        rows.append(_row_from_cells(cells))
    return rows

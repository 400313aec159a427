"""Normalisation of raw table rows into :class:`NormalizedOpcodeEntry` records."""

from __future__ import annotations

from typing import List

from opmatrix.codegen.counts import parse_byte_count, parse_clock_count, parse_opcode
from opmatrix.codegen.modes import lookup_mode
from opmatrix.scraper.extractor import parse_rows
from opmatrix.scraper.models import CachedPage, NormalizedOpcodeEntry, OpcodeRow


def normalize_row(mnemonic: str, row: OpcodeRow) -> NormalizedOpcodeEntry:
    """Convert *row* of instruction *mnemonic* into numeric form.

    Unknown or unassigned addressing-mode labels yield an empty
    ``addressing_mode``; ``mode_known`` tells the two apart.

    Raises:
        FormatViolation: If the opcode, byte or clock cell is malformed.
    """
    emulation_bytes, native_bytes = parse_byte_count(row.bytes)
    emulation_clocks, native_clocks = parse_clock_count(row.clocks)
    symbol = lookup_mode(row.addressing_mode)

    return NormalizedOpcodeEntry(
        mnemonic=mnemonic,
        opcode=parse_opcode(row.opcode),
        addressing_mode=symbol or "",
        emulation_bytes=emulation_bytes,
        native_bytes=native_bytes,
        emulation_clocks=emulation_clocks,
        native_clocks=native_clocks,
        raw_mode=row.addressing_mode,
        mode_known=symbol is not None,
    )


def extract_entries(page: CachedPage) -> List[NormalizedOpcodeEntry]:
    """Parse and normalise every opcode row of a cached instruction page."""
    rows = parse_rows(page.html, source=page.identifier)
    return [normalize_row(page.identifier, row) for row in rows]

"""Code generation: cell parsing, addressing-mode lookup and snippet rendering."""

from opmatrix.codegen.counts import (
    FormatViolation,
    parse_byte_count,
    parse_clock_count,
    parse_opcode,
)
from opmatrix.codegen.emit import render_opcode_line, render_row_dump, summarize_labels
from opmatrix.codegen.modes import ADDRESSING_MODES, lookup_mode
from opmatrix.codegen.normalize import extract_entries, normalize_row

__all__ = [
    "FormatViolation",
    "parse_byte_count",
    "parse_clock_count",
    "parse_opcode",
    "ADDRESSING_MODES",
    "lookup_mode",
    "normalize_row",
    "extract_entries",
    "render_opcode_line",
    "render_row_dump",
    "summarize_labels",
]

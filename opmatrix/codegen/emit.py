"""Text rendering of opcode entries and run diagnostics."""

from __future__ import annotations

from typing import Iterable, List

from opmatrix.scraper.models import NormalizedOpcodeEntry, OpcodeRow


def render_opcode_line(entry: NormalizedOpcodeEntry) -> str:
    """Render *entry* as one ``m.insert(...)`` line of the opcode table.

    Pairs are ``(bytes, clocks)``, native mode first.
    """
    return (
        f"m.insert(0x{entry.opcode:02X}, OpCode::new("
        f"0x{entry.opcode:02X}, "
        f'"{entry.mnemonic}", '
        f"({entry.native_bytes}, {entry.native_clocks}), "
        f"({entry.emulation_bytes}, {entry.emulation_clocks}), "
        f"CycleCalcMode::None, "
        f"AddressingMode::{entry.addressing_mode}));"
    )


def render_row_dump(mnemonic: str, row: OpcodeRow) -> str:
    """One-line dump of the raw cell text, for checking the scrape by eye."""
    return (
        f"{mnemonic}: "
        f"addressing_mode={row.addressing_mode!r} "
        f"opcode={row.opcode!r} "
        f"bytes={row.bytes!r} "
        f"clocks={row.clocks!r}"
    )


def summarize_labels(entries: Iterable[NormalizedOpcodeEntry]) -> tuple[List[str], List[str]]:
    """Return ``(all_labels, unknown_labels)``, each deduplicated and sorted."""
    seen: set[str] = set()
    unknown: set[str] = set()
    for entry in entries:
        seen.add(entry.raw_mode)
        if not entry.mode_known:
            unknown.add(entry.raw_mode)
    return sorted(seen), sorted(unknown)

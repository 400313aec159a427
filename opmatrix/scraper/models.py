"""Data models for the opcode-matrix scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class CachedPage:
    """One instruction page as stored in the cache directory."""

    identifier: str
    html: str


@dataclass
class OpcodeRow:
    """Trimmed cell text of one row of an instruction's opcode table."""

    addressing_mode: str
    opcode: str
    bytes: str
    clocks: str


@dataclass
class NormalizedOpcodeEntry:
    mnemonic: str
    opcode: int
    addressing_mode: str
    emulation_bytes: int
    native_bytes: int
    emulation_clocks: int
    native_clocks: int
    raw_mode: str
    mode_known: bool

"""Parsers for the byte-count and clock-count cells of the opcode tables.

Both return an ``(emulation, native)`` pair.  Anything that does not match
the exact formats below raises :class:`FormatViolation`; a new format on the
wiki needs a human to look at it.
"""

from __future__ import annotations

import re
from typing import Tuple

# "2", "1 byte", "3 bytes" or "2/3 bytes" (emulation/native)
_BYTES_RE = re.compile(r"(?P<emulation>[1-9])(?:/(?P<native>[1-9]) bytes| bytes?)?")
# "2 cycles" or "2 cycles*"; the block moves carry a per-byte suffix
_CLOCKS_RE = re.compile(r"(?P<count>[1-9]) cycles\*?")
_PER_BYTE_SUFFIX = " per byte moved"


class FormatViolation(ValueError):
    """A table cell did not match the expected format."""

    def __init__(self, kind: str, text: str) -> None:
        super().__init__(f"Unrecognised {kind} format: {text!r}")
        self.kind = kind
        self.text = text


def parse_byte_count(text: str) -> Tuple[int, int]:
    """Parse a byte-count cell into ``(emulation, native)``."""
    match = _BYTES_RE.fullmatch(text)
    if match is None:
        raise FormatViolation("byte count", text)
    emulation = int(match.group("emulation"))
    native = match.group("native")
    return emulation, int(native) if native else emulation


def parse_clock_count(text: str) -> Tuple[int, int]:
    """Parse a clock-count cell into ``(emulation, native)``.

    The wiki gives a single figure for both modes, so the pair is always equal.
    """
    match = _CLOCKS_RE.fullmatch(text.removesuffix(_PER_BYTE_SUFFIX))
    if match is None:
        raise FormatViolation("clock count", text)
    count = int(match.group("count"))
    return count, count


def parse_opcode(text: str) -> int:
    """Parse the hexadecimal opcode cell (``"69"`` -> ``0x69``)."""
    try:
        value = int(text, 16)
    except ValueError:
        raise FormatViolation("opcode", text) from None
    if not 0 <= value <= 0xFF:
        raise FormatViolation("opcode", text)
    return value

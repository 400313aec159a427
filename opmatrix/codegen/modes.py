"""Addressing-mode labels as written on the wiki, mapped to ``AddressingMode`` names.

Keys are the exact cell text, footnote markers included.  An empty value means
the label has been seen but no enum variant has been chosen for it yet; run
``opmatrix generate`` and check its list of missing labels to keep this table
complete.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

ADDRESSING_MODES: Mapping[str, str] = MappingProxyType({
    # Immediate width depends on the m/x flags.
    "Immediate": "",
    "Immediate[1]": "",
    "Immediate[2]": "",
    "Accumulator": "Accumulator",
    "Implied": "Implied",
    "Implied[4]": "",
    "Absolute": "Absolute",
    "Absolute Long": "Absolute_Long",
    "Absolute Indexed by X": "Absolute_Indexed_by_X",
    "Absolute Indexed by Y": "Absolute_Indexed_by_Y",
    "Absolute Long Indexed by X": "Absolute_Long_Indexed_by_X",
    "Absolute Indirect": "Indirect",
    "Absolute Indirect Long": "",
    "Absolute Indexed Indirect": "",
    "Direct Page": "Direct_Page",
    "Direct Page Indexed by X": "Direct_Page_Indexed_by_X",
    "Direct Page Indexed by Y": "Direct_Page_Indexed_by_Y",
    "Direct Page Indirect": "Direct_Page_Indirect",
    "Direct Page Indirect Long": "Direct_Page_Indirect_Long",
    "Direct Page Indexed Indirect by X": "Direct_Page_Indexed_Indirect_by_X",
    "Direct Page Indirect Indexed by Y": "Direct_Page_Indirect_Indexed_by_Y",
    "Direct Page Indirect Long Indexed by Y": "Direct_Page_Indirect_Long_Indexed_by_Y",
    "Stack Relative": "Stack_Relative",
    "Stack Relative Indirect Indexed by Y": "Stack_Relative_Indirect_Indexed_by_Y",
    "Program Counter Relative": "Relative",
    "Program Counter Relative Long": "",
    "Block Move": "",
    "Stack (Push)": "",
    "Stack (Pull)": "",
    "Stack (Interrupt)": "",
    "Stack (RTI)": "",
    "Stack (RTS)": "",
    "Stack (RTL)": "",
    "Stack (Absolute)": "",
    "Stack (Direct Page Indirect)": "",
    "Stack (Program Counter Relative Long)": "",
})


def lookup_mode(label: str) -> Optional[str]:
    """Return the symbol for *label*.

    ``None`` means the label is not in the table at all; ``""`` means it is
    known but has no symbol yet.
    """
    return ADDRESSING_MODES.get(label)

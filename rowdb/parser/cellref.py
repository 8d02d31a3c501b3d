"""
Cell References - Parses spreadsheet-style references such as "Name5"

A reference is a column name followed by a 1-based row number. The
split happens at the first digit, so the column name may not contain
digits and everything from the first digit on must be digits.
"""

import string
from dataclasses import dataclass

from ..core.errors import InvalidReferenceError


@dataclass(frozen=True)
class CellReference:
    """A parsed reference; row is 0-based"""
    column: str
    row: int

    @property
    def label(self) -> str:
        return f"{self.column}{self.row + 1}"


def parse_cell_reference(ref: str) -> CellReference:
    """
    Parse "Name5" into CellReference("Name", 4).

    Raises:
        InvalidReferenceError: If there is no column part, no row part,
            anything but digits after the first digit, or row 0
    """
    split = 0
    while split < len(ref) and ref[split] not in string.digits:
        split += 1

    if split == 0 or split == len(ref):
        raise InvalidReferenceError(f"Invalid cell reference: {ref}")

    column, row_str = ref[:split], ref[split:]
    if not all(ch in string.digits for ch in row_str):
        raise InvalidReferenceError(f"Invalid row number: {row_str}")

    row = int(row_str)
    if row == 0:
        raise InvalidReferenceError(f"Invalid row number: {row_str}")

    return CellReference(column, row - 1)

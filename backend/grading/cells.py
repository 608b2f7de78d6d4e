"""
Numeric cell accessor.

Resolves "A1"-style addresses or 1-based (row, col) indices against a Sheet and
coerces the value to float. Rule modules see two distinct failure shapes:

  None           absent: empty cell, text, or an address past the sheet edge
  inf / nan      present but invalid: a number that cannot be compared
"""

import math
from typing import NamedTuple, Optional

from models.workbook import CellValue, Sheet, Workbook


class CellRef(NamedTuple):
    sheet: str
    address: str


def column_index(letters: str) -> int:
    """'A' -> 1, 'Z' -> 26, 'AA' -> 27."""
    index = 0
    for ch in letters.upper():
        if not "A" <= ch <= "Z":
            raise ValueError(f"Invalid column letters: {letters!r}")
        index = index * 26 + (ord(ch) - ord("A") + 1)
    return index


def parse_address(address: str) -> tuple[int, int]:
    """'AB12' -> (12, 28), both 1-based."""
    text = address.strip()
    split = 0
    while split < len(text) and text[split].isalpha():
        split += 1
    letters, digits = text[:split], text[split:]
    if not letters or not digits.isdigit() or int(digits) < 1:
        raise ValueError(f"Invalid cell address: {address!r}")
    return int(digits), column_index(letters)


def cell_ref(row_idx: int, col_idx: int) -> str:
    """0-based indices back to 'A1' form."""
    col = ""
    n = col_idx
    while n >= 0:
        col = chr(n % 26 + 65) + col
        n = n // 26 - 1
    return f"{col}{row_idx + 1}"


def as_number(value: CellValue) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def is_finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def get_cell(sheet: Sheet, address: str) -> CellValue:
    row, col = parse_address(address)
    return sheet.value_at(row, col)


class CellReader:
    """Read-only typed view of a workbook, addressed by CellRef."""

    def __init__(self, workbook: Workbook):
        self.workbook = workbook

    def value(self, ref: CellRef) -> CellValue:
        return get_cell(self.workbook.sheet(ref.sheet), ref.address)

    def number(self, ref: CellRef) -> Optional[float]:
        return as_number(self.value(ref))

    def number_at(self, sheet: str, row: int, col: int) -> Optional[float]:
        return as_number(self.workbook.sheet(sheet).value_at(row, col))

    def row_numbers(self, sheet: str, row: int, cols) -> list[Optional[float]]:
        return [self.number_at(sheet, row, col) for col in cols]

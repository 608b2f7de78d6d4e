from typing import Optional, Union
from pydantic import BaseModel, Field


CellValue = Optional[Union[float, str]]


class Sheet(BaseModel):
    # a null row is an empty row left in place by the exporter
    rows: list[Optional[list[CellValue]]] = Field(default_factory=list)

    def value_at(self, row: int, col: int) -> CellValue:
        """Raw value at 1-based (row, col); None when out of range."""
        if row < 1 or col < 1 or row > len(self.rows):
            return None
        cells = self.rows[row - 1]
        if cells is None or col > len(cells):
            return None
        return cells[col - 1]


class Workbook(BaseModel):
    file_name: Optional[str] = None
    sheets: dict[str, Sheet] = Field(default_factory=dict)

    def sheet(self, name: str) -> Sheet:
        # missing sheets read as empty so every lookup falls through to "absent"
        return self.sheets.get(name) or Sheet()

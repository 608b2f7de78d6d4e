"""
JSON workbook loader.

Accepts the interchange form produced by the spreadsheet exporter:

  {"file_name": "Team3.xlsm",
   "sheets": {"main": [[...row 1...], [...row 2...]],
              "gear": {"J19": 14.2, "N19": 151}}}

A sheet is either a list of rows or a sparse {address: value} mapping.
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from grading.cells import parse_address
from models.workbook import Sheet, Workbook

logger = logging.getLogger(__name__)


class WorkbookLoadError(Exception):
    """The payload could not be turned into a Workbook."""


def sheet_from_cells(cells: dict[str, Any]) -> Sheet:
    rows: list[list[Any]] = []
    for address, value in cells.items():
        row, col = parse_address(address)
        while len(rows) < row:
            rows.append([])
        cells_in_row = rows[row - 1]
        while len(cells_in_row) < col:
            cells_in_row.append(None)
        cells_in_row[col - 1] = value
    return Sheet(rows=rows)


def workbook_from_dict(data: dict[str, Any]) -> Workbook:
    sheets = {}
    for name, sheet in (data.get("sheets") or {}).items():
        if isinstance(sheet, dict) and "rows" not in sheet:
            sheets[name] = sheet_from_cells(sheet)
        elif isinstance(sheet, list):
            sheets[name] = Sheet(rows=sheet)
        else:
            sheets[name] = Sheet.model_validate(sheet)
    return Workbook(file_name=data.get("file_name"), sheets=sheets)


def load_workbook(source: Union[dict, str, bytes, Path]) -> Workbook:
    """Build a Workbook from a dict, JSON text/bytes, or a JSON file path."""
    try:
        if isinstance(source, Path):
            data = json.loads(source.read_text(encoding="utf-8"))
        elif isinstance(source, (str, bytes)):
            data = json.loads(source)
        else:
            data = source
        if not isinstance(data, dict):
            raise WorkbookLoadError("Workbook payload must be a JSON object")
        return workbook_from_dict(data)
    except WorkbookLoadError:
        raise
    except (OSError, ValueError, ValidationError) as exc:
        logger.warning("Workbook could not be loaded: %s", exc)
        raise WorkbookLoadError(f"Unable to read workbook: {exc}") from exc

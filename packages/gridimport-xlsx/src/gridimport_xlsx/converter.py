"""Workbook cell coercion -- openpyxl values to typed cell values.

Provides ``excel_value_to_cell_value()`` implementing the coercion table
shared by every workbook import, and ``read_sheet()`` which copies one
worksheet into a :class:`Sheet` snapshot.
"""

from __future__ import annotations

from pydantic import BaseModel

from gridimport_core.inference import is_temporal, temporal_to_text, unpack_str_float
from gridimport_core.models import (
    BLANK,
    CellValue,
    LogicalValue,
    Pos,
    Sheet,
    TextValue,
    is_blank,
)

# openpyxl data_type for error cells ("#N/A", "#DIV/0!", ...)
_ERROR_TYPE = "e"


class SheetReadResult(BaseModel):
    """Counters gathered while copying one worksheet."""

    rows: int = 0
    cols: int = 0
    cells: int = 0
    error_cells: int = 0


def excel_value_to_cell_value(value: object, data_type: str | None = None) -> CellValue:
    """Coerce one openpyxl cell value.

    ==========================  =========================================
    source                      result
    ==========================  =========================================
    empty (None)                Blank
    error cell                  Blank
    bool                        Logical
    date / datetime / time      Text, ISO-8601
    timedelta                   Text, ISO-8601 duration
    int / float                 Number via the shared numeric parser,
                                Blank when that parse fails
    str                         Text
    ==========================  =========================================
    """
    if value is None or data_type == _ERROR_TYPE:
        return BLANK
    if isinstance(value, bool):
        return LogicalValue(value=value)
    if is_temporal(value):
        return TextValue(value=temporal_to_text(value))
    if isinstance(value, (int, float)):
        return unpack_str_float(str(value), BLANK)
    if isinstance(value, str):
        return TextValue(value=value)
    return TextValue(value=str(value))


def read_sheet(worksheet, sheet: Sheet) -> SheetReadResult:
    """Copy every non-blank cell of *worksheet* into *sheet*.

    Positions are absolute: cell A1 lands at (0, 0).
    """
    result = SheetReadResult()
    for y, row in enumerate(worksheet.iter_rows()):
        result.rows = y + 1
        for x, cell in enumerate(row):
            result.cols = max(result.cols, x + 1)
            data_type = getattr(cell, "data_type", None)
            if data_type == _ERROR_TYPE:
                result.error_cells += 1
            cell_value = excel_value_to_cell_value(cell.value, data_type)
            if is_blank(cell_value):
                continue
            sheet.set_cell_value(Pos(x=x, y=y), cell_value)
            result.cells += 1
    return result

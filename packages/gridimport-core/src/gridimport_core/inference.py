"""Default string-to-cell-value inference and shared coercion helpers.

Importers receive a ``CellValueInferrer`` from their host; this module
provides the stand-alone default (``StringCellValueInferrer``) together with
the numeric and temporal helpers every importer shares, so that all source
formats follow one numeric precision policy.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timedelta
from decimal import Decimal, InvalidOperation

import pandas as pd

from gridimport_core.models import (
    BLANK,
    CellValue,
    LogicalValue,
    NumberValue,
    NumericFormat,
    NumericFormatKind,
    Operation,
    SetCellFormat,
    SheetPos,
    TextValue,
)

_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_GROUPED_RE = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d*)?$")
_CURRENCY_SYMBOLS = ("$", "€", "£", "¥")


def unpack_str_float(text: str, default: CellValue) -> CellValue:
    """Parse a plain decimal literal into a ``NumberValue``.

    Returns *default* when *text* is not a finite decimal literal.
    """
    text = text.strip()
    if not _NUMBER_RE.match(text):
        return default
    try:
        return NumberValue(value=Decimal(text))
    except InvalidOperation:
        return default


def _parse_number(text: str) -> Decimal | None:
    text = text.strip()
    if _GROUPED_RE.match(text):
        text = text.replace(",", "")
    value = unpack_str_float(text, BLANK)
    if isinstance(value, NumberValue):
        return value.value
    return None


def unpack_currency(text: str) -> tuple[str, Decimal] | None:
    """Split ``"$1,234.50"`` / ``"-$3"`` / ``"$-3"`` into (symbol, amount)."""
    text = text.strip()
    sign = ""
    if text[:1] in ("-", "+"):
        sign, text = text[0], text[1:]
    for symbol in _CURRENCY_SYMBOLS:
        if text.startswith(symbol):
            amount = _parse_number(sign + text[len(symbol):])
            if amount is not None:
                return symbol, amount
    return None


def unpack_percentage(text: str) -> Decimal | None:
    text = text.strip()
    if not text.endswith("%"):
        return None
    amount = _parse_number(text[:-1])
    if amount is None:
        return None
    return amount / 100


def string_to_cell_value(
    sheet_pos: SheetPos, text: str
) -> tuple[list[Operation], CellValue]:
    """Infer a typed cell value from a raw field string.

    Returns the value together with any formatting commands the value
    implies (currency and percentage formats), targeted at *sheet_pos*.
    """
    stripped = text.strip()
    if not stripped:
        return [], BLANK

    currency = unpack_currency(stripped)
    if currency is not None:
        symbol, amount = currency
        fmt = NumericFormat(kind=NumericFormatKind.CURRENCY, symbol=symbol)
        return [SetCellFormat(sheet_pos=sheet_pos, numeric_format=fmt)], NumberValue(
            value=amount
        )

    percentage = unpack_percentage(stripped)
    if percentage is not None:
        fmt = NumericFormat(kind=NumericFormatKind.PERCENTAGE)
        return [SetCellFormat(sheet_pos=sheet_pos, numeric_format=fmt)], NumberValue(
            value=percentage
        )

    number = _parse_number(stripped)
    if number is not None:
        return [], NumberValue(value=number)

    lowered = stripped.lower()
    if lowered in ("true", "false"):
        return [], LogicalValue(value=lowered == "true")

    return [], TextValue(value=text)


class StringCellValueInferrer:
    """``CellValueInferrer`` backed by :func:`string_to_cell_value`."""

    def infer(
        self, sheet_pos: SheetPos, text: str
    ) -> tuple[list[Operation], CellValue]:
        return string_to_cell_value(sheet_pos, text)


# ---------------------------------------------------------------------------
# Native value helpers
# ---------------------------------------------------------------------------


def number_from_float(value: float) -> CellValue:
    """Shortest round-tripping ``NumberValue`` for a float; Blank if non-finite."""
    value = float(value)
    if not math.isfinite(value):
        return BLANK
    return NumberValue(value=Decimal(repr(value)))


def temporal_to_text(value: date | time | timedelta) -> str:
    """ISO-8601 text for dates, times, datetimes, and durations."""
    if isinstance(value, timedelta):
        return pd.Timedelta(value).isoformat()
    return value.isoformat()


def is_temporal(value: object) -> bool:
    return isinstance(value, (datetime, date, time, timedelta))

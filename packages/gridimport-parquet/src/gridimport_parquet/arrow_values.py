"""Arrow-native column conversion into cell value blocks.

Values are converted straight from their Arrow type; they never pass
through a generic string form and the text inference rules.
"""

from __future__ import annotations

from decimal import Decimal

import pyarrow as pa

from gridimport_core.inference import number_from_float, temporal_to_text
from gridimport_core.models import (
    BLANK,
    CellValue,
    CellValues,
    LogicalValue,
    NumberValue,
    TextValue,
)


def _is_temporal_type(arrow_type: pa.DataType) -> bool:
    return (
        pa.types.is_date(arrow_type)
        or pa.types.is_time(arrow_type)
        or pa.types.is_timestamp(arrow_type)
        or pa.types.is_duration(arrow_type)
    )


def arrow_value_to_cell_value(value: object, arrow_type: pa.DataType) -> CellValue:
    """Convert one Python value produced by ``to_pylist()`` for *arrow_type*."""
    if value is None:
        return BLANK
    if pa.types.is_dictionary(arrow_type):
        arrow_type = arrow_type.value_type

    if pa.types.is_boolean(arrow_type):
        return LogicalValue(value=bool(value))
    if pa.types.is_integer(arrow_type):
        return NumberValue(value=Decimal(int(value)))
    if pa.types.is_floating(arrow_type):
        return number_from_float(value)
    if pa.types.is_decimal(arrow_type):
        return NumberValue(value=value)
    if pa.types.is_string(arrow_type) or pa.types.is_large_string(arrow_type):
        return TextValue(value=value)
    if pa.types.is_binary(arrow_type) or pa.types.is_large_binary(arrow_type):
        return TextValue(value=bytes(value).decode("utf-8", errors="replace"))
    if _is_temporal_type(arrow_type):
        return TextValue(value=temporal_to_text(value))
    return TextValue(value=str(value))


def _is_nanosecond_time(arrow_type: pa.DataType) -> bool:
    return pa.types.is_time64(arrow_type) and arrow_type.unit == "ns"


def arrow_to_cell_values(array: pa.Array | pa.ChunkedArray) -> CellValues:
    """Convert one column into a block one column wide."""
    arrow_type = array.type
    if _is_nanosecond_time(arrow_type):
        # datetime.time stops at microseconds; let arrow format the full value.
        return CellValues.from_column(
            [
                BLANK if value is None else TextValue(value=value)
                for value in array.cast(pa.string()).to_pylist()
            ]
        )
    return CellValues.from_column(
        [arrow_value_to_cell_value(value, arrow_type) for value in array.to_pylist()]
    )

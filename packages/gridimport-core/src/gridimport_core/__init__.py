"""gridimport-core -- Shared primitives for the gridimport framework.

Re-exports all public types: errors, models, protocols, and utilities.
"""

from gridimport_core.config import BaseImportConfig
from gridimport_core.errors import BaseImportError, CoreErrorCode, GridImportException
from gridimport_core.inference import (
    StringCellValueInferrer,
    number_from_float,
    string_to_cell_value,
    temporal_to_text,
    unpack_str_float,
)
from gridimport_core.models import (
    BLANK,
    AddSheet,
    BlankValue,
    CellValue,
    CellValues,
    LogicalValue,
    NumberValue,
    NumericFormat,
    NumericFormatKind,
    Operation,
    Pos,
    SetCellFormat,
    SetCellValues,
    Sheet,
    SheetCell,
    SheetPos,
    TextValue,
    new_sheet_id,
    operations_adapter,
)
from gridimport_core.ordering import first_key, key_after, key_between
from gridimport_core.protocols import (
    CellValueInferrer,
    NullProgressObserver,
    ProgressObserver,
)
from gridimport_core.security import SourceScanner

__all__ = [
    # Errors
    "CoreErrorCode",
    "BaseImportError",
    "GridImportException",
    # Config
    "BaseImportConfig",
    # Cell values
    "BLANK",
    "BlankValue",
    "TextValue",
    "NumberValue",
    "LogicalValue",
    "CellValue",
    "CellValues",
    # Positions and sheets
    "Pos",
    "SheetPos",
    "Sheet",
    "SheetCell",
    "new_sheet_id",
    # Operations
    "Operation",
    "SetCellValues",
    "AddSheet",
    "SetCellFormat",
    "NumericFormat",
    "NumericFormatKind",
    "operations_adapter",
    # Ordering
    "key_between",
    "first_key",
    "key_after",
    # Inference
    "StringCellValueInferrer",
    "string_to_cell_value",
    "unpack_str_float",
    "number_from_float",
    "temporal_to_text",
    # Protocols
    "ProgressObserver",
    "NullProgressObserver",
    "CellValueInferrer",
    # Security
    "SourceScanner",
]

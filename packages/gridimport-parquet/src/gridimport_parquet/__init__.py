"""gridimport-parquet -- Columnar (Parquet) importer producing grid operations.

Public API re-exports for convenient access.
"""

from gridimport_parquet.arrow_values import arrow_to_cell_values, arrow_value_to_cell_value
from gridimport_parquet.config import ParquetImportConfig
from gridimport_parquet.errors import ErrorCode, ParquetImportError
from gridimport_parquet.importer import ParquetImporter, import_parquet_operations

__all__ = [
    "ParquetImporter",
    "ParquetImportConfig",
    "ParquetImportError",
    "ErrorCode",
    "arrow_to_cell_values",
    "arrow_value_to_cell_value",
    "import_parquet_operations",
]

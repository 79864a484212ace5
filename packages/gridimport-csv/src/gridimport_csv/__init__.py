"""gridimport-csv -- Delimited-text importer producing grid operations.

Public API re-exports for convenient access.
"""

from gridimport_csv.config import IMPORT_LINES_PER_OPERATION, CsvImportConfig
from gridimport_csv.encoding import read_utf16
from gridimport_csv.errors import CsvImportError, ErrorCode
from gridimport_csv.importer import CsvImporter, import_csv_operations

__all__ = [
    "CsvImporter",
    "CsvImportConfig",
    "CsvImportError",
    "ErrorCode",
    "IMPORT_LINES_PER_OPERATION",
    "import_csv_operations",
    "read_utf16",
]

"""gridimport-xlsx -- Workbook importer producing one new sheet per worksheet.

Public API re-exports for convenient access.
"""

from gridimport_xlsx.config import XlsxImportConfig
from gridimport_xlsx.converter import SheetReadResult, excel_value_to_cell_value, read_sheet
from gridimport_xlsx.errors import ErrorCode, XlsxImportError
from gridimport_xlsx.importer import XlsxImporter, import_excel_operations

__all__ = [
    "XlsxImporter",
    "XlsxImportConfig",
    "XlsxImportError",
    "ErrorCode",
    "SheetReadResult",
    "excel_value_to_cell_value",
    "read_sheet",
    "import_excel_operations",
]

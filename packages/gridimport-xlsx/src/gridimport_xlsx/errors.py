"""Error codes and structured error model for the gridimport-xlsx package.

``ErrorCode`` contains all error/warning codes relevant to workbook import.
``XlsxImportError`` extends ``BaseImportError`` with a ``sheet_name`` field
for location context.
"""

from __future__ import annotations

from enum import Enum

from gridimport_core.errors import BaseImportError


class ErrorCode(str, Enum):
    """Error codes for workbook import.

    Values equal their names so they are stable strings suitable for
    metrics and alerting.  ``E_`` prefix = fatal, ``W_`` prefix = warning.
    """

    # Security
    E_SECURITY_TOO_LARGE = "E_SECURITY_TOO_LARGE"
    E_SECURITY_BAD_MAGIC = "E_SECURITY_BAD_MAGIC"

    # Source
    E_SOURCE_OPEN = "E_SOURCE_OPEN"
    E_SOURCE_READ = "E_SOURCE_READ"

    # Warnings (non-fatal)
    W_LARGE_FILE = "W_LARGE_FILE"
    W_XLSX_CHARTSHEET_SKIPPED = "W_XLSX_CHARTSHEET_SKIPPED"
    W_XLSX_HIDDEN_SHEET_SKIPPED = "W_XLSX_HIDDEN_SHEET_SKIPPED"
    W_XLSX_ERROR_CELLS_BLANKED = "W_XLSX_ERROR_CELLS_BLANKED"


class XlsxImportError(BaseImportError):
    """Structured error naming the sheet that caused the failure."""

    sheet_name: str | None = None

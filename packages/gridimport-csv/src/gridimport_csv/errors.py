"""Error codes and structured error model for the gridimport-csv package.

``ErrorCode`` contains all error/warning codes relevant to delimited-text
import.  ``CsvImportError`` extends ``BaseImportError`` with a 1-indexed
``row`` field for location context.
"""

from __future__ import annotations

from enum import Enum

from gridimport_core.errors import BaseImportError


class ErrorCode(str, Enum):
    """Error codes for delimited-text import.

    Values equal their names so they are stable strings suitable for
    metrics and alerting.  ``E_`` prefix = fatal, ``W_`` prefix = warning.
    """

    # Security
    E_SECURITY_TOO_LARGE = "E_SECURITY_TOO_LARGE"

    # Parse
    E_PARSE_EMPTY = "E_PARSE_EMPTY"
    E_PARSE_CORRUPT = "E_PARSE_CORRUPT"

    # Warnings (non-fatal)
    W_LARGE_FILE = "W_LARGE_FILE"
    W_ENCODING_FALLBACK = "W_ENCODING_FALLBACK"
    W_CSV_RAGGED_ROWS = "W_CSV_RAGGED_ROWS"
    W_CSV_FIELDS_TRUNCATED = "W_CSV_FIELDS_TRUNCATED"


class CsvImportError(BaseImportError):
    """Structured error with the 1-indexed absolute record number."""

    row: int | None = None

"""Error codes and structured error model for the gridimport-parquet package.

``ErrorCode`` contains all error/warning codes relevant to Parquet import.
``ParquetImportError`` extends ``BaseImportError`` with a ``batch_index``
field for location context.
"""

from __future__ import annotations

from enum import Enum

from gridimport_core.errors import BaseImportError


class ErrorCode(str, Enum):
    """Error codes for Parquet import.

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


class ParquetImportError(BaseImportError):
    """Structured error naming the 0-indexed record batch that failed."""

    batch_index: int | None = None

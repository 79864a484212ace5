"""Shared error codes, base error model, and raisable exception for gridimport.

``CoreErrorCode`` contains the error/warning codes common to all gridimport
packages.  ``BaseImportError`` is a Pydantic model that each package extends
with its own location field (e.g. ``row`` for CSV, ``sheet_name`` for
workbooks, ``batch_index`` for Parquet).  ``GridImportException`` wraps one of
those models so it can be used with ``raise``/``except``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class CoreErrorCode(str, Enum):
    """Error codes shared across all gridimport packages.

    Each package maintains its own *complete* ``ErrorCode`` enum that includes
    both the shared codes here and package-specific codes.  Values equal their
    names so they are stable strings suitable for metrics and alerting.
    """

    # Parse errors
    E_PARSE_EMPTY = "E_PARSE_EMPTY"
    E_PARSE_CORRUPT = "E_PARSE_CORRUPT"

    # Source container errors
    E_SOURCE_OPEN = "E_SOURCE_OPEN"
    E_SOURCE_READ = "E_SOURCE_READ"

    # Pre-flight checks
    E_SECURITY_TOO_LARGE = "E_SECURITY_TOO_LARGE"
    E_SECURITY_BAD_MAGIC = "E_SECURITY_BAD_MAGIC"

    # Warnings (non-fatal)
    W_LARGE_FILE = "W_LARGE_FILE"
    W_ENCODING_FALLBACK = "W_ENCODING_FALLBACK"


class BaseImportError(BaseModel):
    """Base structured error with code, message, and context.

    The ``code`` field is typed as ``str`` so it accepts any package-specific
    ``ErrorCode`` enum member.  ``file_name`` is the caller-supplied display
    name and is diagnostic only.
    """

    code: str
    message: str
    file_name: str | None = None
    stage: str | None = None
    recoverable: bool = False

    @property
    def is_fatal(self) -> bool:
        return self.code.startswith("E_")


class GridImportException(Exception):
    """Raisable exception wrapping a ``BaseImportError`` data model.

    Every hard import failure surfaces as this exception.  The structured
    model is available as ``.error`` for inspection and serialization.
    """

    def __init__(self, error: BaseImportError) -> None:
        self.error = error
        super().__init__(error.message)

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def file_name(self) -> str | None:
        return self.error.file_name

    @property
    def stage(self) -> str | None:
        return self.error.stage

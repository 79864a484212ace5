"""Pre-flight checks on raw import bytes.

Rejects oversized buffers and binary containers whose magic bytes do not
match the expected format before any parsing begins.
"""

from __future__ import annotations

import logging

from gridimport_core.config import BaseImportConfig
from gridimport_core.errors import BaseImportError, CoreErrorCode, GridImportException

logger = logging.getLogger("gridimport_core")

XLSX_MAGIC = b"PK\x03\x04"
PARQUET_MAGIC = b"PAR1"


class SourceScanner:
    """Run pre-flight checks on an in-memory source.

    Returns a list of errors/warnings.  Fatal errors (``E_*`` codes) mean
    the source should not be processed further.  Empty buffers pass: each
    importer reports emptiness in its own terms.
    """

    def __init__(self, config: BaseImportConfig, magic: bytes | None = None) -> None:
        self.config = config
        self.magic = magic

    def scan(self, data: bytes, file_name: str) -> list[BaseImportError]:
        errors: list[BaseImportError] = []
        size = len(data)

        # --- 1. Size limit ---
        limit_mb = self.config.max_file_size_mb
        max_bytes = limit_mb * 1024 * 1024 if limit_mb is not None else None
        if max_bytes is not None and size > max_bytes:
            errors.append(
                BaseImportError(
                    code=CoreErrorCode.E_SECURITY_TOO_LARGE,
                    message=(
                        f"{file_name}: size {size} bytes exceeds limit of "
                        f"{max_bytes} bytes ({limit_mb} MB)"
                    ),
                    file_name=file_name,
                    stage="security",
                )
            )
            return errors

        # --- 2. Magic bytes ---
        if self.magic is not None and size and not data.startswith(self.magic):
            errors.append(
                BaseImportError(
                    code=CoreErrorCode.E_SECURITY_BAD_MAGIC,
                    message=(
                        f"{file_name}: expected leading bytes {self.magic!r}, "
                        f"got {data[: len(self.magic)]!r}"
                    ),
                    file_name=file_name,
                    stage="security",
                )
            )
            return errors

        # --- 3. Large input warning ---
        if size > self.config.large_file_warning_mb * 1024 * 1024:
            errors.append(
                BaseImportError(
                    code=CoreErrorCode.W_LARGE_FILE,
                    message=f"{file_name}: {size / (1024 * 1024):.1f} MB",
                    file_name=file_name,
                    stage="security",
                    recoverable=True,
                )
            )

        return errors

    def raise_for_errors(self, data: bytes, file_name: str) -> None:
        """Scan and raise the first fatal error; log warnings."""
        for error in self.scan(data, file_name):
            if error.is_fatal:
                logger.error(
                    "gridimport_core | file=%s | code=%s | detail=%s",
                    file_name,
                    error.code,
                    error.message,
                )
                raise GridImportException(error)
            logger.warning(
                "gridimport_core | file=%s | code=%s | detail=%s",
                file_name,
                error.code,
                error.message,
            )

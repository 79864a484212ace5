"""XlsxImporter -- converts a workbook into one AddSheet operation per sheet.

Every worksheet becomes a brand-new sheet with a fresh identifier and an
ordering key that sorts after all keys assigned before it, so workbook
order is preserved as document order.  Sheets are never chunked: a new
sheet is materialized atomically.

Workbook-open and sheet-read failures abort the import; individual cells
never do.
"""

from __future__ import annotations

import io
import logging
import time
from collections.abc import Callable

import openpyxl

from gridimport_core.errors import GridImportException
from gridimport_core.models import AddSheet, Operation, Sheet, new_sheet_id
from gridimport_core.ordering import first_key, key_after
from gridimport_core.security import XLSX_MAGIC, SourceScanner

from gridimport_xlsx.config import XlsxImportConfig
from gridimport_xlsx.converter import read_sheet
from gridimport_xlsx.errors import ErrorCode, XlsxImportError

logger = logging.getLogger("gridimport_xlsx")


class XlsxImporter:
    """Workbook importer.

    Parameters
    ----------
    config:
        Importer configuration.  Uses defaults when *None*.
    id_factory:
        Returns a new sheet identifier per created sheet.  Defaults to
        :func:`new_sheet_id`.
    """

    def __init__(
        self,
        config: XlsxImportConfig | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._config = config or XlsxImportConfig()
        self._id_factory = id_factory or new_sheet_id
        self._scanner = SourceScanner(self._config, magic=XLSX_MAGIC)

    def can_handle(self, file_name: str) -> bool:
        """Return True for ``.xlsx`` and ``.xlsm`` names (case-insensitive)."""
        return file_name.lower().endswith((".xlsx", ".xlsm"))

    def import_operations(self, data: bytes, file_name: str) -> list[Operation]:
        """Convert workbook *data* into ``AddSheet`` operations.

        Raises
        ------
        GridImportException
            ``E_SOURCE_OPEN`` when the workbook cannot be opened,
            ``E_SOURCE_READ`` when a sheet cannot be read, or a pre-flight
            ``E_SECURITY_*`` code.
        """
        start = time.monotonic()
        config = self._config
        self._scanner.raise_for_errors(data, file_name)

        try:
            workbook = openpyxl.load_workbook(io.BytesIO(data), data_only=config.data_only)
        except Exception as exc:
            raise self._error(
                ErrorCode.E_SOURCE_OPEN, file_name, str(exc), stage="open"
            ) from exc

        try:
            for chartsheet in workbook.chartsheets:
                logger.warning(
                    "gridimport_xlsx | file=%s | code=%s | sheet=%s",
                    file_name,
                    ErrorCode.W_XLSX_CHARTSHEET_SKIPPED.value,
                    chartsheet.title,
                )

            ops: list[Operation] = []
            order: str | None = None
            error_cells = 0
            for worksheet in workbook.worksheets:
                if config.skip_hidden_sheets and worksheet.sheet_state != "visible":
                    logger.warning(
                        "gridimport_xlsx | file=%s | code=%s | sheet=%s",
                        file_name,
                        ErrorCode.W_XLSX_HIDDEN_SHEET_SKIPPED.value,
                        worksheet.title,
                    )
                    continue

                order = first_key() if order is None else key_after(order)
                sheet = Sheet(id=self._id_factory(), name=worksheet.title, order=order)
                try:
                    result = read_sheet(worksheet, sheet)
                except Exception as exc:
                    raise self._error(
                        ErrorCode.E_SOURCE_READ,
                        file_name,
                        str(exc),
                        stage="read",
                        sheet_name=worksheet.title,
                    ) from exc

                error_cells += result.error_cells
                logger.debug(
                    "gridimport_xlsx | file=%s | sheet=%s | order=%s | rows=%d | cols=%d | cells=%d",
                    file_name,
                    sheet.name,
                    order,
                    result.rows,
                    result.cols,
                    result.cells,
                )
                ops.append(AddSheet(sheet=sheet))
        finally:
            workbook.close()

        if error_cells:
            logger.warning(
                "gridimport_xlsx | file=%s | code=%s | detail=%d error cells imported as blank",
                file_name,
                ErrorCode.W_XLSX_ERROR_CELLS_BLANKED.value,
                error_cells,
            )

        logger.info(
            "gridimport_xlsx | file=%s | sheets=%d | time=%.1fs",
            file_name,
            len(ops),
            time.monotonic() - start,
        )
        return ops

    @staticmethod
    def _error(
        code: ErrorCode,
        file_name: str,
        detail: str,
        stage: str,
        sheet_name: str | None = None,
    ) -> GridImportException:
        location = f" (sheet {sheet_name})" if sheet_name else ""
        err = XlsxImportError(
            code=code,
            message=f"Error parsing Excel file {file_name}{location}: {detail}",
            file_name=file_name,
            stage=stage,
            sheet_name=sheet_name,
        )
        logger.error(
            "gridimport_xlsx | file=%s | code=%s | detail=%s",
            file_name,
            code.value,
            err.message,
        )
        return GridImportException(err)


def import_excel_operations(data: bytes, file_name: str) -> list[Operation]:
    """Import a workbook with the default configuration."""
    return XlsxImporter().import_operations(data, file_name)

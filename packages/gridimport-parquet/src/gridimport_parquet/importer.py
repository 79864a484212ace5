"""ParquetImporter -- streams record batches into per-column bulk writes.

A single header row (the schema's field names) is written at the anchor,
then every record batch is converted column by column.  Each column of a
batch becomes one ``SetCellValues`` one column wide, placed below the rows
of all earlier batches.
"""

from __future__ import annotations

import logging
import time

import pyarrow as pa
import pyarrow.parquet as pq

from gridimport_core.errors import GridImportException
from gridimport_core.models import (
    CellValues,
    Operation,
    Pos,
    SetCellValues,
    SheetPos,
    TextValue,
)
from gridimport_core.protocols import NullProgressObserver, ProgressObserver
from gridimport_core.security import PARQUET_MAGIC, SourceScanner

from gridimport_parquet.arrow_values import arrow_to_cell_values
from gridimport_parquet.config import ParquetImportConfig
from gridimport_parquet.errors import ErrorCode, ParquetImportError

logger = logging.getLogger("gridimport_parquet")

_ARROW_ERRORS = (pa.ArrowException, OSError, ValueError)


class ParquetImporter:
    """Columnar importer.

    Parameters
    ----------
    config:
        Importer configuration.  Uses defaults when *None*.
    progress:
        Optional progress observer, notified after every column write.
    """

    def __init__(
        self,
        config: ParquetImportConfig | None = None,
        progress: ProgressObserver | None = None,
    ) -> None:
        self._config = config or ParquetImportConfig()
        self._progress = progress or NullProgressObserver()
        self._scanner = SourceScanner(self._config, magic=PARQUET_MAGIC)

    def can_handle(self, file_name: str) -> bool:
        """Return True for ``.parquet`` names (case-insensitive)."""
        return file_name.lower().endswith(".parquet")

    def import_operations(
        self,
        data: bytes,
        file_name: str,
        sheet_id: str,
        insert_at: Pos,
    ) -> list[Operation]:
        """Convert Parquet *data* into operations anchored at *insert_at*.

        Raises
        ------
        GridImportException
            ``E_SOURCE_OPEN`` when the file or its metadata cannot be read,
            ``E_SOURCE_READ`` when a record batch fails, or a pre-flight
            ``E_SECURITY_*`` code.
        """
        start = time.monotonic()
        self._scanner.raise_for_errors(data, file_name)

        try:
            parquet_file = pq.ParquetFile(pa.BufferReader(data))
            total_size = parquet_file.metadata.num_rows
            names = parquet_file.schema_arrow.names
        except _ARROW_ERRORS as exc:
            raise self._error(
                ErrorCode.E_SOURCE_OPEN, file_name, str(exc), stage="open"
            ) from exc

        headers = [TextValue(value=name) for name in names]
        width = len(headers)
        ops: list[Operation] = [
            SetCellValues(
                sheet_pos=SheetPos.from_pos(insert_at, sheet_id),
                values=CellValues.from_flat_array(width, 1, headers),
            )
        ]

        height = 0
        current_size = 0
        batches = parquet_file.iter_batches(batch_size=self._config.batch_size)
        batch_index = 0
        while True:
            try:
                batch = next(batches, None)
            except _ARROW_ERRORS as exc:
                raise self._error(
                    ErrorCode.E_SOURCE_READ,
                    file_name,
                    str(exc),
                    stage="read",
                    batch_index=batch_index,
                ) from exc
            if batch is None:
                break

            num_rows = batch.num_rows
            if num_rows == 0:
                batch_index += 1
                continue

            row_offset = current_size
            current_size += num_rows
            width = max(width, batch.num_columns)
            height = max(height, num_rows)

            for col_index in range(batch.num_columns):
                ops.append(
                    SetCellValues(
                        sheet_pos=SheetPos(
                            x=insert_at.x + col_index,
                            y=insert_at.y + row_offset + 1,
                            sheet_id=sheet_id,
                        ),
                        values=arrow_to_cell_values(batch.column(col_index)),
                    )
                )
                self._progress.on_progress(
                    file_name,
                    current_size,
                    total_size,
                    insert_at.x,
                    insert_at.y,
                    width,
                    height,
                )

            logger.debug(
                "gridimport_parquet | file=%s | batch=%d | rows=%d | progress=%d/%d",
                file_name,
                batch_index,
                num_rows,
                current_size,
                total_size,
            )
            batch_index += 1

        logger.info(
            "gridimport_parquet | file=%s | rows=%d | cols=%d | batches=%d | operations=%d | time=%.1fs",
            file_name,
            current_size,
            width,
            batch_index,
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
        batch_index: int | None = None,
    ) -> GridImportException:
        location = f" (batch {batch_index})" if batch_index is not None else ""
        err = ParquetImportError(
            code=code,
            message=f"Error parsing Parquet file {file_name}{location}: {detail}",
            file_name=file_name,
            stage=stage,
            batch_index=batch_index,
        )
        logger.error(
            "gridimport_parquet | file=%s | code=%s | detail=%s",
            file_name,
            code.value,
            err.message,
        )
        return GridImportException(err)


def import_parquet_operations(
    data: bytes,
    file_name: str,
    sheet_id: str,
    insert_at: Pos,
    progress: ProgressObserver | None = None,
) -> list[Operation]:
    """Import a Parquet file with the default configuration."""
    return ParquetImporter(progress=progress).import_operations(
        data, file_name, sheet_id, insert_at
    )

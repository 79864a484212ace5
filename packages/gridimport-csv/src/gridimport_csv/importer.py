"""CsvImporter -- converts delimited text into chunked bulk-write operations.

Imports run in two passes over the decoded text:

1. A lenient counting pass that totals the records so progress can be
   reported against a known denominator.
2. A converting pass that tolerates ragged rows, infers a typed value for
   every field, and emits one :class:`SetCellValues` per chunk of at most
   ``rows_per_operation`` rows.

Any malformed record aborts the whole import; no partial operation list is
ever returned.
"""

from __future__ import annotations

import csv
import io
import itertools
import logging
import time
from collections.abc import Iterator

from gridimport_core.errors import GridImportException
from gridimport_core.inference import StringCellValueInferrer
from gridimport_core.models import CellValues, Operation, Pos, SetCellValues, SheetPos
from gridimport_core.protocols import (
    CellValueInferrer,
    NullProgressObserver,
    ProgressObserver,
)
from gridimport_core.security import SourceScanner

from gridimport_csv.config import CsvImportConfig
from gridimport_csv.encoding import read_utf16
from gridimport_csv.errors import CsvImportError, ErrorCode

logger = logging.getLogger("gridimport_csv")


def _has_undecodable(field: str) -> bool:
    try:
        field.encode("utf-8")
    except UnicodeEncodeError:
        return True
    return False


class CsvImporter:
    """Delimited-text importer.

    Parameters
    ----------
    config:
        Importer configuration.  Uses defaults when *None*.
    inferrer:
        String-to-value collaborator.  Defaults to
        :class:`StringCellValueInferrer`.
    progress:
        Optional progress observer, notified after every emitted operation.
    """

    def __init__(
        self,
        config: CsvImportConfig | None = None,
        inferrer: CellValueInferrer | None = None,
        progress: ProgressObserver | None = None,
    ) -> None:
        self._config = config or CsvImportConfig()
        self._inferrer = inferrer or StringCellValueInferrer()
        self._progress = progress or NullProgressObserver()
        self._scanner = SourceScanner(self._config)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def can_handle(self, file_name: str) -> bool:
        """Return True for ``.csv`` and ``.tsv`` names (case-insensitive)."""
        return file_name.lower().endswith((".csv", ".tsv"))

    def import_operations(
        self,
        data: bytes,
        file_name: str,
        sheet_id: str,
        insert_at: Pos,
    ) -> list[Operation]:
        """Convert *data* into operations anchored at *insert_at*.

        Raises
        ------
        GridImportException
            ``E_PARSE_EMPTY`` when the first record has no fields,
            ``E_PARSE_CORRUPT`` for a malformed record, or a pre-flight
            ``E_SECURITY_*`` code.
        """
        start = time.monotonic()
        self._scanner.raise_for_errors(data, file_name)

        text = self._decode(data, file_name)

        # csv.field_size_limit is process-wide; restore the caller's value.
        previous_limit = csv.field_size_limit(self._config.max_field_size)
        try:
            ops, height, width = self._convert(text, file_name, sheet_id, insert_at)
        finally:
            csv.field_size_limit(previous_limit)

        logger.info(
            "gridimport_csv | file=%s | rows=%d | cols=%d | operations=%d | time=%.1fs",
            file_name,
            height,
            width,
            len(ops),
            time.monotonic() - start,
        )
        return ops

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def _decode(self, data: bytes, file_name: str) -> str:
        """Decode with the configured encoding, falling back to UTF-16 once.

        When neither works the bytes pass through surrogate-escaped; records
        that still hold undecodable bytes fail individually later.
        """
        try:
            return data.decode(self._config.encoding)
        except UnicodeDecodeError:
            pass

        recovered = read_utf16(data)
        if recovered is not None:
            logger.warning(
                "gridimport_csv | file=%s | code=%s | detail=recovered %d chars as UTF-16",
                file_name,
                ErrorCode.W_ENCODING_FALLBACK.value,
                len(recovered),
            )
            return recovered

        return data.decode(self._config.encoding, errors="surrogateescape")

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def _reader(self, text: str, strict: bool) -> Iterator[list[str]]:
        return csv.reader(
            io.StringIO(text, newline=""),
            delimiter=self._config.delimiter,
            quotechar=self._config.quotechar,
            strict=strict,
        )

    def _count_records(self, text: str, file_name: str) -> int:
        """First pass: count non-blank records against a fixed width."""
        reader = self._reader(text, strict=False)
        height = 0
        ragged = 0
        width: int | None = None
        while True:
            try:
                record = next(reader)
            except StopIteration:
                break
            except csv.Error:
                height += 1
                continue
            if not record:
                continue
            height += 1
            if width is None:
                width = len(record)
            elif len(record) != width:
                ragged += 1

        if ragged:
            logger.warning(
                "gridimport_csv | file=%s | code=%s | detail=%d of %d rows differ from width %s",
                file_name,
                ErrorCode.W_CSV_RAGGED_ROWS.value,
                ragged,
                height,
                width,
            )
        return height

    def _records(self, text: str, file_name: str) -> Iterator[list[str]]:
        """Second pass: yield non-blank records, raising on malformed ones."""
        reader = self._reader(text, strict=self._config.strict)
        row = 0
        while True:
            try:
                record = next(reader)
            except StopIteration:
                return
            except csv.Error as exc:
                raise self._malformed(file_name, row + 1, str(exc)) from exc
            if not record:
                continue
            row += 1
            if any(_has_undecodable(field) for field in record):
                raise self._malformed(file_name, row, "invalid byte sequence in record")
            yield record

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def _convert(
        self,
        text: str,
        file_name: str,
        sheet_id: str,
        insert_at: Pos,
    ) -> tuple[list[Operation], int, int]:
        config = self._config
        height = self._count_records(text, file_name)

        records = self._records(text, file_name)
        first = next(records, None)
        width = len(first) if first else 0
        if width == 0:
            err = CsvImportError(
                code=ErrorCode.E_PARSE_EMPTY,
                message=f"Error parsing CSV file {file_name}: empty files cannot be processed",
                file_name=file_name,
                stage="parse",
            )
            logger.error(
                "gridimport_csv | file=%s | code=%s | detail=%s",
                file_name,
                err.code,
                err.message,
            )
            raise GridImportException(err)

        if config.log_sample_data:
            logger.debug("gridimport_csv | file=%s | first_record=%r", file_name, first)

        cap = config.rows_per_operation
        ops: list[Operation] = []
        cell_values = CellValues.new(width, min(cap, height))
        current_y = 0
        y = 0
        truncated = 0

        for record in itertools.chain([first], records):
            if len(record) > width:
                truncated += 1
            for x, value in enumerate(record[:width]):
                operations, cell_value = self._inferrer.infer(
                    SheetPos(
                        x=insert_at.x + x,
                        y=insert_at.y + current_y + y,
                        sheet_id=sheet_id,
                    ),
                    value,
                )
                ops.extend(operations)
                cell_values.set(x, y, cell_value)
            y += 1

            if y >= cap:
                ops.append(self._chunk(cell_values, insert_at, current_y, sheet_id))
                current_y += y
                y = 0
                self._notify(file_name, current_y, height, insert_at, width)
                cell_values = CellValues.new(width, min(cap, height - current_y))

        if y > 0:
            ops.append(self._chunk(cell_values, insert_at, current_y, sheet_id))
            current_y += y
            self._notify(file_name, current_y, height, insert_at, width)

        if truncated:
            logger.warning(
                "gridimport_csv | file=%s | code=%s | detail=%d rows longer than width %d",
                file_name,
                ErrorCode.W_CSV_FIELDS_TRUNCATED.value,
                truncated,
                width,
            )
        return ops, current_y, width

    @staticmethod
    def _chunk(
        cell_values: CellValues, insert_at: Pos, current_y: int, sheet_id: str
    ) -> SetCellValues:
        return SetCellValues(
            sheet_pos=SheetPos(
                x=insert_at.x, y=insert_at.y + current_y, sheet_id=sheet_id
            ),
            values=cell_values,
        )

    def _notify(
        self, file_name: str, current: int, height: int, insert_at: Pos, width: int
    ) -> None:
        logger.debug(
            "gridimport_csv | file=%s | progress=%d/%d", file_name, current, height
        )
        self._progress.on_progress(
            file_name, current, height, insert_at.x, insert_at.y, width, height
        )

    @staticmethod
    def _malformed(file_name: str, row: int, detail: str) -> GridImportException:
        err = CsvImportError(
            code=ErrorCode.E_PARSE_CORRUPT,
            message=f"Error parsing CSV file {file_name}: line {row}: {detail}",
            file_name=file_name,
            stage="parse",
            row=row,
        )
        logger.error(
            "gridimport_csv | file=%s | code=%s | row=%d | detail=%s",
            file_name,
            err.code,
            row,
            detail,
        )
        return GridImportException(err)


def import_csv_operations(
    data: bytes,
    file_name: str,
    sheet_id: str,
    insert_at: Pos,
    progress: ProgressObserver | None = None,
) -> list[Operation]:
    """Import delimited text with the default configuration."""
    return CsvImporter(progress=progress).import_operations(
        data, file_name, sheet_id, insert_at
    )

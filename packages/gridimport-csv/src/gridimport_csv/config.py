"""Configuration model for the gridimport-csv importer."""

from __future__ import annotations

from pydantic import Field

from gridimport_core.config import BaseImportConfig

IMPORT_LINES_PER_OPERATION = 10_000

# Largest value csv.field_size_limit() accepts on every platform (C long).
MAX_FIELD_SIZE = 2**31 - 1


class CsvImportConfig(BaseImportConfig):
    """All tunable parameters with sensible defaults for delimited text."""

    # --- Identity ---
    parser_version: str = "gridimport_csv:1.0.0"

    # --- Security / Resource Limits ---
    # Text is streamed in bounded chunks, so no size cap applies unless set.
    max_file_size_mb: int | None = Field(default=None, gt=0)
    max_field_size: int = Field(default=MAX_FIELD_SIZE, gt=0, le=MAX_FIELD_SIZE)

    # --- Chunking ---
    rows_per_operation: int = Field(default=IMPORT_LINES_PER_OPERATION, gt=0)

    # --- Dialect ---
    encoding: str = "utf-8-sig"
    delimiter: str = Field(default=",", min_length=1, max_length=1)
    quotechar: str = Field(default='"', min_length=1, max_length=1)
    strict: bool = True

"""Configuration model for the gridimport-parquet importer."""

from __future__ import annotations

from pydantic import Field

from gridimport_core.config import BaseImportConfig


class ParquetImportConfig(BaseImportConfig):
    """All tunable parameters with sensible defaults for Parquet import."""

    # --- Identity ---
    parser_version: str = "gridimport_parquet:1.0.0"

    # --- Batching ---
    batch_size: int = Field(default=1024, gt=0)

"""Configuration model for the gridimport-xlsx importer."""

from __future__ import annotations

from gridimport_core.config import BaseImportConfig


class XlsxImportConfig(BaseImportConfig):
    """All tunable parameters with sensible defaults for workbook import."""

    # --- Identity ---
    parser_version: str = "gridimport_xlsx:1.0.0"

    # --- Workbook reading ---
    data_only: bool = True
    skip_hidden_sheets: bool = False

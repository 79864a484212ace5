"""Shared test fixtures for gridimport-csv tests."""

from __future__ import annotations

import pytest

from gridimport_core.models import Pos
from gridimport_csv.config import CsvImportConfig
from gridimport_csv.importer import CsvImporter

SHEET_ID = "sheet-csv"

# Exported by a spreadsheet tool as UTF-16 with a little-endian BOM.
UTF16_TEXT = "issue, test, value\r\n0, 1, Invalid\r\n0, 2, Valid"


@pytest.fixture
def default_config() -> CsvImportConfig:
    return CsvImportConfig()


@pytest.fixture
def importer() -> CsvImporter:
    return CsvImporter()


@pytest.fixture
def origin() -> Pos:
    return Pos(x=0, y=0)


@pytest.fixture
def simple_csv() -> bytes:
    return b"city,region,country,population\nSouthborough,MA,United States,a lot of people"


@pytest.fixture
def utf16_csv() -> bytes:
    return b"\xff\xfe" + UTF16_TEXT.encode("utf-16-le")


@pytest.fixture
def long_csv() -> bytes:
    """20,150 data rows, enough for three chunks at the default chunk size."""
    lines = [f"city{i},region{i},country{i}" for i in range(20_150)]
    return ("\n".join(lines) + "\n").encode("utf-8")


@pytest.fixture
def utf16_text() -> str:
    return UTF16_TEXT

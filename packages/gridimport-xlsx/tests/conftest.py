"""Shared test fixtures for gridimport-xlsx tests."""

from __future__ import annotations

import io
from datetime import datetime
from itertools import count

import openpyxl
import pytest

from gridimport_xlsx.config import XlsxImportConfig
from gridimport_xlsx.importer import XlsxImporter


def workbook_bytes(workbook: openpyxl.Workbook) -> bytes:
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def default_config() -> XlsxImportConfig:
    return XlsxImportConfig()


@pytest.fixture
def sequential_ids():
    """Factory returning a deterministic sheet-id generator."""

    def _make():
        counter = count(1)
        return lambda: f"sheet-{next(counter)}"

    return _make


@pytest.fixture
def importer(sequential_ids) -> XlsxImporter:
    return XlsxImporter(id_factory=sequential_ids())


@pytest.fixture
def make_workbook():
    """Factory fixture: build a workbook from ``{title: {coordinate: value}}``.

    Sheets listed in *hidden* are saved with state ``hidden``.
    """

    def _make(sheets: dict[str, dict[str, object]], hidden: tuple[str, ...] = ()) -> bytes:
        workbook = openpyxl.Workbook()
        workbook.remove(workbook.active)
        for title, cells in sheets.items():
            worksheet = workbook.create_sheet(title)
            for coordinate, value in cells.items():
                worksheet[coordinate] = value
            if title in hidden:
                worksheet.sheet_state = "hidden"
        return workbook_bytes(workbook)

    return _make


@pytest.fixture
def mixed_workbook(make_workbook) -> bytes:
    """Two sheets covering every value kind the coercion table handles."""
    return make_workbook(
        {
            "Data": {
                "A1": "name",
                "B1": "amount",
                "A2": "widget",
                "B2": 1.5,
                "C2": 42,
                "D2": True,
                "E2": datetime(2024, 1, 2, 3, 4, 5),
                "F2": "#N/A",
            },
            "Notes": {"C5": "far corner"},
        }
    )

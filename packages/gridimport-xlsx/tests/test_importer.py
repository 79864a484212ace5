"""Tests for gridimport_xlsx.importer -- XlsxImporter end to end."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from gridimport_core.errors import GridImportException
from gridimport_core.models import (
    BLANK,
    AddSheet,
    LogicalValue,
    NumberValue,
    Pos,
    TextValue,
)
from gridimport_xlsx.config import XlsxImportConfig
from gridimport_xlsx.errors import ErrorCode
from gridimport_xlsx.importer import XlsxImporter, import_excel_operations


class TestCanHandle:
    @pytest.mark.parametrize("name", ["book.xlsx", "BOOK.XLSX", "macro.xlsm"])
    def test_accepts(self, importer, name):
        assert importer.can_handle(name)

    @pytest.mark.parametrize("name", ["legacy.xls", "data.csv"])
    def test_rejects(self, importer, name):
        assert not importer.can_handle(name)


class TestImport:
    def test_one_add_sheet_per_worksheet(self, importer, mixed_workbook):
        ops = importer.import_operations(mixed_workbook, "mixed.xlsx")

        assert len(ops) == 2
        assert all(isinstance(op, AddSheet) for op in ops)
        assert [op.sheet.name for op in ops] == ["Data", "Notes"]
        assert [op.sheet.id for op in ops] == ["sheet-1", "sheet-2"]

    def test_ordering_keys_increase(self, importer, make_workbook):
        data = make_workbook({f"S{i}": {"A1": i} for i in range(5)})
        orders = [op.sheet.order for op in importer.import_operations(data, "five.xlsx")]
        assert orders[0] == "a0"
        assert orders == sorted(orders)
        assert len(set(orders)) == 5

    def test_cell_values(self, importer, mixed_workbook):
        data_sheet = importer.import_operations(mixed_workbook, "mixed.xlsx")[0].sheet

        assert data_sheet.cell_value(Pos(x=0, y=0)) == TextValue(value="name")
        assert data_sheet.cell_value(Pos(x=1, y=1)) == NumberValue(value=Decimal("1.5"))
        assert data_sheet.cell_value(Pos(x=2, y=1)) == NumberValue(value=Decimal("42"))
        assert data_sheet.cell_value(Pos(x=3, y=1)) == LogicalValue(value=True)
        assert data_sheet.cell_value(Pos(x=4, y=1)) == TextValue(
            value="2024-01-02T03:04:05"
        )
        assert data_sheet.cell_value(Pos(x=5, y=1)) == BLANK

    def test_positions_are_absolute(self, importer, mixed_workbook):
        notes = importer.import_operations(mixed_workbook, "mixed.xlsx")[1].sheet
        assert notes.cells[0].x == 2
        assert notes.cells[0].y == 4
        assert notes.bounds() == (2, 4, 2, 4)

    def test_error_cells_warning(self, importer, mixed_workbook, caplog):
        with caplog.at_level(logging.WARNING, logger="gridimport_xlsx"):
            importer.import_operations(mixed_workbook, "mixed.xlsx")
        assert ErrorCode.W_XLSX_ERROR_CELLS_BLANKED.value in caplog.text

    def test_deterministic_with_id_factory(self, sequential_ids, mixed_workbook):
        first = XlsxImporter(id_factory=sequential_ids()).import_operations(
            mixed_workbook, "mixed.xlsx"
        )
        second = XlsxImporter(id_factory=sequential_ids()).import_operations(
            mixed_workbook, "mixed.xlsx"
        )
        assert first == second

    def test_default_ids_are_fresh(self, mixed_workbook):
        first = import_excel_operations(mixed_workbook, "mixed.xlsx")
        second = import_excel_operations(mixed_workbook, "mixed.xlsx")
        assert first[0].sheet.id != second[0].sheet.id


class TestHiddenSheets:
    def test_hidden_sheets_imported_by_default(self, importer, make_workbook):
        data = make_workbook({"Shown": {"A1": 1}, "Secret": {"A1": 2}}, hidden=("Secret",))
        ops = importer.import_operations(data, "hidden.xlsx")
        assert [op.sheet.name for op in ops] == ["Shown", "Secret"]

    def test_hidden_sheets_skipped_when_configured(
        self, sequential_ids, make_workbook, caplog
    ):
        importer = XlsxImporter(
            XlsxImportConfig(skip_hidden_sheets=True), id_factory=sequential_ids()
        )
        data = make_workbook({"Shown": {"A1": 1}, "Secret": {"A1": 2}}, hidden=("Secret",))
        with caplog.at_level(logging.WARNING, logger="gridimport_xlsx"):
            ops = importer.import_operations(data, "hidden.xlsx")
        assert [op.sheet.name for op in ops] == ["Shown"]
        assert ops[0].sheet.order == "a0"
        assert ErrorCode.W_XLSX_HIDDEN_SHEET_SKIPPED.value in caplog.text


class TestErrors:
    def test_bad_magic(self, importer):
        with pytest.raises(GridImportException) as exc_info:
            importer.import_operations(b"definitely not a workbook", "bad.xlsx")
        assert exc_info.value.code == ErrorCode.E_SECURITY_BAD_MAGIC

    def test_corrupt_zip(self, importer):
        with pytest.raises(GridImportException) as exc_info:
            importer.import_operations(b"PK\x03\x04" + b"\x00" * 64, "corrupt.xlsx")
        err = exc_info.value.error
        assert err.code == ErrorCode.E_SOURCE_OPEN
        assert err.message.startswith("Error parsing Excel file corrupt.xlsx: ")

    def test_empty_bytes(self, importer):
        with pytest.raises(GridImportException) as exc_info:
            importer.import_operations(b"", "empty.xlsx")
        assert exc_info.value.code == ErrorCode.E_SOURCE_OPEN

    def test_sheet_read_failure_names_sheet(self, importer, mixed_workbook, monkeypatch):
        def _boom(worksheet, sheet):
            raise ValueError("unreadable")

        monkeypatch.setattr("gridimport_xlsx.importer.read_sheet", _boom)
        with pytest.raises(GridImportException) as exc_info:
            importer.import_operations(mixed_workbook, "mixed.xlsx")
        err = exc_info.value.error
        assert err.code == ErrorCode.E_SOURCE_READ
        assert err.sheet_name == "Data"
        assert err.message == "Error parsing Excel file mixed.xlsx (sheet Data): unreadable"

    def test_too_large(self):
        importer = XlsxImporter(XlsxImportConfig(max_file_size_mb=1))
        with pytest.raises(GridImportException) as exc_info:
            importer.import_operations(b"PK\x03\x04" + b"\x00" * (1024 * 1024), "big.xlsx")
        assert exc_info.value.code == ErrorCode.E_SECURITY_TOO_LARGE

"""Tests for gridimport_xlsx.errors."""

from __future__ import annotations

import pytest

from gridimport_core.errors import BaseImportError
from gridimport_xlsx.errors import ErrorCode, XlsxImportError


class TestErrorCodes:
    @pytest.mark.parametrize("code", list(ErrorCode))
    def test_value_equals_name(self, code):
        assert code.value == code.name

    def test_prefixes(self):
        assert all(code.value[:2] in ("E_", "W_") for code in ErrorCode)


class TestXlsxImportError:
    def test_sheet_name(self):
        err = XlsxImportError(
            code=ErrorCode.E_SOURCE_READ,
            message="boom",
            file_name="book.xlsx",
            stage="read",
            sheet_name="Data",
        )
        assert isinstance(err, BaseImportError)
        assert err.sheet_name == "Data"
        assert err.is_fatal

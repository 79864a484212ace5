"""Tests for gridimport_csv.errors."""

from __future__ import annotations

import pytest

from gridimport_core.errors import BaseImportError, CoreErrorCode
from gridimport_csv.errors import CsvImportError, ErrorCode


class TestErrorCodes:
    @pytest.mark.parametrize("code", list(ErrorCode))
    def test_value_equals_name(self, code):
        assert code.value == code.name

    @pytest.mark.parametrize(
        "name",
        ["E_SECURITY_TOO_LARGE", "E_PARSE_EMPTY", "E_PARSE_CORRUPT", "W_LARGE_FILE"],
    )
    def test_shared_codes_match_core(self, name):
        assert ErrorCode[name].value == CoreErrorCode[name].value


class TestCsvImportError:
    def test_is_base_error(self):
        err = CsvImportError(
            code=ErrorCode.E_PARSE_CORRUPT,
            message="bad",
            file_name="a.csv",
            stage="parse",
            row=3,
        )
        assert isinstance(err, BaseImportError)
        assert err.row == 3
        assert err.is_fatal

    def test_row_defaults_to_none(self):
        err = CsvImportError(code=ErrorCode.W_CSV_RAGGED_ROWS, message="x")
        assert err.row is None
        assert not err.is_fatal

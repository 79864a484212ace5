"""Shared test fixtures for gridimport-core tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from gridimport_core.models import NumberValue, SheetPos, TextValue


@pytest.fixture
def sheet_pos() -> SheetPos:
    return SheetPos(x=2, y=3, sheet_id="sheet-1")


@pytest.fixture
def text():
    """Factory for TextValue cells."""

    def _text(value: str) -> TextValue:
        return TextValue(value=value)

    return _text


@pytest.fixture
def number():
    """Factory for NumberValue cells."""

    def _number(value: str) -> NumberValue:
        return NumberValue(value=Decimal(value))

    return _number

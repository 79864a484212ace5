"""Shared test fixtures for gridimport-parquet tests."""

from __future__ import annotations

import io

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq
import pytest

from gridimport_parquet.config import ParquetImportConfig


def table_bytes(table: pa.Table) -> bytes:
    sink = pa.BufferOutputStream()
    pq.write_table(table, sink)
    return sink.getvalue().to_pybytes()


@pytest.fixture
def default_config() -> ParquetImportConfig:
    return ParquetImportConfig()


@pytest.fixture
def people_parquet() -> bytes:
    """Five rows, two columns, written through pandas."""
    frame = pd.DataFrame(
        {
            "name": ["ada", "grace", "alan", "edsger", "barbara"],
            "age": [36, 85, 41, 72, 80],
        }
    )
    buffer = io.BytesIO()
    frame.to_parquet(buffer, engine="pyarrow", index=False)
    return buffer.getvalue()


@pytest.fixture
def empty_parquet() -> bytes:
    schema = pa.schema([("id", pa.int64()), ("label", pa.string())])
    return table_bytes(schema.empty_table())


@pytest.fixture
def make_parquet():
    """Factory fixture: write a dict of pyarrow arrays to Parquet bytes."""

    def _make(columns: dict[str, pa.Array]) -> bytes:
        return table_bytes(pa.table(columns))

    return _make

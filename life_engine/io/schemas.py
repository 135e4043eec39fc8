"""Parquet schema definitions for simulation artifacts."""

from __future__ import annotations

import pyarrow as pa

GENERATION_LOG_SCHEMA_VERSION = 1

GENERATION_LOG_SCHEMA = pa.schema(
    [
        ("generation", pa.int64()),
        ("population", pa.int64()),
        ("births", pa.int64()),
        ("deaths", pa.int64()),
    ],
    metadata={"schema_version": str(GENERATION_LOG_SCHEMA_VERSION)},
)

"""I/O helpers: Parquet schemas and output path conventions."""

from life_engine.io.paths import generation_log_path, logs_dir
from life_engine.io.schemas import GENERATION_LOG_SCHEMA, GENERATION_LOG_SCHEMA_VERSION

__all__ = [
    "GENERATION_LOG_SCHEMA",
    "GENERATION_LOG_SCHEMA_VERSION",
    "generation_log_path",
    "logs_dir",
]

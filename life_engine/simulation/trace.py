"""Per-generation population statistics and their Parquet persistence."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pyarrow as pa
import pyarrow.parquet as pq

from life_engine.domain.grid import Grid
from life_engine.io.schemas import GENERATION_LOG_SCHEMA
from life_engine.simulation.step import StepFunction, step

GenerationRow = dict[str, int]


def generation_stats(previous: Grid, current: Grid, generation: int) -> GenerationRow:
    """Summarize one transition: live count plus cells born and cells died."""
    before = previous.as_array()
    after = current.as_array()
    return {
        "generation": generation,
        "population": current.population,
        "births": int(np.count_nonzero(after & ~before)),
        "deaths": int(np.count_nonzero(before & ~after)),
    }


def trace_generations(
    initial: Grid, generations: int, step_fn: StepFunction = step
) -> tuple[Grid, list[GenerationRow]]:
    """Advance ``generations`` times, recording stats for every generation.

    Returns the final grid and one row per generation, generation 0 included.
    """
    if generations < 0:
        raise ValueError("generations must be >= 0")
    rows: list[GenerationRow] = [generation_stats(initial, initial, 0)]
    current = initial
    for generation in range(1, generations + 1):
        next_grid = step_fn(current)
        rows.append(generation_stats(current, next_grid, generation))
        current = next_grid
    return current, rows


def write_generation_log(rows: list[GenerationRow], path: Path) -> Path:
    """Write generation rows to Parquet, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    table = pa.Table.from_pylist(rows, schema=GENERATION_LOG_SCHEMA)
    pq.write_table(table, path)
    return path

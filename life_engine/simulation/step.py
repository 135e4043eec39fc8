"""Single-generation transition under the standard Game of Life rule.

Two formulations are provided and must agree on every board:

- ``step_brute_force`` examines every cell, summing the eight shifted views
  of a zero-padded copy of the board.
- ``step_live_cells`` visits only live cells and accumulates a neighbor
  count for each in-bounds coordinate around them.

Neighbors outside the board are dead; the topology never wraps.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable

import numpy as np

from life_engine.domain.grid import Cell, Grid

StepFunction = Callable[[Grid], Grid]
"""Pure transition from one generation to the next."""

NEIGHBOR_OFFSETS: tuple[Cell, ...] = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)
"""Moore-neighborhood ``(dx, dy)`` offsets."""

SURVIVE_COUNTS = frozenset({2, 3})
BIRTH_COUNT = 3


def next_state(alive: bool, live_neighbors: int) -> bool:
    """Apply the B3/S23 rule to one cell."""
    if alive:
        return live_neighbors in SURVIVE_COUNTS
    return live_neighbors == BIRTH_COUNT


def count_live_neighbors(grid: Grid, x: int, y: int) -> int:
    """Count live Moore neighbors of ``(x, y)``; off-board cells count as dead."""
    return sum(grid.get(x + dx, y + dy) for dx, dy in NEIGHBOR_OFFSETS)


def neighbor_counts(grid: Grid) -> np.ndarray:
    """Return a ``(height, width)`` array of live-neighbor counts for every cell."""
    cells = grid.as_array()
    height, width = cells.shape
    padded = np.pad(cells.astype(np.uint8), 1)
    counts = np.zeros((height, width), dtype=np.uint8)
    for dx, dy in NEIGHBOR_OFFSETS:
        counts += padded[1 + dy : 1 + dy + height, 1 + dx : 1 + dx + width]
    return counts


def step_brute_force(grid: Grid) -> Grid:
    """Compute the next generation by examining every cell."""
    cells = grid.as_array()
    counts = neighbor_counts(grid)
    born = ~cells & (counts == BIRTH_COUNT)
    survived = cells & np.isin(counts, tuple(SURVIVE_COUNTS))
    next_cells = born | survived
    assert next_cells.shape == cells.shape
    return Grid.from_array(next_cells, copy=False)


def step_live_cells(grid: Grid) -> Grid:
    """Compute the next generation from the neighborhoods of live cells only.

    Cells with no live neighbor stay or become dead, so only coordinates that
    receive at least one count need to be evaluated.
    """
    live = set(grid.live_cells())
    counts: Counter[Cell] = Counter()
    for x, y in live:
        for dx, dy in NEIGHBOR_OFFSETS:
            nx_, ny_ = x + dx, y + dy
            if grid.in_bounds(nx_, ny_):
                counts[(nx_, ny_)] += 1

    next_grid = Grid(grid.width, grid.height)
    for (x, y), count in counts.items():
        if next_state((x, y) in live, count):
            next_grid.set(x, y, True)
    assert (next_grid.width, next_grid.height) == (grid.width, grid.height)
    return next_grid


step: StepFunction = step_live_cells
"""Default transition used by the engine and boundary layers."""

"""Multi-generation advance and final-state (stabilization) search.

``advance`` applies the transition a fixed number of times with no early
exit. ``find_final_state`` stops at the first fixed point or at the first
generation whose snapshot was already seen, and raises
:exc:`NotStabilized` once the step budget is spent.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from life_engine.config.constants import MAX_GENERATIONS_TO_FINAL_STATE
from life_engine.domain.errors import NotStabilized
from life_engine.domain.grid import Grid
from life_engine.domain.snapshot import Snapshot
from life_engine.simulation.step import StepFunction, step

logger = logging.getLogger(__name__)


class FinalStateKind(Enum):
    """How the final-state search terminated."""

    FIXED_POINT = "fixed_point"
    CYCLE = "cycle"


@dataclass(frozen=True)
class StabilizationResult:
    """Outcome of a successful final-state search."""

    grid: Grid
    generation: int
    kind: FinalStateKind
    period: int


def _check_count(value: object, key: str, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer")
    if value < minimum:
        raise ValueError(f"{key} must be >= {minimum}")
    return value


def advance(initial: Grid, generations: int, step_fn: StepFunction = step) -> Grid:
    """Apply ``step_fn`` exactly ``generations`` times.

    ``generations == 0`` returns ``initial`` itself.
    """
    _check_count(generations, "generations", 0)
    current = initial
    for _ in range(generations):
        current = step_fn(current)
    return current


def iter_generations(initial: Grid, step_fn: StepFunction = step) -> Iterator[Grid]:
    """Yield ``initial`` and then every successive generation, forever."""
    current = initial
    while True:
        yield current
        current = step_fn(current)


def search_final_state(
    initial: Grid,
    max_steps: int = MAX_GENERATIONS_TO_FINAL_STATE,
    step_fn: StepFunction = step,
) -> StabilizationResult:
    """Advance until a fixed point or a repeated generation is reached.

    The returned grid is the first generation whose snapshot repeats, not a
    canonical representative of the cycle. ``period`` is 1 for a fixed point
    and otherwise the distance back to the earlier occurrence.

    Raises :exc:`NotStabilized` if neither happens within ``max_steps``
    transitions.
    """
    _check_count(max_steps, "max_steps", 1)
    current = initial
    current_snapshot = initial.snapshot()
    # snapshot -> generation at which it was first seen
    history: dict[Snapshot, int] = {current_snapshot: 0}

    for generation in range(1, max_steps + 1):
        next_grid = step_fn(current)
        next_snapshot = next_grid.snapshot()

        if next_snapshot == current_snapshot:
            logger.debug("Fixed point reached at generation %d", generation)
            return StabilizationResult(
                grid=next_grid,
                generation=generation,
                kind=FinalStateKind.FIXED_POINT,
                period=1,
            )

        first_seen = history.get(next_snapshot)
        if first_seen is not None:
            logger.debug(
                "Cycle detected at generation %d (period %d)", generation, generation - first_seen
            )
            return StabilizationResult(
                grid=next_grid,
                generation=generation,
                kind=FinalStateKind.CYCLE,
                period=generation - first_seen,
            )

        history[next_snapshot] = generation
        current = next_grid
        current_snapshot = next_snapshot

    logger.info("Board did not stabilize within %d generations", max_steps)
    raise NotStabilized(max_steps)


def find_final_state(
    initial: Grid,
    max_steps: int = MAX_GENERATIONS_TO_FINAL_STATE,
    step_fn: StepFunction = step,
) -> Grid:
    """Return the first stable or repeating generation reachable from ``initial``."""
    return search_final_state(initial, max_steps=max_steps, step_fn=step_fn).grid

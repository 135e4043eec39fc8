"""Simulation engine: rule application, multi-step advance, and final-state search."""

from life_engine.simulation.engine import (
    FinalStateKind,
    StabilizationResult,
    advance,
    find_final_state,
    iter_generations,
    search_final_state,
)
from life_engine.simulation.step import (
    NEIGHBOR_OFFSETS,
    StepFunction,
    count_live_neighbors,
    next_state,
    step,
    step_brute_force,
    step_live_cells,
)
from life_engine.simulation.trace import (
    generation_stats,
    trace_generations,
    write_generation_log,
)

__all__ = [
    "FinalStateKind",
    "NEIGHBOR_OFFSETS",
    "StabilizationResult",
    "StepFunction",
    "advance",
    "count_live_neighbors",
    "find_final_state",
    "generation_stats",
    "iter_generations",
    "next_state",
    "search_final_state",
    "step",
    "step_brute_force",
    "step_live_cells",
    "trace_generations",
    "write_generation_log",
]

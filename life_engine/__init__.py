"""Conway's Game of Life on bounded grids: stepping, advancing, and stabilization search."""

from life_engine.domain import Grid, InvalidDimensions, LifeError, NotStabilized, Snapshot
from life_engine.simulation import (
    advance,
    find_final_state,
    search_final_state,
    step,
    step_brute_force,
    step_live_cells,
)

__all__ = [
    "Grid",
    "InvalidDimensions",
    "LifeError",
    "NotStabilized",
    "Snapshot",
    "advance",
    "find_final_state",
    "search_final_state",
    "step",
    "step_brute_force",
    "step_live_cells",
]

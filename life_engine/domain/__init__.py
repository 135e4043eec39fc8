"""Domain layer: the board grid, snapshot codec, and error taxonomy."""

from life_engine.domain.errors import (
    InvalidBoardData,
    InvalidDimensions,
    LifeError,
    NotStabilized,
)
from life_engine.domain.grid import Cell, Grid
from life_engine.domain.snapshot import (
    Snapshot,
    decode_cells,
    decode_snapshot,
    encode_cells,
    snapshot_of,
)

__all__ = [
    "Cell",
    "Grid",
    "InvalidBoardData",
    "InvalidDimensions",
    "LifeError",
    "NotStabilized",
    "Snapshot",
    "decode_cells",
    "decode_snapshot",
    "encode_cells",
    "snapshot_of",
]

"""Canonical board snapshots and the external 0/1 matrix codec.

A ``Snapshot`` packs the row-major cell bits of a board together with its
dimensions, so two boards share a snapshot iff they have the same width,
height and cell content. Snapshots are hashable and serve both as the
equality key between generations and as history-set members.

The external matrix uses the row as the outer index (y) and the column as
the inner index (x), with ``1`` for alive and ``0`` for dead.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from life_engine.config.constants import ALIVE, DEAD
from life_engine.domain.errors import InvalidBoardData, InvalidDimensions

CellArray = np.ndarray
"""Boolean array of shape ``(height, width)`` indexed ``[y, x]``."""


@dataclass(frozen=True)
class Snapshot:
    """Immutable, hashable encoding of one generation."""

    width: int
    height: int
    cells: bytes


def snapshot_of(array: CellArray) -> Snapshot:
    """Encode a ``(height, width)`` boolean array."""
    height, width = array.shape
    packed = np.packbits(np.ascontiguousarray(array, dtype=bool).ravel())
    return Snapshot(width=int(width), height=int(height), cells=packed.tobytes())


def decode_snapshot(snapshot: Snapshot) -> CellArray:
    """Return a fresh boolean array holding the snapshot's cells."""
    count = snapshot.width * snapshot.height
    bits = np.unpackbits(np.frombuffer(snapshot.cells, dtype=np.uint8), count=count)
    return bits.astype(bool).reshape(snapshot.height, snapshot.width)


def encode_cells(array: CellArray) -> list[list[int]]:
    """Convert a boolean array into the external 0/1 row matrix."""
    return [[ALIVE if alive else DEAD for alive in row] for row in array.tolist()]


def _is_cell_value(value: object) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return True
    return isinstance(value, (int, np.integer)) and value in (ALIVE, DEAD)


def decode_cells(rows: Sequence[Sequence[int]]) -> CellArray:
    """Convert an external 0/1 row matrix into a fresh boolean array.

    Raises :exc:`InvalidDimensions` for an empty matrix or empty rows and
    :exc:`InvalidBoardData` for ragged rows or values other than 0/1.
    """
    if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
        raise InvalidBoardData("cells must be a sequence of rows")
    height = len(rows)
    if height == 0:
        raise InvalidDimensions(0, 0)
    first = rows[0]
    if isinstance(first, (str, bytes)) or not isinstance(first, Sequence):
        raise InvalidBoardData("row 0 must be a sequence of cell values")
    width = len(first)
    if width == 0:
        raise InvalidDimensions(0, height)

    array = np.zeros((height, width), dtype=bool)
    for y, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise InvalidBoardData(f"row {y} must be a sequence of cell values")
        if len(row) != width:
            raise InvalidBoardData(f"row {y} has length {len(row)}, expected {width}")
        for x, value in enumerate(row):
            if not _is_cell_value(value):
                raise InvalidBoardData(f"cell ({x}, {y}) must be 0 or 1, got {value!r}")
            array[y, x] = bool(value)
    return array

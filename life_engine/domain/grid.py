"""Bounded, non-wrapping board holding one generation's cell states.

Boundary policy: reads outside ``[0, width) x [0, height)`` return dead and
writes there are ignored. Coordinates must be integers; anything else raises
``TypeError``. Every ``Grid`` owns its own storage; generations never share
a cell array.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from life_engine.domain.errors import InvalidBoardData, InvalidDimensions
from life_engine.domain.snapshot import (
    CellArray,
    Snapshot,
    decode_cells,
    encode_cells,
    snapshot_of,
)

Cell = tuple[int, int]
"""Cell coordinate as ``(x, y)``."""


def _check_dimensions(width: object, height: object) -> tuple[int, int]:
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
            raise InvalidDimensions(width, height)
    return int(width), int(height)  # type: ignore[call-overload]


class Grid:
    """Fixed-size live/dead cell matrix with value equality."""

    __slots__ = ("_cells",)

    # Mutable through set(); equality is by value.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, height: int) -> None:
        width, height = _check_dimensions(width, height)
        self._cells: CellArray = np.zeros((height, width), dtype=bool)

    @classmethod
    def from_array(cls, array: CellArray, copy: bool = True) -> Grid:
        """Build a grid from a ``(height, width)`` boolean array.

        With ``copy=False`` the grid takes ownership of ``array``; the caller
        must not keep mutating it.
        """
        if array.ndim != 2:
            raise InvalidBoardData(f"cell array must be two-dimensional, got shape {array.shape}")
        _check_dimensions(array.shape[1], array.shape[0])
        grid = cls.__new__(cls)
        grid._cells = np.array(array, dtype=bool) if copy else array.astype(bool, copy=False)
        return grid

    @classmethod
    def from_cells(cls, rows: Sequence[Sequence[int]]) -> Grid:
        """Decode an external 0/1 row matrix."""
        return cls.from_array(decode_cells(rows), copy=False)

    @classmethod
    def from_live_cells(cls, width: int, height: int, cells: Iterable[Cell]) -> Grid:
        """Build a grid with the given ``(x, y)`` cells alive."""
        grid = cls(width, height)
        for x, y in cells:
            grid.set(x, y, True)
        return grid

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def population(self) -> int:
        """Number of live cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, x: int, y: int) -> bool:
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"cell coordinates must be integers, got {x!r}, {y!r}")
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return bool(self._cells[y, x])

    def set(self, x: int, y: int, alive: bool) -> None:
        if self.in_bounds(x, y):
            self._cells[y, x] = bool(alive)

    def live_cells(self) -> list[Cell]:
        """Return ``(x, y)`` of every live cell in row-major order."""
        ys, xs = np.nonzero(self._cells)
        return [(int(x), int(y)) for y, x in zip(ys, xs, strict=True)]

    def as_array(self) -> CellArray:
        """Return a read-only view of the cell array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def copy(self) -> Grid:
        return Grid.from_array(self._cells)

    def snapshot(self) -> Snapshot:
        return snapshot_of(self._cells)

    def to_cells(self) -> list[list[int]]:
        """Encode as the external 0/1 row matrix."""
        return encode_cells(self._cells)

    def equals(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return False
        return self.snapshot() == other.snapshot()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.equals(other)

    def render(self, live: str = "#", dead: str = ".") -> str:
        """Return one text line per row, for logs and test failure output."""
        return "\n".join(
            "".join(live if alive else dead for alive in row) for row in self._cells.tolist()
        )

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, population={self.population})"

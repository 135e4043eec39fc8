"""Tests for life_engine.domain.snapshot module."""

from __future__ import annotations

from random import Random

import numpy as np
import pytest

from life_engine.domain.errors import InvalidBoardData, InvalidDimensions
from life_engine.domain.grid import Grid
from life_engine.domain.snapshot import (
    Snapshot,
    decode_cells,
    decode_snapshot,
    encode_cells,
    snapshot_of,
)


def _random_grid(rng: Random, width: int, height: int) -> Grid:
    grid = Grid(width, height)
    for y in range(height):
        for x in range(width):
            grid.set(x, y, rng.random() < 0.4)
    return grid


class TestSnapshot:
    def test_equal_grids_share_snapshot(self) -> None:
        a = Grid.from_live_cells(5, 5, [(1, 2), (3, 4)])
        b = Grid.from_live_cells(5, 5, [(3, 4), (1, 2)])
        assert a.snapshot() == b.snapshot()
        assert hash(a.snapshot()) == hash(b.snapshot())

    def test_dimensions_are_part_of_snapshot(self) -> None:
        # Both pack to the same single zero byte.
        assert Grid(2, 3).snapshot() != Grid(3, 2).snapshot()
        assert Grid(1, 6).snapshot() != Grid(6, 1).snapshot()

    def test_single_cell_difference_changes_snapshot(self) -> None:
        rng = Random(3)
        grid = _random_grid(rng, 7, 5)
        changed = grid.copy()
        changed.set(6, 4, not grid.get(6, 4))
        assert grid.snapshot() != changed.snapshot()

    def test_snapshot_usable_as_set_member(self) -> None:
        history = {Grid.from_live_cells(3, 3, [(1, 1)]).snapshot()}
        assert Grid.from_live_cells(3, 3, [(1, 1)]).snapshot() in history
        assert Grid(3, 3).snapshot() not in history

    def test_decode_snapshot_restores_cells(self) -> None:
        rng = Random(11)
        for width, height in [(1, 1), (3, 7), (9, 2), (8, 8)]:
            grid = _random_grid(rng, width, height)
            restored = decode_snapshot(grid.snapshot())
            assert restored.shape == (height, width)
            assert np.array_equal(restored, grid.as_array())

    def test_snapshot_of_matches_grid_snapshot(self) -> None:
        grid = Grid.from_live_cells(4, 2, [(0, 0), (3, 1)])
        assert snapshot_of(grid.as_array()) == grid.snapshot()
        assert isinstance(grid.snapshot(), Snapshot)


class TestEncodeCells:
    def test_alive_is_one_dead_is_zero(self) -> None:
        array = np.array([[True, False], [False, True]])
        assert encode_cells(array) == [[1, 0], [0, 1]]


class TestDecodeCells:
    def test_accepts_bools_and_ints(self) -> None:
        array = decode_cells([[True, 0], [1, False]])
        assert array.tolist() == [[True, False], [True, False]]

    def test_accepts_tuples(self) -> None:
        assert decode_cells(((0, 1),)).tolist() == [[False, True]]

    def test_empty_matrix_is_invalid_dimensions(self) -> None:
        with pytest.raises(InvalidDimensions):
            decode_cells([])

    def test_empty_rows_are_invalid_dimensions(self) -> None:
        with pytest.raises(InvalidDimensions):
            decode_cells([[], []])

    def test_ragged_rows_rejected(self) -> None:
        with pytest.raises(InvalidBoardData, match="row 1"):
            decode_cells([[0, 1], [1]])

    @pytest.mark.parametrize("value", [2, -1, "1", 0.5, None])
    def test_non_binary_values_rejected(self, value: object) -> None:
        with pytest.raises(InvalidBoardData):
            decode_cells([[0, value]])  # type: ignore[list-item]

    @pytest.mark.parametrize("rows", ["0101", [["0", "1"]], [0, 1], None])
    def test_non_matrix_input_rejected(self, rows: object) -> None:
        with pytest.raises(InvalidBoardData):
            decode_cells(rows)  # type: ignore[arg-type]

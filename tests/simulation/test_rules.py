"""Tests for the single-generation transition in life_engine.simulation.step."""

from __future__ import annotations

from random import Random

import pytest

from life_engine.domain.grid import Grid
from life_engine.simulation.step import (
    NEIGHBOR_OFFSETS,
    StepFunction,
    count_live_neighbors,
    neighbor_counts,
    next_state,
    step,
    step_brute_force,
    step_live_cells,
)

FORMULATIONS = [step_brute_force, step_live_cells]


def _random_grid(rng: Random, width: int, height: int, density: float) -> Grid:
    grid = Grid(width, height)
    for y in range(height):
        for x in range(width):
            grid.set(x, y, rng.random() < density)
    return grid


def _block() -> Grid:
    return Grid.from_live_cells(4, 4, [(1, 1), (2, 1), (1, 2), (2, 2)])


def _vertical_blinker() -> Grid:
    return Grid.from_live_cells(5, 5, [(2, 1), (2, 2), (2, 3)])


def _horizontal_blinker() -> Grid:
    return Grid.from_live_cells(5, 5, [(1, 2), (2, 2), (3, 2)])


class TestNextState:
    @pytest.mark.parametrize("count", range(9))
    def test_live_cell(self, count: int) -> None:
        assert next_state(True, count) is (count in (2, 3))

    @pytest.mark.parametrize("count", range(9))
    def test_dead_cell(self, count: int) -> None:
        assert next_state(False, count) is (count == 3)


class TestNeighborCounting:
    def test_eight_distinct_offsets(self) -> None:
        assert len(NEIGHBOR_OFFSETS) == 8
        assert len(set(NEIGHBOR_OFFSETS)) == 8
        assert (0, 0) not in NEIGHBOR_OFFSETS

    @pytest.mark.parametrize("size", [2, 3, 5, 8])
    def test_corner_never_wraps(self, size: int) -> None:
        grid = Grid(size, size)
        for y in range(size):
            for x in range(size):
                grid.set(x, y, True)
        assert count_live_neighbors(grid, 0, 0) == 3
        assert count_live_neighbors(grid, size - 1, size - 1) == 3
        assert neighbor_counts(grid)[0, 0] == 3

    def test_opposite_edge_not_counted(self) -> None:
        grid = Grid.from_live_cells(5, 5, [(4, 0), (0, 4), (4, 4)])
        assert count_live_neighbors(grid, 0, 0) == 0

    def test_vectorised_counts_match_per_cell(self) -> None:
        rng = Random(5)
        grid = _random_grid(rng, 9, 6, 0.5)
        counts = neighbor_counts(grid)
        for y in range(grid.height):
            for x in range(grid.width):
                assert counts[y, x] == count_live_neighbors(grid, x, y)


@pytest.mark.parametrize("step_fn", FORMULATIONS)
class TestClassicPatterns:
    def test_block_is_fixed_point(self, step_fn: StepFunction) -> None:
        assert step_fn(_block()) == _block()

    def test_blinker_has_period_two(self, step_fn: StepFunction) -> None:
        once = step_fn(_vertical_blinker())
        assert once == _horizontal_blinker()
        assert step_fn(once) == _vertical_blinker()

    def test_underpopulation(self, step_fn: StepFunction) -> None:
        grid = Grid.from_live_cells(3, 3, [(1, 1)])
        assert step_fn(grid) == Grid(3, 3)

    def test_overpopulation(self, step_fn: StepFunction) -> None:
        grid = Grid.from_live_cells(3, 3, [(1, 1), (0, 1), (2, 1), (1, 0), (1, 2)])
        result = step_fn(grid)
        assert result.get(1, 1) is False
        for corner in [(0, 0), (2, 0), (0, 2), (2, 2)]:
            assert result.get(*corner) is True
        assert result.to_cells() == [[1, 1, 1], [1, 0, 1], [1, 1, 1]]

    def test_empty_board_stays_empty(self, step_fn: StepFunction) -> None:
        assert step_fn(Grid(6, 4)) == Grid(6, 4)

    def test_one_by_one_board(self, step_fn: StepFunction) -> None:
        assert step_fn(Grid.from_live_cells(1, 1, [(0, 0)])) == Grid(1, 1)

    def test_input_not_mutated(self, step_fn: StepFunction) -> None:
        grid = _vertical_blinker()
        before = grid.snapshot()
        result = step_fn(grid)
        assert grid.snapshot() == before
        assert result is not grid

    def test_result_has_same_dimensions(self, step_fn: StepFunction) -> None:
        result = step_fn(Grid.from_live_cells(7, 3, [(0, 0), (1, 0), (2, 0)]))
        assert (result.width, result.height) == (7, 3)

    def test_result_does_not_share_storage(self, step_fn: StepFunction) -> None:
        grid = _block()
        result = step_fn(grid)
        result.set(0, 0, True)
        assert grid.get(0, 0) is False


class TestFormulationEquivalence:
    @pytest.mark.parametrize("seed", range(10))
    def test_random_boards_agree(self, seed: int) -> None:
        rng = Random(seed)
        width = rng.randint(1, 24)
        height = rng.randint(1, 24)
        grid = _random_grid(rng, width, height, rng.choice([0.1, 0.3, 0.5, 0.8]))
        assert step_brute_force(grid) == step_live_cells(grid)

    def test_agree_over_many_generations(self) -> None:
        rng = Random(42)
        brute = live = _random_grid(rng, 16, 12, 0.35)
        for _ in range(30):
            brute = step_brute_force(brute)
            live = step_live_cells(live)
            assert brute == live

    def test_full_board_agrees(self) -> None:
        grid = _random_grid(Random(0), 5, 5, 1.0)
        assert step_brute_force(grid) == step_live_cells(grid)

    def test_default_step_is_live_cells(self) -> None:
        assert step is step_live_cells

"""Board service: id-keyed boards, limit enforcement, and state replacement.

The service sits between a transport layer and the simulation core. It
validates request sizes against ``GameSettings`` before running the core,
then replaces the stored board wholesale with the computed generation. The
in-memory repository stores copies, so no caller shares cell storage with
a stored board.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from dataclasses import dataclass
from uuid import UUID

from life_engine.config.types import GameSettings
from life_engine.domain.errors import LifeError
from life_engine.domain.grid import Grid
from life_engine.simulation.engine import advance, find_final_state
from life_engine.simulation.step import step

logger = logging.getLogger(__name__)


class BoardNotFound(LifeError, KeyError):
    """No board is stored under the requested id."""

    def __init__(self, board_id: UUID) -> None:
        super().__init__(f"Board with ID {board_id} not found.")
        self.board_id = board_id

    def __str__(self) -> str:
        return str(self.args[0])


class BoardTooLarge(LifeError, ValueError):
    """Board dimensions exceed the configured maximum."""


class GenerationLimitExceeded(LifeError, ValueError):
    """Requested generation count exceeds the per-request maximum."""


def check_board_size(grid: Grid, settings: GameSettings) -> None:
    """Raise :exc:`BoardTooLarge` if ``grid`` exceeds the configured limits."""
    if grid.width > settings.max_board_width:
        raise BoardTooLarge(f"board width {grid.width} exceeds maximum {settings.max_board_width}")
    if grid.height > settings.max_board_height:
        raise BoardTooLarge(
            f"board height {grid.height} exceeds maximum {settings.max_board_height}"
        )


def check_generation_limit(generations: int, settings: GameSettings) -> None:
    """Raise :exc:`GenerationLimitExceeded` above the per-request maximum."""
    if generations > settings.max_generations_per_request:
        raise GenerationLimitExceeded(
            f"generations {generations} exceeds maximum {settings.max_generations_per_request}"
        )


@dataclass
class BoardRecord:
    """A stored board and its identifier."""

    board_id: UUID
    grid: Grid


class InMemoryBoardRepository:
    """Dictionary-backed board store."""

    def __init__(self) -> None:
        self._boards: dict[UUID, Grid] = {}

    def add(self, record: BoardRecord) -> None:
        self._boards[record.board_id] = record.grid.copy()

    def get(self, board_id: UUID) -> BoardRecord | None:
        grid = self._boards.get(board_id)
        if grid is None:
            return None
        return BoardRecord(board_id=board_id, grid=grid.copy())

    def update(self, record: BoardRecord) -> None:
        if record.board_id not in self._boards:
            raise BoardNotFound(record.board_id)
        self._boards[record.board_id] = record.grid.copy()

    def __len__(self) -> int:
        return len(self._boards)


class BoardService:
    """Create boards and advance them by one, N, or until they stabilize."""

    def __init__(
        self,
        repository: InMemoryBoardRepository | None = None,
        settings: GameSettings | None = None,
    ) -> None:
        self.repository = repository if repository is not None else InMemoryBoardRepository()
        self.settings = settings or GameSettings()

    def _load(self, board_id: UUID) -> BoardRecord:
        record = self.repository.get(board_id)
        if record is None:
            raise BoardNotFound(board_id)
        return record

    def _replace(self, record: BoardRecord, grid: Grid) -> list[list[int]]:
        record.grid = grid
        self.repository.update(record)
        return grid.to_cells()

    def create_board(self, rows: Sequence[Sequence[int]]) -> UUID:
        """Store a new board from a 0/1 row matrix and return its id."""
        grid = Grid.from_cells(rows)
        check_board_size(grid, self.settings)
        board_id = uuid.uuid4()
        self.repository.add(BoardRecord(board_id=board_id, grid=grid))
        logger.info("Created board %s (%dx%d)", board_id, grid.width, grid.height)
        return board_id

    def get_board(self, board_id: UUID) -> list[list[int]]:
        return self._load(board_id).grid.to_cells()

    def next_generation(self, board_id: UUID) -> list[list[int]]:
        """Advance the stored board by one generation."""
        record = self._load(board_id)
        return self._replace(record, step(record.grid))

    def generations_away(self, board_id: UUID, generations: int) -> list[list[int]]:
        """Advance the stored board by ``generations`` generations."""
        if isinstance(generations, bool) or not isinstance(generations, int) or generations < 1:
            raise ValueError("Number of generations must be a positive integer.")
        check_generation_limit(generations, self.settings)
        record = self._load(board_id)
        return self._replace(record, advance(record.grid, generations))

    def final_state(self, board_id: UUID) -> list[list[int]]:
        """Advance the stored board to its final state.

        On :exc:`NotStabilized` the stored board is left unchanged.
        """
        record = self._load(board_id)
        final = find_final_state(
            record.grid, max_steps=self.settings.max_generations_to_final_state
        )
        return self._replace(record, final)

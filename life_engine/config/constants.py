"""Centralized limits and encoding constants for board simulation.

The simulation core never reads these directly; callers pass the relevant
budget into the engine entrypoints. Boundary layers (service, CLI) import
from this module rather than defining their own inline literals.
"""

from __future__ import annotations

MAX_BOARD_WIDTH = 1000
"""Widest board accepted by the board service."""

MAX_BOARD_HEIGHT = 1000
"""Tallest board accepted by the board service."""

MAX_GENERATIONS_PER_REQUEST = 10_000
"""Largest generation count answerable in one multi-step request."""

MAX_GENERATIONS_TO_FINAL_STATE = 1000
"""Step budget for the final-state search before giving up."""

ALIVE = 1
"""External matrix value for a live cell."""

DEAD = 0
"""External matrix value for a dead cell."""

SETTINGS_SECTION = "GameSettings"
"""Top-level section name read from JSON settings files."""

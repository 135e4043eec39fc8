"""Exception taxonomy for board construction and simulation.

Out-of-bounds cell reads and writes are deliberately not errors: reads
return dead and writes are ignored.
"""

from __future__ import annotations


class LifeError(Exception):
    """Base class for all life_engine errors."""


class InvalidDimensions(LifeError, ValueError):
    """Board width or height is not a positive integer."""

    def __init__(self, width: object, height: object) -> None:
        super().__init__(f"board dimensions must be positive integers, got {width!r}x{height!r}")
        self.width = width
        self.height = height


class InvalidBoardData(LifeError, ValueError):
    """External cell matrix is not a rectangular 0/1 matrix."""


class NotStabilized(LifeError, RuntimeError):
    """Final-state search exhausted its step budget."""

    def __init__(self, max_steps: int) -> None:
        super().__init__(f"Board did not stabilize after {max_steps} generations.")
        self.max_steps = max_steps

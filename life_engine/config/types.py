"""Configuration dataclass for board and generation limits.

``GameSettings`` bundles the limits the boundary layers enforce before the
simulation core is invoked. Values can be loaded from a JSON settings file
whose ``GameSettings`` section uses either PascalCase or snake_case keys.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path

from life_engine.config.constants import (
    MAX_BOARD_HEIGHT,
    MAX_BOARD_WIDTH,
    MAX_GENERATIONS_PER_REQUEST,
    MAX_GENERATIONS_TO_FINAL_STATE,
    SETTINGS_SECTION,
)

__all__ = [
    "GameSettings",
    "load_settings",
]

# PascalCase settings keys -> dataclass field names
_SETTINGS_KEY_ALIASES = {
    "MaxBoardWidth": "max_board_width",
    "MaxBoardHeight": "max_board_height",
    "MaxGenerationsPerRequest": "max_generations_per_request",
    "MaxGenerationsToFinalState": "max_generations_to_final_state",
}


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans, non-finite and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if not math.isfinite(raw) or raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


@dataclass(frozen=True)
class GameSettings:
    """Board-size and generation limits applied at the service boundary."""

    max_board_width: int = MAX_BOARD_WIDTH
    max_board_height: int = MAX_BOARD_HEIGHT
    max_generations_per_request: int = MAX_GENERATIONS_PER_REQUEST
    max_generations_to_final_state: int = MAX_GENERATIONS_TO_FINAL_STATE

    def __post_init__(self) -> None:
        if self.max_board_width < 1:
            raise ValueError("max_board_width must be >= 1")
        if self.max_board_height < 1:
            raise ValueError("max_board_height must be >= 1")
        if self.max_generations_per_request < 1:
            raise ValueError("max_generations_per_request must be >= 1")
        if self.max_generations_to_final_state < 1:
            raise ValueError("max_generations_to_final_state must be >= 1")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> GameSettings:
        """Build settings from a mapping, keeping defaults for missing keys."""
        field_names = {f.name for f in fields(cls)}
        values: dict[str, int] = {}
        for key, value in raw.items():
            name = _SETTINGS_KEY_ALIASES.get(key, key)
            if name not in field_names:
                raise ValueError(f"unknown settings key: {key}")
            values[name] = _coerce_int(value, key)
        return cls(**values)


def load_settings(path: Path) -> GameSettings:
    """Load ``GameSettings`` from a JSON file.

    A top-level ``GameSettings`` object is used when present; otherwise the
    whole document is treated as the settings mapping.
    """
    payload = json.loads(Path(path).read_text())
    if not isinstance(payload, dict):
        raise ValueError("settings file must contain a JSON object")
    section = payload.get(SETTINGS_SECTION, payload)
    if not isinstance(section, dict):
        raise ValueError(f"{SETTINGS_SECTION} must be a JSON object")
    return GameSettings.from_mapping(section)

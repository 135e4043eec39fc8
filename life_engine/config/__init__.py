"""Configuration layer: limit constants and the typed settings dataclass."""

from life_engine.config.constants import (
    ALIVE,
    DEAD,
    MAX_BOARD_HEIGHT,
    MAX_BOARD_WIDTH,
    MAX_GENERATIONS_PER_REQUEST,
    MAX_GENERATIONS_TO_FINAL_STATE,
    SETTINGS_SECTION,
)
from life_engine.config.types import GameSettings, load_settings

__all__ = [
    "ALIVE",
    "DEAD",
    "GameSettings",
    "MAX_BOARD_HEIGHT",
    "MAX_BOARD_WIDTH",
    "MAX_GENERATIONS_PER_REQUEST",
    "MAX_GENERATIONS_TO_FINAL_STATE",
    "SETTINGS_SECTION",
    "load_settings",
]

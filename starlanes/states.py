"""Game state management for Starlanes."""

import enum


class GameState(enum.Enum):
    """Top-level game states."""

    TITLE = "title"
    GALAXY_MAP = "galaxy_map"
    QUIT = "quit"

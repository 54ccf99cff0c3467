"""Game models for the Sokoban engine."""

from .direction import Direction
from .level import Coordinate, Level, Tile
from .game_state import History, Snapshot

__all__ = [
    "Coordinate",
    "Direction",
    "History",
    "Level",
    "Snapshot",
    "Tile",
]

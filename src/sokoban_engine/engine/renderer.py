"""Text rendering of levels and counters."""

import sys
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO, Tuple

from ..models.game.level import Level, Tile
from .move_resolver import get_legal_directions
from .win_checker import InternalInconsistency, count_boxes_on_goals

WIN_MESSAGE = "Level complete"


def render_level_lines(level: Level, moves: int = 0, pushes: int = 0) -> List[str]:
    """Render a level as text rows followed by the counter line.
    
    Boxes show as '$', or '*' when on a goal; the player is always '@'.
    """
    grid = [[tile.value for tile in row] for row in level.layout]
    
    for box in level.boxes:
        tile = level.tile_at(box)
        if tile == Tile.WALL:
            raise InternalInconsistency(f"Box at {box} is resting on a wall")
        grid[box.y][box.x] = '*' if tile == Tile.GOAL else '$'
    
    grid[level.player.y][level.player.x] = '@'
    
    lines = [''.join(row) for row in grid]
    lines.append(f"Moves: {moves} Pushes: {pushes}")
    return lines


class Renderer(ABC):
    """Abstract sink for game frames."""
    
    @abstractmethod
    def draw(self, level: Level, moves: int, pushes: int) -> None:
        """Display a level together with its counters."""
        pass
    
    @abstractmethod
    def announce_win(self) -> None:
        """Tell the player the level is complete."""
        pass


class TextRenderer(Renderer):
    """Writes frames as plain text to a stream."""
    
    def __init__(self, stream: Optional[TextIO] = None, status_line: bool = False):
        self.stream = stream if stream is not None else sys.stdout
        self.status_line = status_line
    
    def draw(self, level: Level, moves: int, pushes: int) -> None:
        lines = render_level_lines(level, moves, pushes)
        if self.status_line:
            lines.append(self._status(level))
        self.stream.write("\n".join(lines) + "\n\n")
        self.stream.flush()
    
    def announce_win(self) -> None:
        self.stream.write(WIN_MESSAGE + "\n")
        self.stream.flush()
    
    def _status(self, level: Level) -> str:
        legal = ", ".join(direction.value for direction in get_legal_directions(level))
        return f"Boxes on goals: {count_boxes_on_goals(level)}/{len(level.boxes)} | Can move: {legal or 'nowhere'}"


class RecordingRenderer(Renderer):
    """Keeps every frame in memory instead of displaying it."""
    
    def __init__(self):
        self.frames: List[Tuple[Level, int, int]] = []
        self.wins_announced = 0
    
    def draw(self, level: Level, moves: int, pushes: int) -> None:
        self.frames.append((level, moves, pushes))
    
    def announce_win(self) -> None:
        self.wins_announced += 1
    
    @property
    def last_frame(self) -> Optional[Tuple[Level, int, int]]:
        return self.frames[-1] if self.frames else None

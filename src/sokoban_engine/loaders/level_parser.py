"""
Level text parser.

This module turns the fixed-alphabet text form of a level into an
immutable Level:

    #   wall
        floor (space)
    .   goal
    @   player standing on floor
    $   box resting on floor

All rows must have the same width.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from ..models.game.level import Coordinate, Level, Tile
from ..utils.logging_config import get_game_logger

logger = get_game_logger(__name__)

PLAYER_CHAR = '@'
BOX_CHAR = '$'

# Characters that put something on a floor tile
_CHARACTER_TILES: Dict[str, Tile] = {
    '#': Tile.WALL,
    ' ': Tile.FLOOR,
    '.': Tile.GOAL,
    PLAYER_CHAR: Tile.FLOOR,
    BOX_CHAR: Tile.FLOOR,
}


class MalformedLevel(ValueError):
    """Raised when level text cannot be turned into a Level."""
    
    def __init__(self, message: str, row: Optional[int] = None, column: Optional[int] = None):
        self.row = row
        self.column = column
        if row is not None and column is not None:
            message = f"{message} (row {row}, column {column})"
        elif row is not None:
            message = f"{message} (row {row})"
        super().__init__(message)


class LevelParser:
    """Builder that accumulates validated rows and produces a Level.
    
    Rows are checked as they are added; the Level itself is only
    constructed by build(), once every row has been accepted.
    """
    
    def __init__(self):
        self._rows: List[Tuple[Tile, ...]] = []
        self._width: Optional[int] = None
        self._player: Optional[Coordinate] = None
        self._boxes: List[Coordinate] = []
    
    def add_row(self, text: str) -> 'LevelParser':
        """Validate and record one row of level text."""
        y = len(self._rows)
        
        if self._width is None:
            if not text:
                raise MalformedLevel("Level rows cannot be empty", row=y)
            self._width = len(text)
        elif len(text) != self._width:
            raise MalformedLevel(
                f"Row has width {len(text)}, expected {self._width}", row=y
            )
        
        tiles = []
        for x, char in enumerate(text):
            tile = _CHARACTER_TILES.get(char)
            if tile is None:
                raise MalformedLevel(f"Unknown level character {char!r}", row=y, column=x)
            
            if char == PLAYER_CHAR:
                if self._player is not None:
                    raise MalformedLevel(
                        f"Second player found, first at {self._player}", row=y, column=x
                    )
                self._player = Coordinate(x, y)
            elif char == BOX_CHAR:
                self._boxes.append(Coordinate(x, y))
            tiles.append(tile)
        
        self._rows.append(tuple(tiles))
        return self
    
    def build(self) -> Level:
        """Create the Level from every row added so far."""
        if not self._rows:
            raise MalformedLevel("Level has no rows")
        if self._player is None:
            raise MalformedLevel("Level has no player")
        
        level = Level(
            layout=tuple(self._rows),
            player=self._player,
            boxes=frozenset(self._boxes)
        )
        logger.debug(f"Parsed {level.width}x{level.height} level with {len(level.boxes)} boxes")
        return level


def parse_level(lines: Iterable[str]) -> Level:
    """Parse an ordered sequence of equal-width rows into a Level."""
    parser = LevelParser()
    for line in lines:
        parser.add_row(line)
    return parser.build()

"""Level model: the immovable layout plus the player and box positions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterator, Tuple

from .direction import Direction


class Tile(Enum):
    """Immovable tile kinds. The value is the tile's level-source character."""
    WALL = "#"
    FLOOR = " "
    GOAL = "."


@dataclass(frozen=True, order=True)
class Coordinate:
    """Grid position: x is the column, y is the row."""
    x: int
    y: int
    
    def offset(self, direction: Direction, steps: int = 1) -> "Coordinate":
        """Return the coordinate `steps` squares away in `direction`."""
        return Coordinate(self.x + direction.dx * steps, self.y + direction.dy * steps)
    
    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


Layout = Tuple[Tuple[Tile, ...], ...]


@dataclass(frozen=True)
class Level:
    """An immutable level configuration.
    
    Every move produces a new Level; the layout tuple is shared between
    them since it never changes after parsing.
    """
    layout: Layout
    player: Coordinate
    boxes: FrozenSet[Coordinate] = field(default_factory=frozenset)
    
    def __post_init__(self) -> None:
        """Validate level consistency after creation."""
        if not self.layout or not self.layout[0]:
            raise ValueError("Level layout must have at least one row and one column")
        width = len(self.layout[0])
        for row in self.layout:
            if len(row) != width:
                raise ValueError("Level layout must be rectangular")
        if not isinstance(self.boxes, frozenset):
            # Accept any iterable of coordinates but store it frozen
            object.__setattr__(self, 'boxes', frozenset(self.boxes))
        
        if not self.in_bounds(self.player):
            raise ValueError(f"Player position {self.player} is outside the level")
        if self.tile_at(self.player) == Tile.WALL:
            raise ValueError(f"Player position {self.player} is on a wall")
        for box in self.boxes:
            if not self.in_bounds(box):
                raise ValueError(f"Box position {box} is outside the level")
            if self.tile_at(box) == Tile.WALL:
                raise ValueError(f"Box position {box} is on a wall")
        if self.player in self.boxes:
            raise ValueError(f"Player and a box share position {self.player}")
    
    @property
    def width(self) -> int:
        return len(self.layout[0])
    
    @property
    def height(self) -> int:
        return len(self.layout)
    
    @property
    def goals(self) -> FrozenSet[Coordinate]:
        """All coordinates holding a goal tile."""
        return frozenset(coord for coord, tile in self.tiles() if tile == Tile.GOAL)
    
    def in_bounds(self, coord: Coordinate) -> bool:
        """Check if a coordinate indexes into the layout grid."""
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height
    
    def tile_at(self, coord: Coordinate) -> Tile:
        """Get the tile at a coordinate. Callers must bounds-check first."""
        return self.layout[coord.y][coord.x]
    
    def has_box_at(self, coord: Coordinate) -> bool:
        return coord in self.boxes
    
    def tiles(self) -> Iterator[Tuple[Coordinate, Tile]]:
        """Iterate over every (coordinate, tile) pair in row-major order."""
        for y, row in enumerate(self.layout):
            for x, tile in enumerate(row):
                yield Coordinate(x, y), tile
    
    def with_player(self, coord: Coordinate) -> "Level":
        """Return a copy of this level with the player moved to `coord`."""
        return Level(layout=self.layout, player=coord, boxes=self.boxes)
    
    def with_box_moved(self, source: Coordinate, destination: Coordinate, player: Coordinate) -> "Level":
        """Return a copy with the box at `source` relocated and the player at `player`."""
        if source not in self.boxes:
            raise ValueError(f"No box at {source} to move")
        if destination in self.boxes:
            raise ValueError(f"A box already occupies {destination}")
        boxes = (self.boxes - {source}) | {destination}
        return Level(layout=self.layout, player=player, boxes=boxes)

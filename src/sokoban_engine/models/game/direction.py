"""Movement directions on the level grid."""

from enum import Enum


class Direction(Enum):
    """The four directions the player can walk or push in."""
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    
    @property
    def dx(self) -> int:
        """Column displacement of one step."""
        return _DISPLACEMENTS[self][0]
    
    @property
    def dy(self) -> int:
        """Row displacement of one step (rows grow downwards)."""
        return _DISPLACEMENTS[self][1]
    
    @property
    def opposite(self) -> "Direction":
        """The direction pointing the other way."""
        return _OPPOSITES[self]


_DISPLACEMENTS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

"""Win detection for a level configuration."""

from ..models.game.level import Coordinate, Level, Tile


class InternalInconsistency(RuntimeError):
    """Raised when a level reaches a state the movement rules forbid."""
    pass


def _box_tile(level: Level, box: Coordinate) -> Tile:
    tile = level.tile_at(box)
    if tile == Tile.WALL:
        raise InternalInconsistency(f"Box at {box} is resting on a wall")
    return tile


def count_boxes_on_goals(level: Level) -> int:
    """Count the boxes currently sitting on goal tiles."""
    return sum(1 for box in level.boxes if _box_tile(level, box) == Tile.GOAL)


def is_won(level: Level) -> bool:
    """Check if every box occupies a goal tile.
    
    A level without boxes is trivially won.
    """
    return all(_box_tile(level, box) == Tile.GOAL for box in level.boxes)

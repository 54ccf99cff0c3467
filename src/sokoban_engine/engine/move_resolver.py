"""Movement resolution: walking, pushing and blocking."""

from typing import List

from ..models.game.direction import Direction
from ..models.game.level import Coordinate, Level, Tile
from ..utils.logging_config import get_game_logger
from .turn_outcome import TurnOutcome

logger = get_game_logger(__name__)


def _is_wall(level: Level, coord: Coordinate) -> bool:
    """Off-grid squares count as walls."""
    return not level.in_bounds(coord) or level.tile_at(coord) == Tile.WALL


def attempt_move(level: Level, direction: Direction) -> TurnOutcome:
    """Compute the outcome of the player trying to step in `direction`.
    
    The player walks onto a free floor or goal square. If a box is in the
    way it is pushed one square further, unless a wall or another box is
    behind it. Squares outside the grid behave like walls.
    """
    target = level.player.offset(direction)
    
    if _is_wall(level, target):
        logger.debug(f"Move {direction.value} from {level.player} blocked by wall at {target}")
        return TurnOutcome.blocked()
    
    if level.has_box_at(target):
        beyond = target.offset(direction)
        if _is_wall(level, beyond):
            logger.debug(f"Push {direction.value} of box at {target} blocked by wall at {beyond}")
            return TurnOutcome.blocked()
        if level.has_box_at(beyond):
            logger.debug(f"Push {direction.value} of box at {target} blocked by box at {beyond}")
            return TurnOutcome.blocked()
        
        logger.debug(f"Pushed box {direction.value} from {target} to {beyond}")
        return TurnOutcome.pushed(level.with_box_moved(target, beyond, player=target))
    
    logger.debug(f"Moved {direction.value} from {level.player} to {target}")
    return TurnOutcome.moved(level.with_player(target))


def get_legal_directions(level: Level) -> List[Direction]:
    """Get every direction in which a move or push would not be blocked."""
    return [
        direction for direction in Direction
        if not attempt_move(level, direction).is_blocked
    ]

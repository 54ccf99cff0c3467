"""Applies game events to the undo history."""

from ..models.game.game_state import History
from ..utils.logging_config import get_game_logger
from .game_events import DirectionEvent, GameEvent, UndoEvent
from .move_resolver import attempt_move

logger = get_game_logger(__name__)


def apply_event(history: History, event: GameEvent) -> History:
    """Return the history that results from applying `event`.
    
    Direction events push a new snapshot unless the move is blocked; undo
    pops one snapshot but never the initial one. Quit and continue events
    leave the history untouched; ending the game is the loop's business.
    """
    if isinstance(event, DirectionEvent):
        top = history.top
        outcome = attempt_move(top.level, event.direction)
        
        if outcome.is_blocked:
            return history
        if outcome.is_push:
            return history.push(top.after_push(outcome.level))
        return history.push(top.after_move(outcome.level))
    
    if isinstance(event, UndoEvent):
        if not history.can_undo:
            logger.debug("Undo ignored at the initial snapshot")
        return history.pop()
    
    return history

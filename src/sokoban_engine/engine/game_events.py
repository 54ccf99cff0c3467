"""Event types fed into the game loop."""

from dataclasses import dataclass

from ..models.game.direction import Direction


@dataclass(frozen=True)
class GameEvent:
    """Base class for all game events."""
    pass


@dataclass(frozen=True)
class DirectionEvent(GameEvent):
    """Event to walk or push in a direction."""
    direction: Direction


@dataclass(frozen=True)
class QuitEvent(GameEvent):
    """Event to leave the game."""
    pass


@dataclass(frozen=True)
class UndoEvent(GameEvent):
    """Event to take back the last move."""
    pass


@dataclass(frozen=True)
class ContinueEvent(GameEvent):
    """No-op event, e.g. for an unbound key."""
    pass

"""Turn outcome values returned by the movement resolver."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models.game.level import Level


class TurnOutcomeType(Enum):
    """Types of movement outcomes."""
    PUSHED = "pushed"    # Player moved and a box moved with it
    MOVED = "moved"      # Player moved, no box involved
    BLOCKED = "blocked"  # Nothing happened


@dataclass(frozen=True)
class TurnOutcome:
    """Structured result of attempting a move.
    
    Blocked outcomes carry no level; the others carry the new Level.
    """
    outcome_type: TurnOutcomeType
    level: Optional[Level] = None
    
    def __post_init__(self) -> None:
        if (self.outcome_type == TurnOutcomeType.BLOCKED) != (self.level is None):
            raise ValueError("Only blocked outcomes may omit the resulting level")
    
    @classmethod
    def pushed(cls, level: Level) -> 'TurnOutcome':
        return cls(outcome_type=TurnOutcomeType.PUSHED, level=level)
    
    @classmethod
    def moved(cls, level: Level) -> 'TurnOutcome':
        return cls(outcome_type=TurnOutcomeType.MOVED, level=level)
    
    @classmethod
    def blocked(cls) -> 'TurnOutcome':
        return cls(outcome_type=TurnOutcomeType.BLOCKED)
    
    @property
    def is_blocked(self) -> bool:
        return self.outcome_type == TurnOutcomeType.BLOCKED
    
    @property
    def is_push(self) -> bool:
        return self.outcome_type == TurnOutcomeType.PUSHED

"""Turn snapshots and the undo history."""

from dataclasses import dataclass
from typing import Iterator, Tuple

from .level import Level


@dataclass(frozen=True)
class Snapshot:
    """One point-in-time game state: a level plus its counters."""
    level: Level
    moves: int = 0
    pushes: int = 0
    
    def __post_init__(self) -> None:
        """Validate counters after creation."""
        if self.moves < 0 or self.pushes < 0:
            raise ValueError("Move and push counters cannot be negative")
        if self.pushes > self.moves:
            raise ValueError(f"Pushes ({self.pushes}) cannot exceed moves ({self.moves})")
    
    @classmethod
    def initial(cls, level: Level) -> 'Snapshot':
        """Create the starting snapshot for a freshly parsed level."""
        return cls(level=level, moves=0, pushes=0)
    
    def after_move(self, level: Level) -> 'Snapshot':
        """Snapshot following a walk that displaced no box."""
        return Snapshot(level=level, moves=self.moves + 1, pushes=self.pushes)
    
    def after_push(self, level: Level) -> 'Snapshot':
        """Snapshot following a push."""
        return Snapshot(level=level, moves=self.moves + 1, pushes=self.pushes + 1)


@dataclass(frozen=True)
class History:
    """Immutable stack of snapshots, most recent last.
    
    The bottom element is always the level's initial snapshot and is never
    popped. Pushing and popping return new History values, so holding on to
    an old History is enough to restore it.
    """
    snapshots: Tuple[Snapshot, ...]
    
    def __post_init__(self) -> None:
        """Validate history after creation."""
        if not self.snapshots:
            raise ValueError("History must contain the initial snapshot")
        bottom = self.snapshots[0]
        if bottom.moves != 0 or bottom.pushes != 0:
            raise ValueError("History must start from a snapshot with no moves or pushes")
    
    @classmethod
    def start(cls, level: Level) -> 'History':
        """Create a history holding only the initial snapshot of `level`."""
        return cls(snapshots=(Snapshot.initial(level),))
    
    @property
    def top(self) -> Snapshot:
        """The current (most recent) snapshot."""
        return self.snapshots[-1]
    
    @property
    def initial(self) -> Snapshot:
        return self.snapshots[0]
    
    @property
    def can_undo(self) -> bool:
        return len(self.snapshots) > 1
    
    def push(self, snapshot: Snapshot) -> 'History':
        """Return a new history with `snapshot` on top. Copies the tuple, so each push is O(n)."""
        return History(snapshots=self.snapshots + (snapshot,))
    
    def pop(self) -> 'History':
        """Drop the top snapshot; at the initial snapshot this returns self."""
        if not self.can_undo:
            return self
        return History(snapshots=self.snapshots[:-1])
    
    def __len__(self) -> int:
        return len(self.snapshots)
    
    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self.snapshots)

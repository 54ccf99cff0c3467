"""Key input: providers that read raw keys and a dispatcher that maps them to events."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional

from ..models.game.direction import Direction
from .game_events import ContinueEvent, DirectionEvent, GameEvent, QuitEvent, UndoEvent


class InputExhausted(Exception):
    """Raised when an input provider has no more keys to give."""
    pass


class KeyBindings(Mapping):
    """Immutable mapping from key names to game events."""
    
    def __init__(self, bindings: Optional[Mapping[str, GameEvent]] = None):
        self._bindings = MappingProxyType(dict(bindings or {}))
    
    def __getitem__(self, key: str) -> GameEvent:
        return self._bindings[key]
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)
    
    def __len__(self) -> int:
        return len(self._bindings)
    
    def keys_for(self, event: GameEvent) -> List[str]:
        """Get every key bound to an event."""
        return [key for key, bound in self._bindings.items() if bound == event]
    
    def __repr__(self) -> str:
        return f"KeyBindings({dict(self._bindings)!r})"


DEFAULT_KEY_BINDINGS = KeyBindings({
    'q': QuitEvent(),
    'w': QuitEvent(),
    'u': UndoEvent(),
    'up': DirectionEvent(Direction.UP),
    'down': DirectionEvent(Direction.DOWN),
    'left': DirectionEvent(Direction.LEFT),
    'right': DirectionEvent(Direction.RIGHT),
    'k': DirectionEvent(Direction.UP),
    'j': DirectionEvent(Direction.DOWN),
    'h': DirectionEvent(Direction.LEFT),
    'l': DirectionEvent(Direction.RIGHT),
})


class InputDispatcher:
    """Maps raw keys to events using the bindings given at construction."""
    
    def __init__(self, bindings: KeyBindings = DEFAULT_KEY_BINDINGS):
        self.bindings = bindings
    
    def dispatch(self, key: str) -> GameEvent:
        """Get the event bound to `key`, or a continue event if it is unbound."""
        return self.bindings.get(key.strip(), ContinueEvent())


class InputProvider(ABC):
    """Abstract base class for providing raw keys."""
    
    @abstractmethod
    def read_key(self) -> str:
        """Block until the next key is available and return it."""
        pass


class QueuedInputProvider(InputProvider):
    """Input provider that uses pre-queued keys."""
    
    def __init__(self, queued_keys: Optional[Iterable[str]] = None):
        self.queued_keys = list(queued_keys or [])
        self.input_index = 0
    
    def queue_key(self, key: str) -> None:
        """Queue a key."""
        self.queued_keys.append(key)
    
    def queue_keys(self, keys: Iterable[str]) -> None:
        """Queue multiple keys."""
        self.queued_keys.extend(keys)
    
    @property
    def remaining(self) -> int:
        return len(self.queued_keys) - self.input_index
    
    def read_key(self) -> str:
        if self.input_index >= len(self.queued_keys):
            raise InputExhausted("No more queued keys available")
        
        key = self.queued_keys[self.input_index]
        self.input_index += 1
        return key


class ConsoleInputProvider(InputProvider):
    """Line-based console input; end of input raises InputExhausted."""
    
    def __init__(self, prompt: str = "> "):
        self.prompt = prompt
    
    def read_key(self) -> str:
        try:
            return input(self.prompt)
        except EOFError as e:
            raise InputExhausted("Console input closed") from e

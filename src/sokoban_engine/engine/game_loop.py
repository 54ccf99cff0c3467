"""Turn-based game loop and its state machine."""

from enum import Enum

from ..models.game.game_state import History, Snapshot
from ..models.game.level import Level
from ..utils.logging_config import get_game_logger
from .game_engine import apply_event
from .game_events import GameEvent, QuitEvent
from .input_system import InputDispatcher, InputProvider
from .renderer import Renderer
from .win_checker import is_won

logger = get_game_logger(__name__)


class GameLoopState(Enum):
    """Current state of the game loop."""
    PLAYING = "playing"
    WON = "won"
    QUIT = "quit"


class GameLoop:
    """Owns the history of one level and drives it from input events.
    
    States go PLAYING -> WON when a move solves the level, PLAYING -> QUIT
    on a quit event, and WON -> QUIT on any further event. QUIT is terminal.
    """
    
    def __init__(self, level: Level):
        self._history = History.start(level)
        self.state = GameLoopState.PLAYING
    
    @property
    def history(self) -> History:
        return self._history
    
    @property
    def current(self) -> Snapshot:
        """The snapshot currently on top of the history."""
        return self._history.top
    
    @property
    def is_finished(self) -> bool:
        return self.state == GameLoopState.QUIT
    
    def handle_event(self, event: GameEvent) -> GameLoopState:
        """Apply one event and return the resulting loop state."""
        if self.state == GameLoopState.QUIT:
            return self.state
        
        if self.state == GameLoopState.WON:
            # Any input acknowledges the win
            self._set_state(GameLoopState.QUIT)
            return self.state
        
        if isinstance(event, QuitEvent):
            self._set_state(GameLoopState.QUIT)
            return self.state
        
        new_history = apply_event(self._history, event)
        if new_history is not self._history:
            self._history = new_history
            top = self._history.top
            logger.debug(f"Now at {top.moves} moves, {top.pushes} pushes")
            if is_won(top.level):
                self._set_state(GameLoopState.WON)
        
        return self.state
    
    def run(self, input_provider: InputProvider, dispatcher: InputDispatcher,
            renderer: Renderer) -> Snapshot:
        """Play until the loop reaches QUIT and return the final snapshot.
        
        Errors from the input provider or renderer are not caught.
        """
        self._draw(renderer)
        
        while not self.is_finished:
            key = input_provider.read_key()
            event = dispatcher.dispatch(key)
            previous_state = self.state
            previous_history = self._history
            
            self.handle_event(event)
            
            if self.state == GameLoopState.WON and previous_state != GameLoopState.WON:
                self._draw(renderer)
                renderer.announce_win()
            elif self.state == GameLoopState.PLAYING and self._history is not previous_history:
                self._draw(renderer)
        
        return self.current
    
    def _draw(self, renderer: Renderer) -> None:
        top = self.current
        renderer.draw(top.level, top.moves, top.pushes)
    
    def _set_state(self, state: GameLoopState) -> None:
        logger.info(f"Game loop {self.state.value} -> {state.value}")
        self.state = state

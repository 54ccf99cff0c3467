"""Engine package for game rules and logic."""

from .turn_outcome import TurnOutcome, TurnOutcomeType
from .move_resolver import attempt_move, get_legal_directions
from .win_checker import InternalInconsistency, count_boxes_on_goals, is_won
from .game_events import ContinueEvent, DirectionEvent, GameEvent, QuitEvent, UndoEvent
from .game_engine import apply_event
from .input_system import (
    DEFAULT_KEY_BINDINGS,
    ConsoleInputProvider,
    InputDispatcher,
    InputExhausted,
    InputProvider,
    KeyBindings,
    QueuedInputProvider,
)
from .renderer import RecordingRenderer, Renderer, TextRenderer, render_level_lines
from .game_loop import GameLoop, GameLoopState

__all__ = [
    'ContinueEvent', 'DEFAULT_KEY_BINDINGS', 'ConsoleInputProvider', 'DirectionEvent',
    'GameEvent', 'GameLoop', 'GameLoopState', 'InputDispatcher', 'InputExhausted',
    'InputProvider', 'InternalInconsistency', 'KeyBindings', 'QueuedInputProvider',
    'QuitEvent', 'RecordingRenderer', 'Renderer', 'TextRenderer', 'TurnOutcome',
    'TurnOutcomeType', 'UndoEvent', 'apply_event', 'attempt_move', 'count_boxes_on_goals',
    'get_legal_directions', 'is_won', 'render_level_lines',
]

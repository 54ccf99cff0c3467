"""Shared test helpers and utilities for all test files."""

from typing import Iterable, List

from sokoban_engine.engine.game_events import DirectionEvent, GameEvent
from sokoban_engine.engine.game_loop import GameLoop
from sokoban_engine.loaders.level_loader import lines_from_text
from sokoban_engine.loaders.level_parser import parse_level
from sokoban_engine.models.game.direction import Direction
from sokoban_engine.models.game.game_state import History
from sokoban_engine.models.game.level import Level


# Box two squares left of a goal, player below
SIMPLE_LEVEL = """
#######
#     #
# $ . #
#  @  #
#######
"""

# Two boxes in a row to the right of the player
TWO_BOXES_LEVEL = """
########
#@$$ ..#
########
"""

# One push to the right solves it
ONE_PUSH_LEVEL = """
#####
#@$.#
#####
"""

DIRECTION_KEYS = {
    'U': Direction.UP,
    'D': Direction.DOWN,
    'L': Direction.LEFT,
    'R': Direction.RIGHT,
}


def create_test_level(text: str = SIMPLE_LEVEL) -> Level:
    """Helper to parse a triple-quoted level literal."""
    return parse_level(lines_from_text(text))


def create_test_history(text: str = SIMPLE_LEVEL) -> History:
    return History.start(create_test_level(text))


def direction_events(moves: str) -> List[GameEvent]:
    """Helper to turn a move string like 'UURD' into direction events."""
    return [DirectionEvent(DIRECTION_KEYS[move]) for move in moves]


def play_events(loop: GameLoop, events: Iterable[GameEvent]) -> GameLoop:
    """Feed events to a game loop one at a time."""
    for event in events:
        loop.handle_event(event)
    return loop

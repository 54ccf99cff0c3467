"""Tests for applying events to the history."""

import random

import pytest

from sokoban_engine.engine.game_engine import apply_event
from sokoban_engine.engine.game_events import ContinueEvent, DirectionEvent, QuitEvent, UndoEvent
from sokoban_engine.loaders.level_loader import load_builtin_level
from sokoban_engine.models.game.direction import Direction
from sokoban_engine.models.game.game_state import History
from sokoban_engine.models.game.level import Coordinate
from tests.helpers import TWO_BOXES_LEVEL, create_test_history, direction_events


@pytest.fixture
def history():
    return create_test_history()


class TestDirectionEvents:
    """Test moves and pushes recorded in the history."""
    
    def test_move_adds_snapshot(self, history):
        result = apply_event(history, DirectionEvent(Direction.LEFT))
        
        assert len(result) == 2
        assert result.top.moves == 1
        assert result.top.pushes == 0
        assert result.top.level.player == Coordinate(2, 3)
    
    def test_push_counts_push(self, history):
        for event in direction_events("LU"):
            history = apply_event(history, event)
        
        assert history.top.moves == 2
        assert history.top.pushes == 1
        assert history.top.level.boxes == frozenset({Coordinate(2, 1)})
    
    def test_blocked_move_leaves_history_unchanged(self, history):
        result = apply_event(history, DirectionEvent(Direction.DOWN))
        assert result is history
    
    def test_blocked_push_leaves_history_unchanged(self):
        history = create_test_history(TWO_BOXES_LEVEL)
        assert apply_event(history, DirectionEvent(Direction.RIGHT)) is history


class TestUndo:
    """Test undo behaviour."""
    
    @pytest.mark.parametrize("moves", ["L", "LU", "RRUU"])
    def test_undo_restores_previous_state(self, history, moves):
        for event in direction_events(moves[:-1]):
            history = apply_event(history, event)
        
        after = apply_event(history, direction_events(moves[-1])[0])
        assert after is not history
        
        restored = apply_event(after, UndoEvent())
        
        assert restored == history
        assert restored.top.level == history.top.level
        assert (restored.top.moves, restored.top.pushes) == (history.top.moves, history.top.pushes)
    
    def test_undo_at_start_is_noop(self, history):
        result = apply_event(history, UndoEvent())
        
        assert len(result) == 1
        assert result.top == history.top
    
    def test_undo_all_the_way_back(self, history):
        for event in direction_events("LUR"):
            history = apply_event(history, event)
        
        for _ in range(5):
            history = apply_event(history, UndoEvent())
        
        assert len(history) == 1
        assert history.top.moves == 0


class TestNonMutatingEvents:
    """Quit and continue never touch the history."""
    
    @pytest.mark.parametrize("event", [QuitEvent(), ContinueEvent()])
    def test_history_unchanged(self, history, event):
        assert apply_event(history, event) is history


class TestRandomPlayInvariants:
    """Counters and box positions stay consistent over long random games."""
    
    @pytest.mark.parametrize("seed", range(5))
    def test_invariants_hold(self, seed):
        rng = random.Random(seed)
        level = load_builtin_level("classic")
        history = History.start(level)
        events = [DirectionEvent(direction) for direction in Direction] + [UndoEvent()]
        
        for _ in range(300):
            history = apply_event(history, rng.choice(events))
            top = history.top
            
            assert 0 <= top.pushes <= top.moves
            assert len(top.level.boxes) == len(level.boxes)
            assert top.level.player not in top.level.boxes
            assert top.moves == len(history) - 1
            assert history.initial.level == level

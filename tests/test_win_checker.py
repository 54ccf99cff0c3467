"""Tests for win detection."""

import pytest

from sokoban_engine.engine.win_checker import InternalInconsistency, count_boxes_on_goals, is_won
from sokoban_engine.loaders.level_parser import parse_level
from sokoban_engine.models.game.level import Coordinate, Level, Tile

W, F, G = Tile.WALL, Tile.FLOOR, Tile.GOAL


def _room(centre: Tile) -> Level:
    """5x5 room with a box at (2, 2) standing on `centre`."""
    layout = (
        (W, W, W, W, W),
        (W, F, F, F, W),
        (W, F, centre, F, W),
        (W, F, F, F, W),
        (W, W, W, W, W),
    )
    return Level(layout=layout, player=Coordinate(1, 1), boxes={Coordinate(2, 2)})


class TestIsWon:
    """Test the all-boxes-on-goals check."""
    
    def test_box_on_goal_wins(self):
        assert is_won(_room(G)) is True
    
    def test_box_on_floor_does_not_win(self):
        assert is_won(_room(F)) is False
    
    def test_all_boxes_must_be_on_goals(self):
        level = parse_level(["@$.$."])
        assert not is_won(level)
    
    def test_no_boxes_is_won(self):
        assert is_won(parse_level(["@ ."]))
    
    def test_box_on_wall_is_inconsistency(self):
        level = _room(G)
        # Bypass construction checks to simulate a corrupted level
        object.__setattr__(level, 'boxes', frozenset({Coordinate(0, 0)}))
        
        with pytest.raises(InternalInconsistency, match="resting on a wall"):
            is_won(level)


class TestCountBoxesOnGoals:
    """Test the progress counter."""
    
    def test_count(self):
        level = parse_level(["@$ . ", "#   #"])
        assert count_boxes_on_goals(level) == 0
        
        level = Level(layout=level.layout, player=level.player, boxes={Coordinate(3, 0), Coordinate(1, 0)})
        assert count_boxes_on_goals(level) == 1

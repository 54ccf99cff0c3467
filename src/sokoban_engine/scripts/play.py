#!/usr/bin/env python3
"""
play.py - Play a Sokoban level in the terminal.

Usage:
    sokoban-play                        # Play the built-in classic level
    sokoban-play --builtin tutorial     # Play another built-in level
    sokoban-play --level my_level.txt   # Play a level from a text file

Controls (type a key and press Enter):
    k / up      Up
    j / down    Down
    h / left    Left
    l / right   Right
    u           Undo
    q / w       Quit
"""

import argparse
import os
import sys
from typing import List, Optional

from ..engine.game_loop import GameLoop
from ..engine.game_events import DirectionEvent, QuitEvent, UndoEvent
from ..engine.input_system import ConsoleInputProvider, InputDispatcher, InputExhausted, InputProvider, KeyBindings
from ..engine.renderer import Renderer, TextRenderer
from ..engine.win_checker import is_won
from ..loaders.level_loader import BUILTIN_LEVELS, DEFAULT_LEVEL_NAME, load_builtin_level, load_level_file
from ..loaders.level_parser import MalformedLevel
from ..models.game.direction import Direction
from ..utils.logging_config import get_game_logger, setup_logging

logger = get_game_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a Sokoban level in the terminal")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--level", help="Path to a level text file")
    source.add_argument("--builtin", choices=sorted(BUILTIN_LEVELS), default=DEFAULT_LEVEL_NAME,
                        help="Name of a built-in level (default: %(default)s)")
    parser.add_argument("--log-level", default=None,
                        help="Logging level (overrides SOKOBAN_LOG_LEVEL)")
    parser.add_argument("--log-format", choices=["simple", "detailed"], default="simple",
                        help="Log record format")
    parser.add_argument("--status", action="store_true",
                        help="Show boxes on goals and open directions under the board")
    return parser


def describe_controls(bindings: KeyBindings) -> str:
    """One-line summary of the keys bound to each event."""
    events = [DirectionEvent(direction) for direction in Direction] + [UndoEvent(), QuitEvent()]
    labels = [direction.value for direction in Direction] + ["undo", "quit"]
    parts = []
    for event, label in zip(events, labels):
        keys = bindings.keys_for(event)
        if keys:
            parts.append(f"{label}: {'/'.join(keys)}")
    return "Controls (type a key, then Enter) - " + ", ".join(parts)


def main(argv: Optional[List[str]] = None,
         input_provider: Optional[InputProvider] = None,
         renderer: Optional[Renderer] = None) -> int:
    """Run the game and return a process exit status."""
    args = build_parser().parse_args(argv)
    
    if args.log_level or args.log_format != "simple":
        level_name = args.log_level or os.getenv("SOKOBAN_LOG_LEVEL", "WARNING")
        setup_logging(level=level_name, format_style=args.log_format, force=True)
    
    try:
        if args.level:
            level = load_level_file(args.level)
        else:
            level = load_builtin_level(args.builtin)
    except MalformedLevel as e:
        print(f"Malformed level: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Cannot read level: {e}", file=sys.stderr)
        return 2
    
    dispatcher = InputDispatcher()
    print(describe_controls(dispatcher.bindings))
    
    loop = GameLoop(level)
    try:
        final = loop.run(
            input_provider or ConsoleInputProvider(),
            dispatcher,
            renderer or TextRenderer(status_line=args.status),
        )
    except InputExhausted:
        # End of input ends the game whatever the bindings say
        loop.handle_event(QuitEvent())
        final = loop.current
    
    solved = is_won(final.level)
    logger.info(f"Finished after {final.moves} moves and {final.pushes} pushes (solved: {solved})")
    print("Quit")
    return 0


if __name__ == "__main__":
    sys.exit(main())

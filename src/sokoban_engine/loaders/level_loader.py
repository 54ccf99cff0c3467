"""Level sources: text blocks, files and the bundled levels."""

from pathlib import Path
from typing import Dict, List, Union

from ..models.game.level import Level
from ..utils.logging_config import get_game_logger
from .level_parser import parse_level

logger = get_game_logger(__name__)


BUILTIN_LEVELS: Dict[str, str] = {
    "classic": (
        "    #####          \n"
        "    #   #          \n"
        "    #$  #          \n"
        "  ###  $##         \n"
        "  #  $ $ #         \n"
        "### # ## #   ######\n"
        "#   # ## #####  ..#\n"
        "# $  $          ..#\n"
        "##### ### #@##  ..#\n"
        "    #     #########\n"
        "    #######        \n"
    ),
    "tutorial": (
        "#######\n"
        "#     #\n"
        "# $ . #\n"
        "#  @  #\n"
        "#######\n"
    ),
}

DEFAULT_LEVEL_NAME = "classic"


def lines_from_text(text: str) -> List[str]:
    """Split a block of level text into rows.
    
    Only line terminators are removed; spaces are floor tiles. A single
    blank line at either end (as left by triple-quoted literals) is dropped.
    """
    lines = text.splitlines()
    if lines and not lines[0]:
        lines = lines[1:]
    if lines and not lines[-1]:
        lines = lines[:-1]
    return lines


def load_level_text(text: str) -> Level:
    return parse_level(lines_from_text(text))


def load_level_file(path: Union[str, Path]) -> Level:
    """Read a level text file and parse it."""
    level_path = Path(path)
    with open(level_path, 'r', encoding='utf-8') as f:
        text = f.read()
    
    level = load_level_text(text)
    logger.info(f"Loaded level from {level_path} ({level.width}x{level.height}, {len(level.boxes)} boxes)")
    return level


def load_builtin_level(name: str = DEFAULT_LEVEL_NAME) -> Level:
    """Parse one of the bundled levels by name."""
    if name not in BUILTIN_LEVELS:
        available = ", ".join(sorted(BUILTIN_LEVELS))
        raise KeyError(f"Unknown built-in level {name!r} (available: {available})")
    
    level = load_level_text(BUILTIN_LEVELS[name])
    logger.info(f"Loaded built-in level {name!r}")
    return level

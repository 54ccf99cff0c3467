"""Level loaders for the Sokoban engine."""

from .level_parser import LevelParser, MalformedLevel, parse_level
from .level_loader import (
    BUILTIN_LEVELS,
    DEFAULT_LEVEL_NAME,
    lines_from_text,
    load_builtin_level,
    load_level_file,
    load_level_text,
)

__all__ = [
    "BUILTIN_LEVELS",
    "DEFAULT_LEVEL_NAME",
    "LevelParser",
    "MalformedLevel",
    "lines_from_text",
    "load_builtin_level",
    "load_level_file",
    "load_level_text",
    "parse_level",
]

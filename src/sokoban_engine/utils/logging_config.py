"""Logging configuration for Sokoban Engine."""

import logging
import sys


def setup_logging(level: str = "WARNING", format_style: str = "simple", force: bool = False) -> None:
    """
    Set up logging configuration for the entire application.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: Format style - "simple" or "detailed"
        force: Replace handlers already installed on the root logger
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    
    formats = {
        "simple": "%(name)s - %(levelname)s - %(message)s",
        "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
    }
    log_format = formats.get(format_style, formats["simple"])
    
    # Board frames go to stdout, so log records go to stderr. Without force
    # this is a no-op when the root logger already has handlers.
    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=force
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.
    
    Args:
        name: Logger name (typically __name__ from the calling module)
        
    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def get_game_logger(module_name: str) -> logging.Logger:
    """
    Get a logger with a shortened name for engine modules.
    
    Args:
        module_name: Full module name (e.g., 'sokoban_engine.engine.move_resolver')
        
    Returns:
        Logger with shortened name (e.g., 'engine.move_resolver')
    """
    if module_name.startswith('sokoban_engine.'):
        short_name = module_name[len('sokoban_engine.'):]
    else:
        short_name = module_name
    
    return logging.getLogger(short_name)

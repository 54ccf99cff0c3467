"""Tests for logging configuration."""

import importlib
import io
import logging

import pytest

import sokoban_engine
from sokoban_engine.utils.logging_config import get_game_logger, get_logger, setup_logging


@pytest.fixture
def root_logger():
    """Give a test the root logger and put its level and handlers back afterwards."""
    root = logging.getLogger()
    saved_level = root.level
    saved_handlers = root.handlers[:]
    
    yield root
    
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)


def _install_host_handler(root):
    """Replace the root handlers with one writing to a buffer, as an application would."""
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    buffer = io.StringIO()
    handler = logging.StreamHandler(buffer)
    root.addHandler(handler)
    root.setLevel(logging.INFO)
    return handler, buffer


class TestLoggingConfig:
    """Test logger setup helpers."""
    
    def test_game_logger_strips_package_prefix(self):
        assert get_game_logger('sokoban_engine.engine.move_resolver').name == 'engine.move_resolver'
        assert get_game_logger('other.module').name == 'other.module'
    
    def test_get_logger(self):
        assert get_logger('sokoban_engine').name == 'sokoban_engine'
    
    def test_forced_setup_sets_level(self, root_logger):
        setup_logging(level="debug", force=True)
        assert root_logger.level == logging.DEBUG
        
        setup_logging(level="not-a-level", force=True)
        assert root_logger.level == logging.WARNING
    
    def test_setup_keeps_existing_handlers(self, root_logger):
        handler, _ = _install_host_handler(root_logger)
        
        setup_logging(level="debug")
        
        assert root_logger.handlers == [handler]
        assert root_logger.level == logging.INFO
    
    def test_forced_setup_replaces_handlers(self, root_logger):
        handler, _ = _install_host_handler(root_logger)
        
        setup_logging(level="error", force=True)
        
        assert handler not in root_logger.handlers
        assert root_logger.level == logging.ERROR
    
    def test_package_import_keeps_host_logging(self, root_logger):
        handler, buffer = _install_host_handler(root_logger)
        
        importlib.reload(sokoban_engine)
        logging.getLogger('host').info('hello')
        
        assert handler in root_logger.handlers
        assert root_logger.level == logging.INFO
        assert 'hello' in buffer.getvalue()
    
    def test_moves_logged_at_debug(self, caplog):
        from sokoban_engine.engine.move_resolver import attempt_move
        from sokoban_engine.loaders.level_parser import parse_level
        from sokoban_engine.models.game.direction import Direction
        
        with caplog.at_level(logging.DEBUG):
            attempt_move(parse_level(["#@ "]), Direction.LEFT)
        
        assert "blocked by wall" in caplog.text

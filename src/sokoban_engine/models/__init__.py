"""Sokoban engine data models."""

from . import game

__all__ = ["game"]

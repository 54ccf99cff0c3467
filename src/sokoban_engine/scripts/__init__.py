"""Command-line scripts for the Sokoban engine."""

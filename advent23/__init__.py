"""Solvers for a season of daily programming puzzles, one module per puzzle."""

__version__ = "1.0.0"
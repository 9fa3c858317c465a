"""Parsers and solvers for daily programming puzzles, with a timing helper."""

__version__ = "0.1.0"
"""Maze Walker - wall-following maze solver."""

__version__ = "1.0.0"

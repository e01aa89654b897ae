"""Core Game of Life logic."""

from .errors import GameOfLifeError, InvalidDimensionError, OutOfBoundsError, UnknownPatternError
from .grid import Grid, next_state
from .game import GameOfLife
from .patterns import BUILTIN_PATTERNS, Pattern, PatternLibrary

__all__ = [
    "Grid",
    "next_state",
    "GameOfLife",
    "Pattern",
    "PatternLibrary",
    "BUILTIN_PATTERNS",
    "GameOfLifeError",
    "InvalidDimensionError",
    "OutOfBoundsError",
    "UnknownPatternError",
]

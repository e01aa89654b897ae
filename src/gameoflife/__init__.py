"""Conway's Game of Life on a bounded grid."""

__version__ = "0.1.0"

from .core.errors import GameOfLifeError, InvalidDimensionError, OutOfBoundsError, UnknownPatternError
from .core.grid import Grid
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary

__all__ = [
    "Grid",
    "GameOfLife",
    "Pattern",
    "PatternLibrary",
    "GameOfLifeError",
    "InvalidDimensionError",
    "OutOfBoundsError",
    "UnknownPatternError",
]

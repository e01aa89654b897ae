"""Exceptions raised by the Game of Life core."""

from typing import Iterable, Optional


class GameOfLifeError(Exception):
    """Base class for all Game of Life errors."""


class InvalidDimensionError(GameOfLifeError, ValueError):
    """Raised when a grid is created with a non-positive size."""

    def __init__(self, width: object, height: object) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Grid dimensions must be positive integers, got {width}x{height}")


class OutOfBoundsError(GameOfLifeError, IndexError):
    """Raised when a coordinate lies outside the grid extents."""

    def __init__(self, row: int, col: int, width: int, height: int) -> None:
        self.row = row
        self.col = col
        self.width = width
        self.height = height
        super().__init__(
            f"Coordinates (row={row}, col={col}) out of bounds for {width}x{height} grid"
        )


class UnknownPatternError(GameOfLifeError, LookupError):
    """Raised when a pattern name is not in the catalog."""

    def __init__(self, name: str, available: Optional[Iterable[str]] = None) -> None:
        self.name = name
        self.available = sorted(available or [])
        message = f"Unknown pattern '{name}'"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)

"""Grid data structure and Conway's rule for the Game of Life."""

import logging
from typing import Optional, Set, Tuple

import numpy as np
import torch
import torch.nn.functional as F

from .errors import InvalidDimensionError, OutOfBoundsError

logger = logging.getLogger(__name__)

ALIVE_CHARS = "O*1█"
DEAD_CHARS = ".0░ "


def next_state(alive: bool, neighbors: int) -> bool:
    """Apply Conway's rule to a single cell.

    Args:
        alive: Current state of the cell
        neighbors: Number of live cells in its Moore neighborhood

    Returns:
        True if the cell is alive in the next generation
    """
    if alive:
        return neighbors in (2, 3)
    return neighbors == 3


def _is_dimension(value: object) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, np.integer)) and value > 0


class Grid:
    """Bounded 2D grid of live/dead cells.

    Cells are addressed as (row, col) with rows in [0, height) and
    columns in [0, width). Neighbors beyond the edges count as dead unless
    the grid is created with ``wrap_edges=True``.
    """

    def __init__(self, width: int, height: int, wrap_edges: bool = False) -> None:
        """Initialize an all-dead grid.

        Args:
            width: Number of columns
            height: Number of rows
            wrap_edges: Whether neighbor counting wraps around (toroidal topology)

        Raises:
            InvalidDimensionError: If width or height is not a positive integer
        """
        if not (_is_dimension(width) and _is_dimension(height)):
            raise InvalidDimensionError(width, height)

        self.width = int(width)
        self.height = int(height)
        self.wrap_edges = wrap_edges
        self._cells = np.zeros((self.height, self.width), dtype=np.int8)

        # Reused for every neighbor count
        self._torch_input = torch.zeros(1, 1, self.height, self.width, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

        logger.debug("Created %dx%d grid (wrap_edges=%s)", self.width, self.height, wrap_edges)

    @classmethod
    def from_string(cls, text: str, wrap_edges: bool = False) -> "Grid":
        """Build a grid from a line-based text picture.

        Each line is a row. ``O``, ``*``, ``1`` and ``█`` are alive;
        ``.``, ``0``, ``░`` and space are dead. Short lines are padded
        with dead cells up to the longest line.

        Args:
            text: Grid description
            wrap_edges: Whether the new grid is toroidal

        Returns:
            New Grid holding the described cells

        Raises:
            InvalidDimensionError: If the text holds no rows
            ValueError: If a character is not a known cell symbol
        """
        lines = [line.rstrip("\r\n") for line in text.splitlines()]
        while lines and not lines[0].strip():
            lines.pop(0)
        while lines and not lines[-1].strip():
            lines.pop()

        height = len(lines)
        width = max((len(line) for line in lines), default=0)
        grid = cls(width, height, wrap_edges=wrap_edges)

        for row, line in enumerate(lines):
            for col, char in enumerate(line):
                if char in ALIVE_CHARS:
                    grid._cells[row, col] = 1
                elif char not in DEAD_CHARS:
                    raise ValueError(f"Unknown cell character {char!r} at row {row}, col {col}")

        return grid

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the current cell array, shape (height, width)."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (width, height)."""
        return (self.width, self.height)

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise OutOfBoundsError(row, col, self.width, self.height)

    def in_bounds(self, row: int, col: int) -> bool:
        """Whether (row, col) lies inside the grid."""
        return 0 <= row < self.height and 0 <= col < self.width

    def is_alive(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Raises:
            OutOfBoundsError: If the coordinates are outside the grid
        """
        self._check_bounds(row, col)
        return bool(self._cells[row, col])

    def set_alive(self, row: int, col: int, alive: bool = True) -> None:
        """Set the state of a cell.

        Raises:
            OutOfBoundsError: If the coordinates are outside the grid
        """
        self._check_bounds(row, col)
        self._cells[row, col] = 1 if alive else 0

    def toggle(self, row: int, col: int) -> bool:
        """Flip a cell and return its new state."""
        new_state = not self.is_alive(row, col)
        self.set_alive(row, col, new_state)
        return new_state

    def clear(self) -> None:
        """Set every cell dead."""
        self._cells.fill(0)

    def live_neighbor_count(self, row: int, col: int) -> int:
        """Count living cells in the Moore neighborhood of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)

        Raises:
            OutOfBoundsError: If (row, col) itself is outside the grid
        """
        self._check_bounds(row, col)

        count = 0
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue

                nr, nc = row + dr, col + dc

                if self.wrap_edges:
                    count += self._cells[nr % self.height, nc % self.width]
                elif 0 <= nr < self.height and 0 <= nc < self.width:
                    count += self._cells[nr, nc]

        return int(count)

    def neighbor_counts(self) -> np.ndarray:
        """Count neighbors for all cells with a 3x3 convolution.

        Returns:
            int8 array of shape (height, width) with each cell's neighbor count
        """
        self._torch_input[0, 0] = torch.from_numpy(self._cells.astype(np.float32))

        if self.wrap_edges:
            padded = F.pad(self._torch_input, (1, 1, 1, 1), mode="circular")
            neighbors = F.conv2d(padded, self._torch_kernel)
        else:
            # Zero padding: everything beyond the edge is dead
            neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8)

    def step(self) -> None:
        """Advance the grid by exactly one generation.

        The next generation is derived entirely from the current one and
        swapped in as a whole; no cell sees another cell's new state.
        """
        counts = self.neighbor_counts()
        alive = self._cells > 0

        survive = alive & ((counts == 2) | (counts == 3))
        birth = ~alive & (counts == 3)

        self._cells = (survive | birth).astype(np.int8)

    def count_live_cells(self) -> int:
        """Total number of living cells."""
        return int(np.count_nonzero(self._cells))

    @property
    def population(self) -> int:
        """Number of living cells."""
        return self.count_live_cells()

    def live_cells(self) -> Set[Tuple[int, int]]:
        """Coordinates (row, col) of every living cell."""
        rows, cols = np.nonzero(self._cells)
        return {(int(r), int(c)) for r, c in zip(rows, cols)}

    def copy(self) -> "Grid":
        """Return an independent grid with the same size, topology and cells."""
        other = Grid(self.width, self.height, wrap_edges=self.wrap_edges)
        other._cells[:] = self._cells
        return other

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col) or None if no living cells
        """
        rows, cols = np.nonzero(self._cells)
        if len(rows) == 0:
            return None

        return (int(rows.min()), int(cols.min()), int(rows.max()), int(cols.max()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.shape == other.shape
            and self.wrap_edges == other.wrap_edges
            and np.array_equal(self._cells, other._cells)
        )

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, wrap_edges={self.wrap_edges})"

    def __str__(self) -> str:
        """Rows of '*' (alive) and '.' (dead)."""
        return "\n".join("".join("*" if cell else "." for cell in row) for row in self._cells)

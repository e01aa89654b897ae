"""Named Game of Life patterns and the library that seeds them onto grids."""

import logging
import textwrap
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, Union

from .errors import OutOfBoundsError, UnknownPatternError
from .grid import ALIVE_CHARS, DEAD_CHARS, Grid

logger = logging.getLogger(__name__)

Offset = Tuple[int, int]


def _normalize(cells: Iterable[Offset]) -> FrozenSet[Offset]:
    cells = [(int(r), int(c)) for r, c in cells]
    if not cells:
        return frozenset()
    min_row = min(r for r, _ in cells)
    min_col = min(c for _, c in cells)
    return frozenset((r - min_row, c - min_col) for r, c in cells)


@dataclass(frozen=True)
class Pattern:
    """An immutable arrangement of live cells.

    Offsets are (row, col) pairs shifted so that the smallest row and the
    smallest column are both 0.
    """

    name: str
    cells: FrozenSet[Offset]
    description: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", _normalize(self.cells))

    @classmethod
    def from_string(cls, name: str, text: str, description: str = "") -> "Pattern":
        """Create a pattern from a text picture.

        Args:
            name: Pattern name
            text: Rows of cell symbols, common indentation removed (see Grid.from_string)
            description: Optional description

        Returns:
            New Pattern instance

        Raises:
            ValueError: If a character is not a known cell symbol
        """
        lines = [line.rstrip("\r") for line in textwrap.dedent(text).splitlines()]
        while lines and not lines[0].strip():
            lines.pop(0)
        while lines and not lines[-1].strip():
            lines.pop()

        cells = []
        for row, line in enumerate(lines):
            for col, char in enumerate(line):
                if char in ALIVE_CHARS:
                    cells.append((row, col))
                elif char not in DEAD_CHARS:
                    raise ValueError(f"Unknown cell character {char!r} in pattern {name}")
        return cls(name, frozenset(cells), description)

    @property
    def population(self) -> int:
        """Number of live cells in the pattern."""
        return len(self.cells)

    @property
    def size(self) -> Tuple[int, int]:
        """Bounding box size as (rows, cols)."""
        if not self.cells:
            return (0, 0)
        return (
            max(r for r, _ in self.cells) + 1,
            max(c for _, c in self.cells) + 1,
        )

    def placed_at(self, anchor_row: int, anchor_col: int) -> List[Offset]:
        """Absolute coordinates of the pattern anchored at (anchor_row, anchor_col)."""
        return sorted((anchor_row + dr, anchor_col + dc) for dr, dc in self.cells)

    def to_grid(self, padding: int = 0, wrap_edges: bool = False) -> Grid:
        """Create a grid just large enough for the pattern plus padding on every side."""
        rows, cols = self.size
        grid = Grid(cols + 2 * padding, rows + 2 * padding, wrap_edges=wrap_edges)
        for row, col in self.placed_at(padding, padding):
            grid.set_alive(row, col, True)
        return grid


def _canonical_name(name: str) -> str:
    return name.strip().upper().replace("-", "_").replace(" ", "_")


_BUILTIN = [
    # Still life
    Pattern.from_string(
        "BLOCK",
        """
        OO
        OO
        """,
        "2x2 still life",
    ),
    # Oscillators
    Pattern("BLINKER", frozenset({(0, 0), (0, 1), (0, 2)}), "Period-2 oscillator"),
    Pattern.from_string(
        "TOAD",
        """
        .OOO
        OOO.
        """,
        "Period-2 oscillator",
    ),
    Pattern.from_string(
        "BEACON",
        """
        OO..
        OO..
        ..OO
        ..OO
        """,
        "Period-2 oscillator",
    ),
    Pattern.from_string(
        "PULSAR",
        """
        ..OOO...OOO..
        .............
        O....O.O....O
        O....O.O....O
        O....O.O....O
        ..OOO...OOO..
        .............
        ..OOO...OOO..
        O....O.O....O
        O....O.O....O
        O....O.O....O
        .............
        ..OOO...OOO..
        """,
        "Period-3 oscillator",
    ),
    # Spaceships
    Pattern(
        "GLIDER",
        frozenset({(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)}),
        "Smallest spaceship, moves one cell diagonally every 4 generations",
    ),
    # Guns
    Pattern.from_string(
        "GOSPER_GLIDER_GUN",
        """
        ........................O...........
        ......................O.O...........
        ............OO......OO............OO
        ...........O...O....OO............OO
        OO........O.....O...OO..............
        OO........O...O.OO....O.O...........
        ..........O.....O.......O...........
        ...........O...O....................
        ............OO......................
        """,
        "Emits a glider every 30 generations",
    ),
]

BUILTIN_PATTERNS: Mapping[str, Pattern] = MappingProxyType({p.name: p for p in _BUILTIN})

_CATEGORIES = {
    "Still Life": ["BLOCK"],
    "Oscillators": ["BLINKER", "TOAD", "BEACON", "PULSAR"],
    "Spaceships": ["GLIDER"],
    "Guns": ["GOSPER_GLIDER_GUN"],
}


class PatternLibrary:
    """Read-only catalog of named patterns."""

    def __init__(self, patterns: Optional[Mapping[str, Pattern]] = None) -> None:
        """Initialize pattern library.

        Args:
            patterns: Patterns keyed by name (defaults to the built-in catalog)
        """
        if patterns is None:
            self._patterns = BUILTIN_PATTERNS
        else:
            self._patterns = MappingProxyType(
                {_canonical_name(name): pattern for name, pattern in patterns.items()}
            )

    def lookup(self, name: str) -> Pattern:
        """Resolve a pattern by name.

        Matching ignores case and treats '-' and ' ' like '_', so "glider"
        and "Gosper glider gun" both resolve.

        Raises:
            UnknownPatternError: If no pattern has that name
        """
        try:
            return self._patterns[_canonical_name(name)]
        except KeyError:
            raise UnknownPatternError(name, self._patterns.keys()) from None

    def list_patterns(self) -> List[str]:
        """Names of all patterns in the library."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories: Dict[str, List[str]] = {
            category: [name for name in names if name in self._patterns]
            for category, names in _CATEGORIES.items()
        }

        known = {name for names in _CATEGORIES.values() for name in names}
        categories["Other"] = [name for name in self._patterns if name not in known]

        return {category: names for category, names in categories.items() if names}

    def seed(
        self,
        grid: Grid,
        pattern: Union[Pattern, str],
        anchor_row: int = 0,
        anchor_col: int = 0,
    ) -> None:
        """Stamp a pattern onto a grid as live cells.

        Every target coordinate is checked before any cell is set, so a
        failed seed leaves the grid untouched. Cells already alive stay alive.

        Args:
            grid: Target grid
            pattern: Pattern instance or catalog name
            anchor_row: Row of the pattern's (0, 0) offset
            anchor_col: Column of the pattern's (0, 0) offset

        Raises:
            UnknownPatternError: If pattern is a name that is not in the catalog
            OutOfBoundsError: If any cell would land outside the grid
        """
        if isinstance(pattern, str):
            pattern = self.lookup(pattern)

        targets = pattern.placed_at(anchor_row, anchor_col)
        for row, col in targets:
            if not grid.in_bounds(row, col):
                raise OutOfBoundsError(row, col, grid.width, grid.height)

        for row, col in targets:
            grid.set_alive(row, col, True)

        logger.debug(
            "Seeded %s (%d cells) at (%d, %d)", pattern.name, len(targets), anchor_row, anchor_col
        )

    @staticmethod
    def centered_anchor(grid: Grid, pattern: Pattern) -> Tuple[int, int]:
        """Anchor that places the pattern in the middle of the grid (never negative)."""
        rows, cols = pattern.size
        return (max(0, (grid.height - rows) // 2), max(0, (grid.width - cols) // 2))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _canonical_name(name) in self._patterns

    def __len__(self) -> int:
        return len(self._patterns)

"""Run-loop driver for Conway's Game of Life."""

import logging
from collections import deque
from typing import Callable, Deque, List

from .grid import Grid

logger = logging.getLogger(__name__)


class GameOfLife:
    """Conway's Game of Life simulation engine.

    Wraps a Grid and counts generations. The rules themselves live in
    Grid.step():
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The cellular grid to simulate
        """
        self.grid = grid
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)

        self._update_population_history()

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.count_live_cells()

    @property
    def population_history(self) -> List[int]:
        """Population counts of the most recent generations."""
        return list(self._population_history)

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self.grid.step()
        self._generation += 1
        self._update_population_history()
        logger.debug("Generation %d: population %d", self._generation, self._population_history[-1])

    def evolve(self, steps: int) -> None:
        """Advance the simulation by several generations.

        Raises:
            ValueError: If steps is negative
        """
        if steps < 0:
            raise ValueError(f"Number of steps must be non-negative, got {steps}")

        for _ in range(steps):
            self.step()

    def simulate(self, generations: int, observer: Callable[["GameOfLife"], None]) -> None:
        """Run for a number of generations, reporting each state.

        The observer is called with the initial state and again after every
        step, so it sees generations + 1 states in total.

        Args:
            generations: Number of steps to take
            observer: Callback invoked with this game

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Number of generations must be non-negative, got {generations}")

        for i in range(generations + 1):
            observer(self)
            if i < generations:
                self.step()

    def reset(self, clear_grid: bool = True) -> None:
        """Reset the simulation.

        Args:
            clear_grid: Whether to clear the grid as well
        """
        if clear_grid:
            self.grid.clear()

        self._generation = 0
        self._population_history.clear()
        self._update_population_history()

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

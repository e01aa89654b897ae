#!/usr/bin/env python3
"""
Example usage of the gameoflife package.
"""

from gameoflife import Grid, GameOfLife, PatternLibrary


def main():
    """Demonstrate programmatic usage of the gameoflife package."""
    grid = Grid(12, 12)
    game = GameOfLife(grid)

    library = PatternLibrary()
    glider = library.lookup("GLIDER")
    library.seed(grid, glider, 1, 1)

    def show(current):
        print(f"Generation {current.generation} (population {current.population}):")
        print(current.grid)
        print()

    game.simulate(8, show)

    print(f"Population history: {game.population_history}")


if __name__ == "__main__":
    main()

"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, TextIO

import torch

from ..core.errors import GameOfLifeError, UnknownPatternError
from ..core.game import GameOfLife
from ..core.grid import Grid
from ..core.patterns import PatternLibrary

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""
    width: int = 20
    height: int = 20
    pattern: str = "BLINKER"
    anchor_row: Optional[int] = None
    anchor_col: Optional[int] = None
    generations: int = 10
    delay: float = 0.0
    toroidal: bool = False
    initial_grid: Optional[str] = None
    echo: bool = False


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self, pattern_library: Optional[PatternLibrary] = None) -> None:
        """Initialize CLI interface.

        Args:
            pattern_library: Pattern catalog (defaults to the built-in one)
        """
        self.pattern_library = pattern_library if pattern_library is not None else PatternLibrary()

    def build_grid(self, config: SimulationConfig) -> Grid:
        """Create the initial grid described by a configuration.

        A text grid in ``config.initial_grid`` takes precedence over the
        named pattern. Without an explicit anchor the pattern is centered.

        Raises:
            UnknownPatternError: If the pattern name is not in the library
            OutOfBoundsError: If the pattern does not fit at the anchor
            InvalidDimensionError: If the grid size is not positive
            ValueError: If the text grid contains unknown characters
        """
        if config.initial_grid is not None:
            return Grid.from_string(config.initial_grid, wrap_edges=config.toroidal)

        grid = Grid(config.width, config.height, wrap_edges=config.toroidal)
        pattern = self.pattern_library.lookup(config.pattern)

        anchor_row, anchor_col = self.pattern_library.centered_anchor(grid, pattern)
        if config.anchor_row is not None:
            anchor_row = config.anchor_row
        if config.anchor_col is not None:
            anchor_col = config.anchor_col

        logger.debug("Placing %s at (%d, %d)", pattern.name, anchor_row, anchor_col)
        self.pattern_library.seed(grid, pattern, anchor_row, anchor_col)
        return grid

    def run(self, config: SimulationConfig, out: Optional[TextIO] = None) -> GameOfLife:
        """Run a simulation, printing every generation.

        Args:
            config: Simulation configuration
            out: Output stream (defaults to sys.stdout)

        Returns:
            The game after the last generation
        """
        if out is None:
            out = sys.stdout

        if config.echo and config.initial_grid is not None:
            print("Input:", file=out)
            print(config.initial_grid.strip("\n"), file=out)
            print(file=out)

        game = GameOfLife(self.build_grid(config))

        def render(current: GameOfLife) -> None:
            print(f"Generation {current.generation} (population {current.population}):", file=out)
            print(self._format_grid(current.grid), file=out)
            print(file=out)

            if config.delay > 0 and current.generation < config.generations:
                time.sleep(config.delay)

        game.simulate(config.generations, render)
        return game

    def _format_grid(self, grid: Grid, max_size: int = 200) -> str:
        """Format grid for display, truncating if too large.

        Args:
            grid: Grid to format
            max_size: Maximum dimension to display

        Returns:
            Formatted grid string
        """
        if grid.width > max_size or grid.height > max_size:
            return f"Grid too large to display ({grid.width}x{grid.height})"

        return str(grid)

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.lookup(pattern_name)
                rows, cols = pattern.size
                print(f"  {pattern_name}: {cols}x{rows}, {pattern.population} cells")
                if pattern.description:
                    print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a bounded grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Blinker in the middle of a 20x20 grid for 10 generations
  gameoflife

  # Glider in the top-left corner, half a second per generation
  gameoflife --pattern GLIDER --row 1 --col 1 -n 40 --delay 0.5

  # Read the initial grid from standard input
  printf '.....\\n..O..\\n..O..\\n..O..\\n.....\\n' | gameoflife --stdin --echo -n 2

  # List available patterns
  gameoflife --list-patterns
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=20, help="Grid width (default: 20)")

    parser.add_argument("-H", "--height", type=int, default=20, help="Grid height (default: 20)")

    parser.add_argument(
        "-t",
        "--toroidal",
        action="store_true",
        help="Wrap neighbor counting around the edges",
    )

    # Pattern configuration
    parser.add_argument(
        "-p",
        "--pattern",
        type=str,
        default="BLINKER",
        help="Initial pattern name (default: BLINKER)",
    )

    parser.add_argument(
        "--row",
        type=int,
        help="Row of the pattern's top-left corner (default: centered)",
    )

    parser.add_argument(
        "--col",
        type=int,
        help="Column of the pattern's top-left corner (default: centered)",
    )

    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read the initial grid from standard input instead of using a pattern",
    )

    parser.add_argument(
        "--echo",
        action="store_true",
        help="Echo the grid read from standard input before simulating",
    )

    # Simulation configuration
    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=10,
        help="Number of generations to simulate (default: 10)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=0.0,
        help="Seconds to pause between generations (default: 0)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if not args.stdin:
        if args.width <= 0:
            errors.append("Width must be positive")

        if args.height <= 0:
            errors.append("Height must be positive")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.row is not None and args.row < 0:
        errors.append("Row must be non-negative")

    if args.col is not None and args.col < 0:
        errors.append("Column must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def config_from_args(args: argparse.Namespace, initial_grid: Optional[str] = None) -> SimulationConfig:
    """Collect parsed arguments into a SimulationConfig."""
    return SimulationConfig(
        width=args.width,
        height=args.height,
        pattern=args.pattern,
        anchor_row=args.row,
        anchor_col=args.col,
        generations=args.generations,
        delay=args.delay,
        toroidal=args.toroidal,
        initial_grid=initial_grid,
        echo=args.echo,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    # One simulation per process: keep torch on a single thread
    torch.set_num_threads(1)

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    initial_grid = sys.stdin.read() if args.stdin else None
    config = config_from_args(args, initial_grid)

    try:
        cli.run(config)
        return 0

    except UnknownPatternError as e:
        print(f"Error: Pattern '{e.name}' not found")
        print(f"Available patterns: {', '.join(e.available)}")
        print("Use --list-patterns to see detailed information")
        return 1
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except (GameOfLifeError, ValueError) as e:
        print(f"Error: {e}")
        if args.verbose:
            logger.exception("Simulation failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())

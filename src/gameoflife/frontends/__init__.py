"""Frontend interfaces for the Game of Life."""

from .cli import CLIGameOfLife, SimulationConfig

__all__ = ["CLIGameOfLife", "SimulationConfig"]

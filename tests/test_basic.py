"""Basic tests for the gameoflife package."""

from gameoflife import GameOfLife, Grid, PatternLibrary, UnknownPatternError


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = Grid(10, 10)
    assert grid.width == 10
    assert grid.height == 10
    assert grid.is_alive(0, 0) is False

    grid.set_alive(5, 5, True)
    assert grid.is_alive(5, 5) is True


def test_game_creation():
    """Test basic game creation."""
    grid = Grid(5, 5)
    game = GameOfLife(grid)
    assert game.population == 0

    grid.set_alive(2, 2, True)
    assert game.population == 1


def test_pattern_library():
    """Test pattern library has the required patterns."""
    library = PatternLibrary()
    patterns = library.list_patterns()
    assert "BLINKER" in patterns
    assert "GLIDER" in patterns


def test_unknown_pattern_is_exported():
    """The error types are available from the package root."""
    try:
        PatternLibrary().lookup("NONEXISTENT")
    except UnknownPatternError as e:
        assert e.name == "NONEXISTENT"
    else:
        raise AssertionError("lookup should have failed")


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    grid = Grid(5, 5)
    game = GameOfLife(grid)
    PatternLibrary().seed(grid, "BLINKER", 2, 1)

    assert game.population == 3

    game.step()
    assert game.population == 3
    assert grid.is_alive(1, 2) is True
    assert grid.is_alive(2, 2) is True
    assert grid.is_alive(3, 2) is True

    game.step()
    assert game.population == 3
    assert grid.is_alive(2, 1) is True
    assert grid.is_alive(2, 2) is True
    assert grid.is_alive(2, 3) is True

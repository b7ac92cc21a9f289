"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src and the entry scripts to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, GameSession


# Mines down column 3 plus two in the right-hand corners
WALL_MINES = [(row, 3) for row in range(8)] + [(0, 7), (7, 7)]

# Bottom row filled plus both ends of the row above
FLOOR_MINES = [(7, col) for col in range(8)] + [(6, 0), (6, 7)]


# ============================================================================
# Layout Fixtures
# ============================================================================

@pytest.fixture
def wall_mines() -> list:
    return list(WALL_MINES)


@pytest.fixture
def floor_mines() -> list:
    return list(FLOOR_MINES)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 8x8 board with 10 seeded mines."""
    board = Board()
    board.place_mines(seed=1234)
    return board


@pytest.fixture
def unarmed_board() -> Board:
    """Create an 8x8 board before mine placement."""
    return Board()


@pytest.fixture
def wall_board() -> Board:
    """8x8 board whose mines wall off the three left-hand columns."""
    return Board.with_mines(BoardConfig(8, 8, 10), WALL_MINES)


@pytest.fixture
def floor_board() -> Board:
    """8x8 board where a corner reveal clears every safe cell."""
    return Board.with_mines(BoardConfig(8, 8, 10), FLOOR_MINES)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.with_mines(BoardConfig(5, 5, 0), [])


@pytest.fixture
def small_board() -> Board:
    """3x3 board with a single mine in the centre."""
    return Board.with_mines(BoardConfig(3, 3, 1), [(1, 1)])


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def wall_session(wall_board: Board) -> GameSession:
    """Session playing the walled layout."""
    return GameSession(board=wall_board)


@pytest.fixture
def floor_session(floor_board: Board) -> GameSession:
    """Session playing the floor layout."""
    return GameSession(board=floor_board)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(8, 8, 10)

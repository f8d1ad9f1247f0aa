"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import List

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mines import Board, BoardConfig, Cell


# A 7x5 board with a vertical wall of mines in column 3:
#
#   . . 2 * 2 . .
#   . . 3 * 3 . .
#   . . 3 * 3 . .
#   . . 3 * 3 . .
#   . . 2 * 2 . .
WALL_WIDTH = 7
WALL_HEIGHT = 5
WALL_MINES = [3, 10, 17, 24, 31]


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 8x8 board with 10 mines."""
    return Board()


@pytest.fixture
def seeded_board() -> Board:
    """Create a reproducible 9x9 board with 20 mines."""
    return Board.new(9, 9, 20, rng=random.Random(1234))


@pytest.fixture
def grid_5x4() -> Board:
    """Create a mine-free 5x4 board for adjacency checks."""
    return Board.new(5, 4, 0)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def wall_mines() -> List[int]:
    """Mine indices of the column-3 wall, in ascending order."""
    return list(WALL_MINES)


@pytest.fixture
def wall_board(monkeypatch: pytest.MonkeyPatch) -> Board:
    """Create a 7x5 board whose mines always form the column-3 wall."""
    board = Board.new(WALL_WIDTH, WALL_HEIGHT, len(WALL_MINES))

    def rigged_mines(exclude: set) -> List[int]:
        assert not exclude.intersection(WALL_MINES)
        return list(WALL_MINES)

    monkeypatch.setattr(board, "_choose_mine_indices", rigged_mines)
    return board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def bomb_cell() -> Cell:
    """Create a cell containing a bomb."""
    return Cell(is_bomb=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent bombs."""
    cell = Cell(adjacent_bombs=3)
    cell.reveal()
    return cell

"""
Pytest configuration and shared fixtures.
"""
import io

import pytest
import sys
from pathlib import Path

# Add src to path for imports, and the repo root for main.py
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.append(str(Path(__file__).parent.parent))

from minesweeper import Board, BoardConfig, Cell, MinesweeperEnv


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 4x4 board with 4 mines."""
    return Board()


@pytest.fixture
def diagonal_board() -> Board:
    """Create a 4x4 board with mines along the main diagonal."""
    return Board(
        BoardConfig(4, 4),
        mine_positions=[(0, 0), (1, 1), (2, 2), (3, 3)],
    )


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 3x3 board with a single mine in the bottom-right corner."""
    return Board(BoardConfig(3, 1), mine_positions=[(2, 2)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def unknown_cell() -> Cell:
    """Create an unknown safe cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def hint_cell() -> Cell:
    """Create a revealed cell with three adjacent mines."""
    cell = Cell()
    cell.reveal(3)
    return cell


# ============================================================================
# Console Fixtures
# ============================================================================

@pytest.fixture
def output() -> io.StringIO:
    """Capture console output."""
    return io.StringIO()


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture
def env() -> MinesweeperEnv:
    """Create an environment on the default 4x4 board."""
    return MinesweeperEnv(render_mode="ansi")

"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell revealing,
flagging and win/lose detection.
"""
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, Mark


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class CoordinateError(ValueError):
    """Raised when a coordinate outside the board reaches the engine."""


@dataclass
class BoardConfig:
    """
    Configuration for a square Minesweeper board.

    Attributes:
        size: Number of rows and columns.
        num_mines: Total mines to place.
    """

    size: int = 4
    num_mines: int = 4

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError("Board size must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.size * self.size - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


# Preset configuration
DEFAULT = BoardConfig(4, 4)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the mine layout and the grid of cell marks. Mines are placed
    when the board is created and never move afterwards.

    Attributes:
        config: Board size and mine count.
        seed: Optional seed for a reproducible mine layout.
        mine_positions: Optional explicit (row, col) mine coordinates,
            used instead of random placement.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    seed: Optional[int] = None
    mine_positions: Optional[Iterable[Tuple[int, int]]] = None
    _mines: np.ndarray = field(init=False, repr=False, compare=False)
    _grid: List[List[Cell]] = field(init=False, repr=False)
    _remaining_safe: int = field(init=False)
    _detonated: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        """Lay out mines and build the grid after dataclass creation."""
        if self.mine_positions is None:
            self._mines = self._random_layout()
        else:
            self._mines = self._explicit_layout(self.mine_positions)
        self._mines.setflags(write=False)
        self._init_grid()
        self._remaining_safe = self.config.safe_cells

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _random_layout(self) -> np.ndarray:
        """Choose distinct mine cells uniformly at random."""
        size = self.config.size
        rng = random.Random(self.seed)
        layout = np.zeros((size, size), dtype=bool)
        for index in rng.sample(range(self.config.total_cells), self.config.num_mines):
            layout[index // size, index % size] = True
        return layout

    def _explicit_layout(
        self, positions: Iterable[Tuple[int, int]]
    ) -> np.ndarray:
        """Build a layout from caller-chosen mine positions."""
        size = self.config.size
        layout = np.zeros((size, size), dtype=bool)
        placed = 0
        for row, col in positions:
            if not self.is_valid_coordinate(row, col):
                raise ValueError(f"Mine position ({row}, {col}) is off the board")
            if layout[row, col]:
                raise ValueError(f"Duplicate mine position ({row}, {col})")
            layout[row, col] = True
            placed += 1
        if placed != self.config.num_mines:
            raise ValueError(
                f"Expected {self.config.num_mines} mine positions, got {placed}"
            )
        return layout

    def _init_grid(self) -> None:
        """Create the grid of unknown cells over the mine layout."""
        self._grid = [
            [Cell(is_mine=bool(self._mines[row, col])) for col in range(self.config.size)]
            for row in range(self.config.size)
        ]

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions, diagonals included.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_coordinate(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for neighbor_row, neighbor_col in self._get_neighbors(row, col)
            if self._mines[neighbor_row, neighbor_col]
        )

    def is_valid_coordinate(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.size and 0 <= col < self.config.size

    def _require_valid(self, row: int, col: int) -> None:
        if not self.is_valid_coordinate(row, col):
            raise CoordinateError(
                f"Coordinate ({row}, {col}) is outside the "
                f"{self.config.size}x{self.config.size} board"
            )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal ("guess") the cell at the given position.

        A mine is always shown and ends the game, even when the cell was
        flagged. A safe cell is only revealed while unknown; a blank cell
        (no adjacent mines) opens up all of its neighbors in turn.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if a mine was hit, False otherwise.

        Raises:
            CoordinateError: If the position is off the board.
        """
        self._require_valid(row, col)

        cell = self._grid[row][col]
        if cell.is_mine:
            cell.detonate()
            self._detonated = True
            return True

        self._reveal_area(row, col)
        return False

    def _reveal_area(self, row: int, col: int) -> None:
        """Reveal a safe cell and cascade through blank neighbors."""
        pending = [(row, col)]
        while pending:
            current_row, current_col = pending.pop()
            cell = self._grid[current_row][current_col]
            if not cell.is_unknown:
                continue

            hint = self._count_adjacent_mines(current_row, current_col)
            cell.reveal(hint)

            self._remaining_safe -= 1
            if hint == 0:
                pending.extend(self._get_neighbors(current_row, current_col))

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False if the cell is revealed.

        Raises:
            CoordinateError: If the position is off the board.
        """
        self._require_valid(row, col)
        return self._grid[row][col].toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def is_complete(self) -> bool:
        """Check if every safe cell has been revealed."""
        return self._remaining_safe == 0

    @property
    def remaining_safe_cells(self) -> int:
        """Number of safe cells still to reveal."""
        return self._remaining_safe

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self._detonated:
            return GameState.LOST
        if self.is_complete():
            return GameState.WON
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.game_state == GameState.LOST

    @property
    def mine_layout(self) -> np.ndarray:
        """Read-only copy of the mine layout."""
        layout = self._mines.copy()
        layout.setflags(write=False)
        return layout

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_coordinate(row, col):
            return None
        return self._grid[row][col]

    def get_mark(self, row: int, col: int) -> Mark:
        """Get the visible mark at a position."""
        self._require_valid(row, col)
        return self._grid[row][col].mark

    def render(self) -> np.ndarray:
        """
        Get a snapshot of every cell's visible mark.

        Returns:
            2D numpy array where:
                -1 = unknown
                -2 = flagged
                0 = blank
                1-8 = hint
                9 = revealed mine
        """
        size = self.config.size
        snapshot = np.zeros((size, size), dtype=np.int8)
        for row in range(size):
            for col in range(size):
                snapshot[row, col] = self._grid[row][col].to_value()
        return snapshot

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that are still unknown.

        Returns:
            List of (row, col) positions that can be revealed.
        """
        actions = []
        for row in range(self.config.size):
            for col in range(self.config.size):
                if self._grid[row][col].is_unknown:
                    actions.append((row, col))
        return actions

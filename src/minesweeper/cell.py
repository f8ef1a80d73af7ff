"""
Cell module for Minesweeper game.

Represents individual cells on the game board: whether they hold a mine
and which mark the player currently sees.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class Mark(Enum):
    """Possible visible marks of a cell."""

    UNKNOWN = auto()
    FLAGGED = auto()
    HINT = auto()
    BLANK = auto()
    MINE = auto()


REVEALED_MARKS = frozenset({Mark.HINT, Mark.BLANK, Mark.MINE})

# Snapshot values used by Board.render()
UNKNOWN_VALUE = -1
FLAGGED_VALUE = -2
MINE_VALUE = 9

SYMBOLS = {
    Mark.UNKNOWN: "?",
    Mark.FLAGGED: "!",
    Mark.MINE: "*",
    Mark.BLANK: " ",
}


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine. Fixed once the board
            is built.
        hint: Count of mines in neighboring cells (0-8), set on reveal.
        mark: What the player currently sees on this cell.
    """

    is_mine: bool = False
    hint: int = 0
    mark: Mark = Mark.UNKNOWN

    def reveal(self, hint: int) -> bool:
        """
        Reveal this safe cell with the given neighbor mine count.

        Args:
            hint: Number of adjacent mines.

        Returns:
            True if the cell went from unknown to revealed, False if it
            was already revealed or is flagged.
        """
        if self.mark != Mark.UNKNOWN:
            return False
        self.hint = hint
        self.mark = Mark.BLANK if hint == 0 else Mark.HINT
        return True

    def detonate(self) -> None:
        """Show the mine in this cell, whatever was marked before."""
        self.mark = Mark.MINE

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.is_revealed:
            return False
        if self.mark == Mark.UNKNOWN:
            self.mark = Mark.FLAGGED
        else:
            self.mark = Mark.UNKNOWN
        return True

    @property
    def is_unknown(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return self.mark == Mark.UNKNOWN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.mark in REVEALED_MARKS

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.mark == Mark.FLAGGED

    def to_value(self) -> int:
        """
        Convert cell to its snapshot value.

        Returns:
            -1: Unknown cell
            -2: Flagged cell
            0: Blank cell
            1-8: Hint cell with adjacent mine count
            9: Revealed mine
        """
        if self.mark == Mark.UNKNOWN:
            return UNKNOWN_VALUE
        if self.mark == Mark.FLAGGED:
            return FLAGGED_VALUE
        if self.mark == Mark.MINE:
            return MINE_VALUE
        return self.hint

    def to_symbol(self) -> str:
        """Text symbol shown for this cell on the console grid."""
        if self.mark == Mark.HINT:
            return str(self.hint)
        return SYMBOLS[self.mark]

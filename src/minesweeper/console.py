"""
Console front end for Minesweeper.

Renders the board as a coordinate-labeled text grid and runs the
line-oriented command loop ("guess x y" / "flag x y").
"""
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from .board import Board, GameState


# ============================================================================
# Constants
# ============================================================================

GUESS = "guess"
FLAG = "flag"
COMMANDS = (GUESS, FLAG)

BANNER = (
    "Minesweeper! Guess or flag an x, y coordinate.\n"
    '(eg. "guess 0 1" or "flag 2 2")\n'
)


class CommandError(ValueError):
    """Raised when an input line cannot be parsed into a command."""


class UnknownCommandError(CommandError):
    """Raised when the first word of a line is not a known command."""


# ============================================================================
# Rendering
# ============================================================================

class Renderer:
    """Formats a board as the text grid shown to the player."""

    def render(self, board: Board) -> str:
        """
        Build the coordinate-labeled grid for a board.

        Column indices run along the top, row indices down the left.

        Args:
            board: Board to draw.

        Returns:
            Multi-line string, each line ending in a newline.
        """
        size = board.config.size
        text = "  " + "".join(str(col) for col in range(size)) + "\n\n"
        for row in range(size):
            symbols = "".join(
                board.get_cell(row, col).to_symbol() for col in range(size)
            )
            text += f"{row} {symbols}\n"
        return text


# ============================================================================
# Command Parsing
# ============================================================================

@dataclass(frozen=True)
class Command:
    """A parsed player command."""

    action: str
    row: int
    col: int


def parse_command(line: str) -> Optional[Command]:
    """
    Parse one input line.

    Args:
        line: Raw input line.

    Returns:
        The parsed command, or None for a blank line.

    Raises:
        CommandError: If the command is unknown or its coordinates are
            missing or not integers.
    """
    tokens = line.split()
    if not tokens:
        return None

    action, args = tokens[0], tokens[1:]
    if action not in COMMANDS:
        raise UnknownCommandError(f"unknown command '{action}'")
    if len(args) != 2:
        raise CommandError(f"'{action}' takes exactly 2 coordinates")
    try:
        row, col = int(args[0]), int(args[1])
    except ValueError:
        raise CommandError(f"coordinates must be integers, got {args[0]!r} {args[1]!r}")
    return Command(action, row, col)


# ============================================================================
# Command Loop
# ============================================================================

class Console:
    """
    Interactive text game over a single board.

    Reads commands from an input stream and writes the grid and
    messages to an output stream until the game is won or lost.
    """

    def __init__(
        self,
        board: Board,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        """
        Initialize the console.

        Args:
            board: Board to play on.
            stdin: Command source (default: sys.stdin).
            stdout: Output sink (default: sys.stdout).
            renderer: Grid formatter.
        """
        self.board = board
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.renderer = renderer or Renderer()
        self.turn = 1

    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.stdout)

    def run(self) -> GameState:
        """
        Play until the board is won or lost, or input runs out.

        Returns:
            Final game state (PLAYING if input ended first).
        """
        while self.board.is_playing:
            self._print(BANNER)
            self._print(self.renderer.render(self.board))
            self._print(f"{self.turn}: ", end="")
            self.stdout.flush()

            line = self.stdin.readline()
            if not line:
                self._print()
                self._print("Game abandoned")
                return self.board.game_state

            self.handle_line(line)
            self.turn += 1

        self._report()
        return self.board.game_state

    def handle_line(self, line: str) -> None:
        """Parse and execute one input line, reporting bad input."""
        try:
            command = parse_command(line)
        except UnknownCommandError:
            self._print("Invalid command")
            return
        except CommandError as error:
            self._print(f"Invalid command: {error}")
            return

        if command is None:
            return
        if not self.board.is_valid_coordinate(command.row, command.col):
            self._print("Invalid coord")
            return

        if command.action == GUESS:
            self.board.reveal(command.row, command.col)
        else:
            self.board.flag(command.row, command.col)

    def _report(self) -> None:
        """Print the end-of-game message and the final grid."""
        self._print("Game over")
        if self.board.is_won:
            self._print("You win!")
        else:
            self._print("You lose...")
        self._print()
        self._print(self.renderer.render(self.board))

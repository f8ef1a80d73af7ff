"""
Minesweeper game module.

Provides the board engine, the text console front end and a
gymnasium environment for automated play.
"""
from .cell import Cell, Mark
from .board import (
    Board,
    BoardConfig,
    CoordinateError,
    GameState,
    DEFAULT,
)
from .console import Command, CommandError, Console, Renderer, parse_command
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "Mark",
    "Board",
    "BoardConfig",
    "CoordinateError",
    "GameState",
    "DEFAULT",
    "Command",
    "CommandError",
    "Console",
    "Renderer",
    "parse_command",
    "MinesweeperEnv",
]

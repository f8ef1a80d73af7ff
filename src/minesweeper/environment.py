"""
Gymnasium environment wrapper for Minesweeper.

Lets automated players drive the board through the standard
reset/step/render interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .cell import FLAGGED_VALUE, MINE_VALUE
from .console import Renderer


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        Board.render() snapshot, a 2D int8 array where:
        - -1 = unknown cell
        - -2 = flagged cell
        - 0 = blank cell
        - 1-8 = hint
        - 9 = revealed mine

    Actions:
        Discrete action space of size size * size.
        Action i reveals the cell at (i // size, i % size).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 4x4 with 4 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.renderer = Renderer()
        self.board = Board(self.config)

        self.observation_space = spaces.Box(
            low=FLAGGED_VALUE,
            high=MINE_VALUE,
            shape=(self.config.size, self.config.size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a freshly mined board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.board = Board(self.config, seed=board_seed)
        self._steps = 0

        return self.board.render(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal the cell selected by the action.

        Args:
            action: Cell index to reveal (row * size + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        observation = self.board.render()
        terminated = not self.board.is_playing

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.config.size)

    def _calculate_reward(self, row: int, col: int) -> float:
        """Reveal a cell and score the outcome."""
        cell = self.board.get_cell(row, col)
        if cell is None or not cell.is_unknown:
            return -0.1

        if self.board.reveal(row, col):
            return -10.0
        if self.board.is_won:
            return 10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "remaining_safe": self.board.remaining_safe_cells,
            "total_safe": self.config.safe_cells,
            "game_state": self.board.game_state.name,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = self.renderer.render(self.board)
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of cells that can still be revealed.

        Returns:
            int8 array where 1 = valid action, usable with
            action_space.sample(mask=...).
        """
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for row, col in self.board.get_valid_actions():
            mask[row * self.config.size + col] = 1
        return mask

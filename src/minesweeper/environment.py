"""
Gymnasium environment wrapper for Minesweeper.

Drives a GameSession through its click handlers so that scripted
players and the terminal front end exercise the same game flow.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, RevealOutcome
from .render import render_board
from .session import GameSession


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine (after a loss)

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < rows * cols reveals cell (i // cols, i % cols);
        the second half toggles a flag on the same cells.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for a flag toggle
        - -0.1 for a no-op (already revealed or flagged)
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
            config: Board configuration (default: 8x8 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.session: Optional[GameSession] = None
        self._num_cells = self.config.total_cells

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )

        # One reveal and one flag action per cell
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducibility.
            options: ``{"mines": [(row, col), ...]}`` fixes the layout.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        options = options or {}

        if "mines" in options:
            board = Board.with_mines(self.config, options["mines"])
            self.session = GameSession(board=board)
        else:
            board_seed = int(self.np_random.integers(0, 2**31 - 1))
            self.session = GameSession(self.config, seed=board_seed)
        self._steps = 0

        return self.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal, or cell index + rows * cols to flag.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if self.session is None:
            raise RuntimeError("Call reset() before step()")

        action = int(action)
        self._steps += 1

        if not 0 <= action < self.action_space.n:
            # Off-board index: no-op
            reward = -0.1
        else:
            flag, row, col = self._decode_action(action)
            reward = self._apply_action(flag, row, col)

        observation = self.session.board.get_observation()
        terminated = self.session.is_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _apply_action(self, flag: bool, row: int, col: int) -> float:
        """Route a decoded action to the session and score it."""
        if flag:
            self.session.on_cell_secondary_action(row, col)
            return 0.0
        return self._calculate_reward(row, col)

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, row, col)."""
        flag = action >= self._num_cells
        row, col = divmod(action % self._num_cells, self.config.cols)
        return flag, row, col

    def _calculate_reward(self, row: int, col: int) -> float:
        """
        Reveal a cell and score the result.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        result = self.session.on_cell_primary_action(row, col)

        if result.is_noop:
            return -0.1
        if result.outcome == RevealOutcome.HIT_MINE:
            return -10.0
        if self.session.is_won:
            return 10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.session.board
        return {
            "steps": self._steps,
            "revealed": board.safe_cells_revealed,
            "total_safe": self.config.safe_cells,
            "flags": board.flag_count,
            "game_state": self.session.state.name,
            "valid_actions": len(board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.session is None:
            return None
        text = render_board(self.session.board)
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that change the board.

        Returns:
            int8 array where 1 = valid action, usable with
            ``action_space.sample(mask=...)``.
        """
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self.session is None or self.session.is_over:
            return mask
        obs = self.session.board.get_observation().flatten()
        mask[: self._num_cells] = obs == -1
        mask[self._num_cells:] = (obs == -1) | (obs == -2)
        return mask

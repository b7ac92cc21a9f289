"""
Game session module for Minesweeper.

A session owns one board for the length of a game, tracks the game
state and the display timer, and exposes the event handlers a
front end calls when the player clicks.
"""
import random
from enum import Enum, auto
from typing import Optional

from .board import Board, BoardConfig, Position, RevealOutcome, RevealResult


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of a game."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One game of Minesweeper.

    Mines are placed when the session is created. Replaying means
    building a new session with ``replay()``; a finished session
    ignores further clicks.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        board: Optional[Board] = None,
    ) -> None:
        """
        Start a new game.

        Args:
            config: Board configuration (default: 8x8 with 10 mines).
            seed: Seed for mine placement.
            rng: Random source for mine placement.
            board: Ready-made board; its config wins over ``config``.
        """
        if board is None:
            board = Board(config or BoardConfig())
        if not board.mines_placed:
            board.place_mines(seed=seed, rng=rng)

        self.board = board
        self.config = board.config
        self._state = GameState.NOT_STARTED
        self._elapsed = 0

    # ========================================================================
    # Event Handlers
    # ========================================================================

    def on_cell_primary_action(self, row: int, col: int) -> RevealResult:
        """
        Handle a reveal click.

        Args:
            row: Row index clicked.
            col: Column index clicked.

        Returns:
            The board's reveal result; ALREADY_DONE once the game is over.
        """
        if self.is_over:
            return RevealResult(RevealOutcome.ALREADY_DONE)

        result = self.board.reveal(row, col)
        if result.outcome != RevealOutcome.OUT_OF_BOUNDS:
            self._start()

        if result.hit_mine:
            self.board.reveal_all_mines()
            self._state = GameState.LOST
        elif self.board.is_win():
            self._state = GameState.WON
        return result

    def on_cell_secondary_action(self, row: int, col: int) -> bool:
        """
        Handle a flag click.

        Returns:
            True if the cell is now flagged.
        """
        if self.is_over:
            return False
        if self.board.get_cell(row, col) is not None:
            self._start()
        return self.board.toggle_flag(row, col)

    def on_tick(self) -> int:
        """
        Advance the display timer by one second.

        The timer only runs between the first click and the end of
        the game.

        Returns:
            Elapsed seconds.
        """
        if self._state == GameState.IN_PROGRESS:
            self._elapsed += 1
        return self._elapsed

    def _start(self) -> None:
        if self._state == GameState.NOT_STARTED:
            self._state = GameState.IN_PROGRESS

    def replay(self) -> "GameSession":
        """Create a fresh session with the same configuration."""
        return GameSession(self.config)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_over(self) -> bool:
        """Check if the game has been won or lost."""
        return self._state in (GameState.WON, GameState.LOST)

    @property
    def is_won(self) -> bool:
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._state == GameState.LOST

    @property
    def elapsed(self) -> int:
        """Elapsed time in seconds."""
        return self._elapsed

    @property
    def mine_count(self) -> int:
        return self.config.num_mines

    @property
    def mines_remaining(self) -> int:
        return self.board.mines_remaining

    @property
    def triggered_mine(self) -> Optional[Position]:
        return self.board.hit_mine

    def cell_view(self, row: int, col: int) -> Optional[int]:
        """
        Get what the player sees at a position.

        Returns:
            Observation code (see ``Cell.to_observation``), or None
            when off the board.
        """
        cell = self.board.get_cell(row, col)
        return cell.to_observation() if cell is not None else None

"""
Minesweeper game package.

Provides the board model, the per-game session with its click
handlers, text rendering and a Gymnasium environment adapter.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    InvalidConfiguration,
    RevealOutcome,
    RevealResult,
    CLASSIC,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
)
from .session import GameSession, GameState
from .render import INSTRUCTIONS, render_board, status_line
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "InvalidConfiguration",
    "RevealOutcome",
    "RevealResult",
    "CLASSIC",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "GameSession",
    "GameState",
    "INSTRUCTIONS",
    "render_board",
    "status_line",
    "MinesweeperEnv",
]

"""
Text rendering for Minesweeper boards and sessions.
"""
from typing import List

from .board import Board
from .session import GameSession


INSTRUCTIONS = (
    "Instructions:\n"
    "- Left-click to reveal a tile.\n"
    "- Right-click to flag/unflag.\n"
    "- Avoid the bombs!\n"
    "- Clear all safe tiles to win.\n"
    "\n"
    "Good luck!"
)

SYMBOLS = {-1: ".", -2: "F", 9: "*", 0: " "}
TRIGGERED_SYMBOL = "X"


def cell_symbol(board: Board, row: int, col: int) -> str:
    """Get the character shown for a single cell."""
    value = int(board.get_cell(row, col).to_observation())
    if value == 9 and board.hit_mine == (row, col):
        return TRIGGERED_SYMBOL
    return SYMBOLS.get(value, str(value))


def render_board(board: Board, show_coordinates: bool = False) -> str:
    """
    Render board as ASCII string.

    Args:
        board: Board to draw.
        show_coordinates: Prefix rows and head columns with indices.

    Returns:
        One line per board row.
    """
    width = len(str(max(board.rows, board.cols) - 1))
    lines: List[str] = []

    if show_coordinates:
        header = " ".join(f"{col:>{width}}" for col in range(board.cols))
        lines.append(f"{'':>{width}} {header}")

    for row in range(board.rows):
        cells = " ".join(
            f"{cell_symbol(board, row, col):>{width}}"
            for col in range(board.cols)
        )
        if show_coordinates:
            cells = f"{row:>{width}} {cells}"
        lines.append(cells)

    return "\n".join(lines)


def status_line(session: GameSession) -> str:
    """Build the timer/mine counter line shown above the board."""
    counters = f"Time: {session.elapsed}s | Mines: {session.mine_count}"
    if session.is_won:
        return f"You Win! {counters}"
    if session.is_lost:
        return f"Game Over! You hit a mine. | {counters}"
    return counters

"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Tuple


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row index of the cell.
        col: Column index of the cell.
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, revealed, or flagged).
    """

    row: int = 0
    col: int = 0
    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if already revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def expose(self) -> None:
        """Force the cell open, dropping any flag. Used for end-of-game display."""
        self.state = CellState.REVEALED

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            The new flagged state. Revealed cells are left untouched
            and report False.
        """
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        elif self.state == CellState.FLAGGED:
            self.state = CellState.HIDDEN
        return self.state == CellState.FLAGGED

    @property
    def position(self) -> Tuple[int, int]:
        """Get (row, col) of this cell."""
        return self.row, self.col

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines

"""
Board module for Minesweeper game.

Implements the game board with mine placement, adjacency counting,
flood revealing, and win detection.
"""
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Tuple, Set, Optional

import numpy as np

from .cell import Cell, CellState


Position = Tuple[int, int]

NEIGHBOR_OFFSETS: Tuple[Position, ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


# ============================================================================
# Errors
# ============================================================================

class InvalidConfiguration(ValueError):
    """Raised when a board cannot be built from the given parameters."""


# ============================================================================
# Constants
# ============================================================================

class RevealOutcome(Enum):
    """Possible results of a reveal request."""

    ALREADY_DONE = auto()
    FLAGGED = auto()
    OUT_OF_BOUNDS = auto()
    REVEALED_SAFE = auto()
    HIT_MINE = auto()


@dataclass(frozen=True)
class RevealResult:
    """
    Outcome of a single reveal request.

    Attributes:
        outcome: What happened.
        adjacent_mines: Mine count of the requested cell when it was a
            safe reveal, otherwise None.
        revealed: Positions opened by this request, cascade included.
    """

    outcome: RevealOutcome
    adjacent_mines: Optional[int] = None
    revealed: Tuple[Position, ...] = ()

    @property
    def is_noop(self) -> bool:
        """True when the request changed nothing."""
        return self.outcome in (
            RevealOutcome.ALREADY_DONE,
            RevealOutcome.FLAGGED,
            RevealOutcome.OUT_OF_BOUNDS,
        )

    @property
    def hit_mine(self) -> bool:
        return self.outcome == RevealOutcome.HIT_MINE


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 8
    cols: int = 8
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


# Preset board sizes
CLASSIC = BoardConfig(8, 8, 10)
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

PRESETS = {
    "classic": CLASSIC,
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic
    and the win condition. Game flow (start, loss, timer) belongs to
    the session that owns the board.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _mines: Set[Position] = field(default_factory=set, repr=False)
    _mines_placed: bool = False
    _safe_revealed: int = 0
    _hit_mine: Optional[Position] = None

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    @classmethod
    def initialize(cls, rows: int, cols: int, num_mines: int) -> "Board":
        """Create an empty board, raising InvalidConfiguration on bad input."""
        return cls(BoardConfig(rows, cols, num_mines))

    @classmethod
    def with_mines(
        cls, config: BoardConfig, positions: Iterable[Position]
    ) -> "Board":
        """
        Create a board whose mines sit at fixed positions.

        Args:
            config: Board configuration; num_mines must match positions.
            positions: (row, col) pairs holding mines.

        Returns:
            Board with mines placed and adjacency counts computed.
        """
        board = cls(config)
        mines = {(int(row), int(col)) for row, col in positions}
        if len(mines) != config.num_mines:
            raise InvalidConfiguration(
                f"Expected {config.num_mines} distinct mine positions, "
                f"got {len(mines)}"
            )
        for row, col in mines:
            if not board._is_valid_position(row, col):
                raise InvalidConfiguration(
                    f"Mine position ({row}, {col}) is off the board"
                )
        board._arm(mines)
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell(row, col) for col in range(self.config.cols)]
            for row in range(self.config.rows)
        ]

    def place_mines(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Place mines uniformly at random. Must run once, before any reveal.

        Args:
            seed: Seed for a fresh random source.
            rng: Random source to draw from; takes precedence over seed.
        """
        if self._mines_placed:
            raise RuntimeError("Mines have already been placed on this board")
        rng = rng or random.Random(seed)
        if self.config.num_mines * 2 > self.config.total_cells:
            mines = self._sample_positions(rng)
        else:
            mines = self._resample_positions(rng)
        self._arm(mines)

    def _resample_positions(self, rng: random.Random) -> Set[Position]:
        """Draw random cells, skipping ones that already hold a mine."""
        mines: Set[Position] = set()
        while len(mines) < self.config.num_mines:
            row = rng.randrange(self.config.rows)
            col = rng.randrange(self.config.cols)
            mines.add((row, col))
        return mines

    def _sample_positions(self, rng: random.Random) -> Set[Position]:
        """Pick positions by partial shuffle; bounded time on dense boards."""
        indices = rng.sample(range(self.config.total_cells), self.config.num_mines)
        return {divmod(index, self.config.cols) for index in indices}

    def _arm(self, mines: Set[Position]) -> None:
        """Mark mine cells and compute adjacency counts."""
        self._mines = set(mines)
        for row, col in self._mines:
            self._grid[row][col].is_mine = True
        self._calculate_adjacent_mines()
        self._mines_placed = True

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if not self._grid[row][col].is_mine:
                    count = self._count_adjacent_mines(row, col)
                    self._grid[row][col].adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if (neighbor_row, neighbor_col) in self._mines:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self._is_valid_position(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell at the given position.

        A safe cell with no adjacent mines opens its neighbors in turn.
        Flagged and already revealed cells, and positions off the board,
        are left alone.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            RevealResult describing what happened.
        """
        if not self._is_valid_position(row, col):
            return RevealResult(RevealOutcome.OUT_OF_BOUNDS)

        if not self._mines_placed:
            self.place_mines()

        cell = self._grid[row][col]
        if cell.is_flagged:
            return RevealResult(RevealOutcome.FLAGGED)
        if cell.is_revealed:
            return RevealResult(RevealOutcome.ALREADY_DONE)

        if cell.is_mine:
            cell.reveal()
            self._hit_mine = (row, col)
            return RevealResult(RevealOutcome.HIT_MINE, revealed=((row, col),))

        revealed = self._flood_reveal(row, col)
        return RevealResult(
            RevealOutcome.REVEALED_SAFE,
            adjacent_mines=cell.adjacent_mines,
            revealed=tuple(revealed),
        )

    def _flood_reveal(self, row: int, col: int) -> List[Position]:
        """Open a safe cell and cascade through zero-count neighbors."""
        revealed = []
        pending = [(row, col)]
        while pending:
            current_row, current_col = pending.pop()
            cell = self._grid[current_row][current_col]
            # mines never open through a cascade
            if cell.is_mine or not cell.reveal():
                continue
            self._safe_revealed += 1
            revealed.append((current_row, current_col))
            if cell.adjacent_mines == 0:
                pending.extend(
                    (neighbor_row, neighbor_col)
                    for neighbor_row, neighbor_col
                    in self._get_neighbors(current_row, current_col)
                    if self._grid[neighbor_row][neighbor_col].is_hidden
                )
        return revealed

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if the cell is now flagged, False otherwise.
        """
        if not self._is_valid_position(row, col):
            return False
        return self._grid[row][col].toggle_flag()

    def reveal_all_mines(self) -> None:
        """Open every mine for the end-of-game display."""
        for row, col in self._mines:
            self._grid[row][col].expose()

    def is_win(self) -> bool:
        """Check if all non-mine cells are revealed."""
        return self._safe_revealed == self.config.safe_cells

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @property
    def mines_placed(self) -> bool:
        return self._mines_placed

    @property
    def mine_positions(self) -> Set[Position]:
        """Copy of the mine positions."""
        return set(self._mines)

    @property
    def safe_cells_revealed(self) -> int:
        return self._safe_revealed

    @property
    def hit_mine(self) -> Optional[Position]:
        """Position of the mine that was revealed directly, if any."""
        return self._hit_mine

    @property
    def flag_count(self) -> int:
        """Number of flagged cells."""
        return sum(cell.is_flagged for row in self._grid for cell in row)

    @property
    def mines_remaining(self) -> int:
        """Mines not yet accounted for by flags (may go negative)."""
        return self.config.num_mines - self.flag_count

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def cell_state(self, row: int, col: int) -> Optional[CellState]:
        """Get the visual state of a cell, or None if invalid."""
        cell = self.get_cell(row, col)
        return cell.state if cell is not None else None

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of hidden (row, col) positions.
        """
        actions = []
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if self._grid[row][col].state == CellState.HIDDEN:
                    actions.append((row, col))
        return actions

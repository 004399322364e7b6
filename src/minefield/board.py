"""
Board module for minefield.

Implements the board state machine: lazy mine placement on the first
reveal, flood-fill revealing, chording, flag toggling, and win/loss
detection.
"""
import logging
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .config import BoardConfig, SafeZone
from .errors import GenerationError, OutOfBoundsError
from .generator import RandomSource, compute_adjacency, place_mines
from .grid import Coord, flat_index, in_bounds, neighbor_positions
from .results import Outcome, RevealResult

logger = logging.getLogger(__name__)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minefield game board.

    Owns the grid of cells and the counters derived from it. Mines are
    placed on the first reveal so the first click is always safe (subject
    to the configured safe-zone policy).

    A board is owned by a single caller; a new game gets a new board.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: RandomSource = field(default_factory=random.Random, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _outcome: Outcome = Outcome.IN_PROGRESS
    _generated: bool = False
    _revealed_count: int = 0
    _flagged_count: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    @classmethod
    def from_mines(
        cls,
        width: int,
        height: int,
        mines: Iterable[Coord],
        rng: Optional[RandomSource] = None,
    ) -> "Board":
        """
        Build an already generated board from a known mine layout.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: (x, y) positions of the mines.
            rng: Random source (unused once generated).

        Returns:
            Board with mines placed and adjacency computed.
        """
        positions = set(mines)
        config = BoardConfig(width, height, len(positions), SafeZone.NONE)
        board = cls(config, rng or random.Random())
        for x, y in positions:
            board._require_in_bounds(x, y)
            board._grid[y][x].is_mine = True
        compute_adjacency(board._grid)
        board._generated = True
        return board

    # ========================================================================
    # Generation
    # ========================================================================

    def populate(self, safe_x: int, safe_y: int) -> List[Coord]:
        """
        Place mines around a first click and compute adjacency.

        Args:
            safe_x: Column of the first click.
            safe_y: Row of the first click.

        Returns:
            Mine positions.

        Raises:
            GenerationError: If mines were already placed.
        """
        self._require_in_bounds(safe_x, safe_y)
        if self._generated:
            raise GenerationError("Mines have already been placed")
        mines = place_mines(
            self._grid,
            self.config.num_mines,
            safe_x,
            safe_y,
            self.config.safe_zone,
            self.rng,
        )
        self._generated = True
        return mines

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return in_bounds(self.config.width, self.config.height, x, y)

    def _require_in_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.config.width, self.config.height)

    def neighbors(self, x: int, y: int) -> List[Coord]:
        """Get the up-to-eight neighboring positions of (x, y)."""
        return neighbor_positions(self.config.width, self.config.height, x, y)

    def _count_adjacent_flags(self, x: int, y: int) -> int:
        """Count flagged cells adjacent to position."""
        return sum(
            1 for nx, ny in self.neighbors(x, y) if self._grid[ny][nx].is_flagged
        )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> RevealResult:
        """
        Reveal the cell at (x, y).

        On the first reveal, places mines around this cell. A zero cell
        flood-fills its connected zero region plus the numbered border.
        A mine ends the game and exposes every mine on the board.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            Outcome and the coordinates that changed.

        Raises:
            OutOfBoundsError: If (x, y) is not on the board.
        """
        self._require_in_bounds(x, y)
        if self._outcome != Outcome.IN_PROGRESS:
            return RevealResult(self._outcome)

        cell = self._grid[y][x]
        if not cell.is_hidden:
            return RevealResult(self._outcome)

        if not self._generated:
            self.populate(x, y)

        cell.reveal()
        self._revealed_count += 1
        changed = [(x, y)]

        if cell.is_mine:
            self._lose(x, y, changed)
            return RevealResult(self._outcome, changed)

        if cell.adjacent_mines == 0:
            self._flood_fill(x, y, changed)

        self._check_win_condition()
        return RevealResult(self._outcome, changed)

    def _flood_fill(self, x: int, y: int, changed: List[Coord]) -> None:
        """Breadth-first reveal outward from the zero cell at (x, y)."""
        width = self.config.width
        visited = np.zeros(self.config.total_cells, dtype=bool)
        visited[flat_index(width, x, y)] = True
        queue = deque([(x, y)])

        while queue:
            cx, cy = queue.popleft()
            for nx, ny in self.neighbors(cx, cy):
                index = flat_index(width, nx, ny)
                if visited[index]:
                    continue
                visited[index] = True

                neighbor = self._grid[ny][nx]
                if not neighbor.reveal():
                    continue
                self._revealed_count += 1
                changed.append((nx, ny))
                if neighbor.adjacent_mines == 0:
                    queue.append((nx, ny))

    def _lose(self, x: int, y: int, changed: List[Coord]) -> None:
        """End the game and expose every mine."""
        self._outcome = Outcome.LOST
        for mine_x, mine_y, cell in self.cells():
            if cell.is_mine and cell.expose():
                self._revealed_count += 1
                changed.append((mine_x, mine_y))
        logger.info("Mine hit at (%d, %d); game lost", x, y)

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if self._revealed_count == self.config.safe_cells:
            self._outcome = Outcome.WON
            logger.info(
                "All %d safe cells revealed; game won", self.config.safe_cells
            )

    def reveal_neighbors(self, x: int, y: int) -> RevealResult:
        """
        Chord: reveal every unflagged neighbor once flags match the number.

        Args:
            x: Column of a revealed numbered cell.
            y: Row of a revealed numbered cell.

        Returns:
            Merged result of the individual reveals, or an empty result
            if the chord is not allowed.
        """
        self._require_in_bounds(x, y)
        result = RevealResult(self._outcome)
        if not self._can_chord(x, y):
            return result

        for nx, ny in self.neighbors(x, y):
            if self._grid[ny][nx].is_hidden:
                result.merge(self.reveal(nx, ny))
        return result

    def _can_chord(self, x: int, y: int) -> bool:
        """Check if chord action is valid."""
        if self._outcome != Outcome.IN_PROGRESS:
            return False
        cell = self._grid[y][x]
        if not cell.is_revealed or cell.is_mine:
            return False
        return self._count_adjacent_flags(x, y) == cell.adjacent_mines

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle the flag on (x, y).

        Revealed cells and finished games are left alone. Flags may
        outnumber mines.

        Returns:
            The cell's flag state after the call.
        """
        self._require_in_bounds(x, y)
        cell = self._grid[y][x]
        if self._outcome != Outcome.IN_PROGRESS:
            return cell.is_flagged
        if cell.toggle_flag():
            self._flagged_count += 1 if cell.is_flagged else -1
        return cell.is_flagged

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mine_count(self) -> int:
        return self.config.num_mines

    @property
    def outcome(self) -> Outcome:
        """Get current game outcome."""
        return self._outcome

    @property
    def is_playing(self) -> bool:
        return self._outcome == Outcome.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        return self._outcome == Outcome.WON

    @property
    def is_lost(self) -> bool:
        return self._outcome == Outcome.LOST

    @property
    def generated(self) -> bool:
        """Whether mines have been placed."""
        return self._generated

    @property
    def revealed_count(self) -> int:
        return self._revealed_count

    @property
    def flagged_count(self) -> int:
        return self._flagged_count

    @property
    def remaining_mine_estimate(self) -> int:
        """Mines minus flags; negative when over-flagged."""
        return self.config.num_mines - self._flagged_count

    def cell_at(self, x: int, y: int) -> Cell:
        """
        Get the cell at (x, y).

        Raises:
            OutOfBoundsError: If (x, y) is not on the board.
        """
        self._require_in_bounds(x, y)
        return self._grid[y][x]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate (x, y, cell) in row-major order."""
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                yield x, y, cell

    def mine_positions(self) -> List[Coord]:
        """Positions of every mine, row-major."""
        return [(x, y) for x, y, cell in self.cells() if cell.is_mine]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for x, y, cell in self.cells():
            obs[y, x] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Coord]:
        """
        Get list of cells that can be revealed.

        Returns:
            List of (x, y) positions that are hidden and unflagged.
        """
        return [(x, y) for x, y, cell in self.cells() if cell.is_hidden]

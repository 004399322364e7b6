"""
Mine placement and adjacency computation.

Mines are chosen uniformly without replacement from every position outside
the first-click safe zone, then each safe cell is told how many mines
surround it.
"""
import logging
from typing import List, MutableSequence, Protocol, Set, TypeVar

from .cell import Cell
from .config import SafeZone
from .errors import ConfigurationError
from .grid import Coord, neighbor_positions, zone_positions

logger = logging.getLogger(__name__)

T = TypeVar("T")

Grid = List[List[Cell]]


class RandomSource(Protocol):
    """Anything with ``random.Random.randrange`` semantics."""

    def randrange(self, stop: int) -> int:
        ...


# ============================================================================
# Eligible Positions
# ============================================================================

def safe_positions(
    width: int, height: int, safe_x: int, safe_y: int, policy: SafeZone
) -> Set[Coord]:
    """
    Get the positions kept free of mines for a first click.

    Args:
        width: Board width.
        height: Board height.
        safe_x: Column of the first click.
        safe_y: Row of the first click.
        policy: Safe-zone policy.

    Returns:
        Set of excluded (x, y) positions.
    """
    if policy is SafeZone.NEIGHBORHOOD:
        return set(zone_positions(width, height, safe_x, safe_y))
    if policy is SafeZone.CELL:
        return {(safe_x, safe_y)}
    return set()


def eligible_positions(
    width: int, height: int, excluded: Set[Coord]
) -> List[Coord]:
    """List every position outside ``excluded`` in row-major order."""
    return [
        (x, y)
        for y in range(height)
        for x in range(width)
        if (x, y) not in excluded
    ]


def fisher_yates(items: MutableSequence[T], rng: RandomSource) -> None:
    """Shuffle ``items`` in place, uniformly."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]


# ============================================================================
# Placement
# ============================================================================

def place_mines(
    grid: Grid,
    num_mines: int,
    safe_x: int,
    safe_y: int,
    policy: SafeZone,
    rng: RandomSource,
) -> List[Coord]:
    """
    Place mines on an empty grid and compute adjacency counts.

    Args:
        grid: Rows of cells, indexed ``grid[y][x]``.
        num_mines: Mines to place.
        safe_x: Column of the first click.
        safe_y: Row of the first click.
        policy: Safe-zone policy.
        rng: Random source driving the shuffle.

    Returns:
        Mine positions in selection order.

    Raises:
        ConfigurationError: If the safe zone leaves too few positions.
    """
    height = len(grid)
    width = len(grid[0])
    excluded = safe_positions(width, height, safe_x, safe_y, policy)
    positions = eligible_positions(width, height, excluded)
    if num_mines > len(positions):
        raise ConfigurationError(
            f"Cannot place {num_mines} mines: only {len(positions)} "
            f"positions outside the safe zone"
        )

    fisher_yates(positions, rng)
    mines = positions[:num_mines]
    for x, y in mines:
        grid[y][x].is_mine = True

    compute_adjacency(grid)
    logger.debug(
        "Placed %d mines on %dx%d board, first click (%d, %d)",
        num_mines, width, height, safe_x, safe_y,
    )
    return mines


def compute_adjacency(grid: Grid) -> None:
    """Calculate adjacent mine counts for all non-mine cells."""
    height = len(grid)
    width = len(grid[0])
    for y in range(height):
        for x in range(width):
            cell = grid[y][x]
            if cell.is_mine:
                continue
            cell.adjacent_mines = sum(
                1
                for nx, ny in neighbor_positions(width, height, x, y)
                if grid[ny][nx].is_mine
            )

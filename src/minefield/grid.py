"""
Grid geometry shared by the generator and the board.

Coordinates are ``(x, y)`` with ``x`` the column and ``y`` the row.
"""
from typing import Iterator, List, Tuple

Coord = Tuple[int, int]

# King-move offsets, row by row from the top-left.
_OFFSETS: Tuple[Coord, ...] = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


def in_bounds(width: int, height: int, x: int, y: int) -> bool:
    """Check if position is within board bounds."""
    return 0 <= x < width and 0 <= y < height


def neighbor_positions(
    width: int, height: int, x: int, y: int
) -> List[Coord]:
    """
    Get the Chebyshev neighbors of a cell.

    Args:
        width: Board width.
        height: Board height.
        x: Column of center cell.
        y: Row of center cell.

    Returns:
        Up to eight (x, y) tuples; edge neighbors are absent, not wrapped.
    """
    neighbors = []
    for dx, dy in _OFFSETS:
        new_x = x + dx
        new_y = y + dy
        if in_bounds(width, height, new_x, new_y):
            neighbors.append((new_x, new_y))
    return neighbors


def zone_positions(
    width: int, height: int, x: int, y: int
) -> Iterator[Coord]:
    """Yield the 3x3 block around (x, y), clipped at the edges."""
    for zone_y in range(max(0, y - 1), min(height, y + 2)):
        for zone_x in range(max(0, x - 1), min(width, x + 2)):
            yield zone_x, zone_y


def flat_index(width: int, x: int, y: int) -> int:
    """Index of (x, y) in a row-major flat array."""
    return y * width + x

"""
Plain-text rendering of a board.
"""
from typing import List

from .board import Board
from .cell import Cell

HIDDEN = "."
FLAG = "F"
MINE = "*"
FLAGGED_MINE = "+"
WRONG_FLAG = "x"
EMPTY = " "


def cell_glyph(cell: Cell, lost: bool = False, show_mines: bool = False) -> str:
    """Single-character glyph for a cell."""
    if cell.is_revealed:
        if cell.is_mine:
            return FLAGGED_MINE if cell.was_flagged else MINE
        if cell.adjacent_mines == 0:
            return EMPTY
        return str(cell.adjacent_mines)
    if cell.is_flagged:
        if lost and not cell.is_mine:
            return WRONG_FLAG
        return FLAG
    if show_mines and cell.is_mine:
        return MINE
    return HIDDEN


def render_text(
    board: Board, *, show_mines: bool = False, with_coords: bool = False
) -> str:
    """
    Render the board as text, one line per row.

    Args:
        board: Board to draw.
        show_mines: Draw hidden mines too (debug view).
        with_coords: Prefix rows and columns with their indices.

    Returns:
        Multi-line string with cells separated by spaces.
    """
    lost = board.is_lost
    pad = len(str(max(board.width, board.height) - 1))
    lines: List[str] = []

    if with_coords:
        header = " ".join(str(x).rjust(pad) for x in range(board.width))
        lines.append(" " * (pad + 1) + header)

    for y in range(board.height):
        glyphs = [
            cell_glyph(board.cell_at(x, y), lost, show_mines).rjust(pad)
            for x in range(board.width)
        ]
        row = " ".join(glyphs)
        if with_coords:
            row = f"{str(y).rjust(pad)} {row}"
        lines.append(row)

    return "\n".join(lines)

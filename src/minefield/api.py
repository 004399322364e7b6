"""
Functional interface over Board.

Each function takes the board it acts on explicitly; there is no module
level game state.
"""
import random
from typing import Optional

from .board import Board
from .config import BoardConfig, SafeZone
from .generator import RandomSource
from .results import RevealResult


def new_board(
    width: int,
    height: int,
    mine_count: int,
    *,
    safe_zone: SafeZone = SafeZone.NEIGHBORHOOD,
    rng: Optional[RandomSource] = None,
) -> Board:
    """
    Create an ungenerated board.

    Raises:
        ConfigurationError: If the mine count cannot fit around the safe zone.
    """
    config = BoardConfig(width, height, mine_count, safe_zone)
    return Board(config, rng or random.Random())


def generate(
    width: int,
    height: int,
    mine_count: int,
    safe_x: int,
    safe_y: int,
    *,
    safe_zone: SafeZone = SafeZone.NEIGHBORHOOD,
    rng: Optional[RandomSource] = None,
) -> Board:
    """
    Create a board with mines already placed around a first click.

    Nothing is revealed; the caller still reveals (safe_x, safe_y).
    """
    board = new_board(width, height, mine_count, safe_zone=safe_zone, rng=rng)
    board.populate(safe_x, safe_y)
    return board


def reveal(board: Board, x: int, y: int) -> RevealResult:
    return board.reveal(x, y)


def reveal_neighbors(board: Board, x: int, y: int) -> RevealResult:
    return board.reveal_neighbors(x, y)


def toggle_flag(board: Board, x: int, y: int) -> bool:
    return board.toggle_flag(x, y)

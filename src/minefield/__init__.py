"""
Minefield - grid-based mine-detection puzzle engine.

Provides the board state machine (lazy mine placement, flood-fill reveal,
chording, flags, win/loss) plus a text renderer, a game session, and a
gymnasium environment.
"""
from .cell import Cell, CellState
from .config import (
    BEGINNER,
    DIFFICULTIES,
    EXPERT,
    INTERMEDIATE,
    BoardConfig,
    SafeZone,
    get_preset,
)
from .errors import (
    ConfigurationError,
    GenerationError,
    MinefieldError,
    OutOfBoundsError,
)
from .results import Outcome, RevealResult
from .board import Board
from .api import generate, new_board, reveal, reveal_neighbors, toggle_flag
from .render import render_text
from .session import GameSession, SoundCue, Turn

__all__ = [
    "Cell",
    "CellState",
    "BoardConfig",
    "SafeZone",
    "DIFFICULTIES",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "get_preset",
    "MinefieldError",
    "ConfigurationError",
    "GenerationError",
    "OutOfBoundsError",
    "Outcome",
    "RevealResult",
    "Board",
    "new_board",
    "generate",
    "reveal",
    "reveal_neighbors",
    "toggle_flag",
    "render_text",
    "GameSession",
    "SoundCue",
    "Turn",
]

"""
Game session: the glue a front end drives.

Tracks the current board, the elapsed-time clock and which sound cue each
action should trigger. Nothing here renders or plays audio.
"""
import logging
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .board import Board
from .config import BEGINNER, BoardConfig
from .generator import RandomSource
from .results import Outcome, RevealResult

logger = logging.getLogger(__name__)


class SoundCue(Enum):
    """Sound a front end should play after an action."""

    CLICK = "click"
    FLAG = "flag"
    EXPLOSION = "explosion"
    WIN = "win"


@dataclass
class Turn:
    """Result of one player action."""

    result: RevealResult
    cue: Optional[SoundCue] = None


def cue_for(result: RevealResult) -> Optional[SoundCue]:
    """Pick the sound cue for a reveal or chord result."""
    if result.is_noop:
        return None
    if result.hit_mine:
        return SoundCue.EXPLOSION
    if result.outcome == Outcome.WON:
        return SoundCue.WIN
    return SoundCue.CLICK


class GameSession:
    """
    One player's sequence of games.

    The clock starts on the first reveal or flag and stops when the game
    ends. Starting a new game replaces the board.
    """

    def __init__(
        self,
        config: BoardConfig = BEGINNER,
        rng: Optional[RandomSource] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.rng = rng or random.Random()
        self._clock = clock
        self.config = config
        self.board = Board(config, self.rng)
        self._started_at: Optional[float] = None
        self._stopped_at: Optional[float] = None

    def new_game(self, config: Optional[BoardConfig] = None) -> Board:
        """Discard the current board and start over."""
        if config is not None:
            self.config = config
        self.board = Board(self.config, self.rng)
        self._started_at = None
        self._stopped_at = None
        logger.debug(
            "New %dx%d game with %d mines",
            self.config.width, self.config.height, self.config.num_mines,
        )
        return self.board

    # ========================================================================
    # Clock
    # ========================================================================

    @property
    def started(self) -> bool:
        return self._started_at is not None

    @property
    def elapsed(self) -> float:
        """Seconds since the first action, frozen once the game ends."""
        if self._started_at is None:
            return 0.0
        end = self._stopped_at if self._stopped_at is not None else self._clock()
        return end - self._started_at

    def _start_clock(self) -> None:
        if self._started_at is None:
            self._started_at = self._clock()

    def _stop_clock_if_over(self) -> None:
        if not self.board.is_playing and self._stopped_at is None:
            self._stopped_at = self._clock()

    # ========================================================================
    # Player Actions
    # ========================================================================

    def click(self, x: int, y: int) -> Turn:
        """Reveal a cell."""
        if not self.board.is_playing:
            return Turn(RevealResult(self.board.outcome))
        self._start_clock()
        result = self.board.reveal(x, y)
        self._stop_clock_if_over()
        return Turn(result, cue_for(result))

    def right_click(self, x: int, y: int) -> Turn:
        """Toggle a flag."""
        result = RevealResult(self.board.outcome)
        if not self.board.is_playing or self.board.cell_at(x, y).is_revealed:
            return Turn(result)
        self._start_clock()
        self.board.toggle_flag(x, y)
        result.changed.append((x, y))
        return Turn(result, SoundCue.FLAG)

    def double_click(self, x: int, y: int) -> Turn:
        """Chord around a revealed number."""
        if not self.board.is_playing:
            return Turn(RevealResult(self.board.outcome))
        result = self.board.reveal_neighbors(x, y)
        self._stop_clock_if_over()
        return Turn(result, cue_for(result))

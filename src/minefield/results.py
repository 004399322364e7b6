"""
Outcome tags and reveal results returned by board operations.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List

from .grid import Coord


class Outcome(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass
class RevealResult:
    """
    What a reveal or chord changed.

    Attributes:
        outcome: Game outcome after the operation.
        changed: Coordinates whose state changed, in reveal order.
    """

    outcome: Outcome
    changed: List[Coord] = field(default_factory=list)

    @property
    def is_noop(self) -> bool:
        return not self.changed

    @property
    def hit_mine(self) -> bool:
        return self.outcome == Outcome.LOST and bool(self.changed)

    def merge(self, other: "RevealResult") -> "RevealResult":
        """Fold a later result into this one, keeping first occurrences."""
        seen = set(self.changed)
        for coord in other.changed:
            if coord not in seen:
                seen.add(coord)
                self.changed.append(coord)
        self.outcome = other.outcome
        return self

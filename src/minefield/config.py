"""
Configuration for minefield boards.

Holds the safe-zone policy, the validated board configuration and the
named difficulty presets.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .errors import ConfigurationError


# ============================================================================
# Safe Zone Policy
# ============================================================================

class SafeZone(Enum):
    """Which cells around the first click are kept free of mines."""

    NEIGHBORHOOD = "neighborhood"
    CELL = "cell"
    NONE = "none"

    def max_zone_size(self, width: int, height: int) -> int:
        """Largest number of cells this policy can exclude on a board."""
        if self is SafeZone.NEIGHBORHOOD:
            return min(3, width) * min(3, height)
        if self is SafeZone.CELL:
            return 1
        return 0


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a minefield board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
        safe_zone: Cells kept mine-free around the first click.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10
    safe_zone: SafeZone = SafeZone.NEIGHBORHOOD

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values can produce a board."""
        if self.width < 1 or self.height < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigurationError("Number of mines cannot be negative")
        if self.num_mines > self.max_mines:
            raise ConfigurationError(
                f"Too many mines (max {self.max_mines} on a "
                f"{self.width}x{self.height} board with "
                f"{self.safe_zone.value} safe zone)"
            )

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Cells that must be revealed to win."""
        return self.total_cells - self.num_mines

    @property
    def max_mines(self) -> int:
        """Mine limit that still leaves room for the safe zone."""
        return self.total_cells - self.safe_zone.max_zone_size(
            self.width, self.height
        )


# ============================================================================
# Difficulty Presets
# ============================================================================

DIFFICULTIES: Dict[str, BoardConfig] = {
    "easy": BoardConfig(9, 9, 10),
    "medium": BoardConfig(16, 16, 40),
    "hard": BoardConfig(30, 16, 99),
    "extreme50": BoardConfig(50, 50, 400),
    "extreme100": BoardConfig(100, 100, 1600),
    "extreme200": BoardConfig(200, 200, 6400),
    "extreme500": BoardConfig(500, 500, 40000),
    "extreme1000": BoardConfig(1000, 1000, 160000),
}

BEGINNER = DIFFICULTIES["easy"]
INTERMEDIATE = DIFFICULTIES["medium"]
EXPERT = DIFFICULTIES["hard"]


def get_preset(name: str) -> BoardConfig:
    """
    Look up a difficulty preset by name.

    Raises:
        ConfigurationError: If no preset has that name.
    """
    try:
        return DIFFICULTIES[name]
    except KeyError:
        choices = ", ".join(DIFFICULTIES)
        raise ConfigurationError(
            f"Unknown difficulty {name!r} (choose from {choices})"
        ) from None

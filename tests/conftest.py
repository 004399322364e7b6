"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell


# ============================================================================
# Random Sources
# ============================================================================

class IdentityRandom:
    """Random source whose Fisher-Yates shuffle leaves the list in order."""

    def randrange(self, stop: int) -> int:
        return stop - 1


class ZeroRandom:
    """Random source that always picks index 0."""

    def randrange(self, stop: int) -> int:
        return 0


@pytest.fixture
def identity_rng() -> IdentityRandom:
    return IdentityRandom()


@pytest.fixture
def zero_rng() -> ZeroRandom:
    return ZeroRandom()


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board()


@pytest.fixture
def identity_board(identity_rng: IdentityRandom) -> Board:
    """9x9 board with 10 mines whose layout follows the identity shuffle."""
    return Board(BoardConfig(9, 9, 10), identity_rng)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def wall_board() -> Board:
    """5x5 board with a wall of mines down column 3."""
    return Board.from_mines(5, 5, [(3, y) for y in range(5)])


@pytest.fixture
def corner_pair_board() -> Board:
    """3x3 board with mines in the two top corners."""
    return Board.from_mines(3, 3, [(0, 0), (2, 0)])


@pytest.fixture
def single_mine_board() -> Board:
    """3x3 board with one mine in the top-left corner."""
    return Board.from_mines(3, 3, [(0, 0)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)

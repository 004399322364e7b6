"""
Exceptions raised by the minefield package.

Coordinates outside the board and impossible configurations are caller
bugs and raise. Playing on after the game ended is not an error.
"""


class MinefieldError(Exception):
    """Base class for all minefield errors."""


class ConfigurationError(MinefieldError, ValueError):
    """Board configuration cannot be satisfied."""


class OutOfBoundsError(MinefieldError, IndexError):
    """Coordinates fall outside the board."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"({x}, {y}) is outside the {width}x{height} board"
        )
        self.x = x
        self.y = y


class GenerationError(MinefieldError, RuntimeError):
    """Mines were already placed on this board."""

"""
utils.py - Constants, enumerations and helpers shared by the Connect Four engine

Board dimensions and the win length are fixed here; nothing else in the
package hard-codes them.
"""

from enum import Enum, auto
from typing import Dict, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of aligned tokens needed to win


class Token(Enum):
    """State of a single cell."""
    EMPTY = 0
    YELLOW = 1   # First player
    RED = 2      # Second player

    def other(self) -> "Token":
        """Get the opposing token (EMPTY stays EMPTY)."""
        if self == Token.YELLOW:
            return Token.RED
        elif self == Token.RED:
            return Token.YELLOW
        return Token.EMPTY

    @property
    def symbol(self) -> str:
        return TOKEN_SYMBOLS[self]

    def __str__(self):
        return self.name.capitalize()


TOKEN_SYMBOLS: Dict[Token, str] = {
    Token.EMPTY: " ",
    Token.YELLOW: "Y",
    Token.RED: "R",
}


class PlayerSlot(Enum):
    """The two seats of a match."""
    FIRST = "first"
    SECOND = "second"


class Direction(Enum):
    """Lines scanned by the win check."""
    VERTICAL = auto()
    HORIZONTAL = auto()
    DIAGONAL_UP = auto()    # bottom-left to top-right
    DIAGONAL_DOWN = auto()  # top-left to bottom-right


# (column step, row step) for each diagonal, rows counted from the bottom
DIAGONAL_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.DIAGONAL_UP: (1, 1),
    Direction.DIAGONAL_DOWN: (1, -1),
}


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art.

    Args:
        grid: ROWS x COLS array of token values, row 0 being the bottom row

    Returns:
        Column numbers, then the rows from the top one down
    """
    header = "|" + "|".join(f"{col:^3}" for col in range(COLS)) + "|"
    separator = "-" * len(header)

    lines = [header, separator]
    for row in range(ROWS - 1, -1, -1):
        cells = (Token(int(value)).symbol for value in grid[row])
        lines.append("|" + "|".join(f" {cell} " for cell in cells) + "|")
    lines.append(separator)

    return "\n".join(lines)

"""
board.py - Board representation and win detection for Connect Four

This module implements the Board class which holds the grid of tokens,
validates and applies placements, and checks whether the token just
placed completes a line of CONNECT_N.
"""

from typing import Iterable, List, Tuple

import numpy as np

from connect_four.debug import debug
from connect_four.game.errors import FilledColumnError, InvalidColumnError, NotATokenError
from connect_four.utils import (ROWS, COLS, CONNECT_N, Token, Direction, DIAGONAL_STEPS,
                                render_board_ascii)


class Board:
    """
    Represents a Connect Four board.

    Cells are addressed by (column, row) with row 0 at the bottom. Tokens
    settle downward, so the filled cells of a column always form an
    unbroken run starting at row 0.
    """

    def __init__(self):
        """Initialize an empty board."""
        self.reset()

    def reset(self):
        """Clear every cell."""
        debug.trace("Resetting board", "board")
        # grid[row, column], row 0 is the bottom row
        self.grid = np.zeros((ROWS, COLS), dtype=np.int8)

    def copy(self) -> 'Board':
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    def __getitem__(self, position: Tuple[int, int]) -> Token:
        column, row = position
        return self.token_at(column, row)

    def token_at(self, column: int, row: int) -> Token:
        """
        Get the token held by a cell.

        Raises:
            InvalidColumnError: column outside the board
            IndexError: row outside the board
        """
        self._check_column(column)
        if not 0 <= row < ROWS:
            raise IndexError(f"Invalid row {row!r}")
        return Token(int(self.grid[row, column]))

    def available_columns(self) -> List[int]:
        """
        Get the columns that can still receive a token.

        Returns:
            Column indices in ascending order, empty when the board is full
        """
        return [col for col in range(COLS) if not self.is_column_filled(col)]

    def is_column_filled(self, column: int) -> bool:
        """
        Check whether a column has no room left.

        Raises:
            InvalidColumnError: column outside [0, COLS)
        """
        self._check_column(column)
        return bool(self.grid[ROWS - 1, column] != Token.EMPTY.value)

    def column_height(self, column: int) -> int:
        """Number of tokens stacked in a column."""
        self._check_column(column)
        return int(np.count_nonzero(self.grid[:, column]))

    def is_empty(self) -> bool:
        """True until the first token is placed."""
        return not self.grid[0].any()

    def place_token(self, token: Token, column: int) -> bool:
        """
        Drop a token in a column.

        Args:
            token: Token.YELLOW or Token.RED
            column: The column to play (0-indexed)

        Returns:
            True if this placement completes a line of CONNECT_N tokens

        Raises:
            NotATokenError: token is EMPTY or not a token at all
            InvalidColumnError: column outside [0, COLS)
            FilledColumnError: column already full
        """
        token = self._as_token(token)
        self._check_column(column)

        if self.is_column_filled(column):
            debug.debug(f"Column {column} is full, cannot place {token}", "board")
            raise FilledColumnError(column)

        row = self.column_height(column)
        self.grid[row, column] = token.value
        debug.trace(f"Placed {token} at ({column}, {row})", "board")

        won = self._check_victory_from(column, row)
        if won:
            debug.info(f"{token} completes a line at ({column}, {row})", "board")
        return won

    def get_state(self) -> np.ndarray:
        """Copy of the grid (row 0 is the bottom row)."""
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(tokens={int(np.count_nonzero(self.grid))})"

    # Victory detection

    def _check_victory_from(self, column: int, row: int) -> bool:
        value = self.grid[row, column]

        # Vertical and horizontal lines are scanned in full
        if self._has_run(self.grid[:, column], value):
            return True
        if self._has_run(self.grid[row, :], value):
            return True

        for direction in (Direction.DIAGONAL_UP, Direction.DIAGONAL_DOWN):
            if self._has_run(self._diagonal_through(column, row, direction), value):
                return True

        return False

    def _diagonal_through(self, column: int, row: int, direction: Direction) -> np.ndarray:
        """
        Cells of the whole diagonal segment passing through (column, row).

        The origin is the leftmost cell of the segment, found by walking back
        until a board edge is reached. Segments shorter than CONNECT_N come
        back empty.
        """
        _, row_step = DIAGONAL_STEPS[direction]

        if row_step > 0:
            back = min(column, row)
            forward = min(COLS - 1 - column, ROWS - 1 - row)
        else:
            back = min(column, ROWS - 1 - row)
            forward = min(COLS - 1 - column, row)

        origin_col = column - back
        origin_row = row - back * row_step
        length = back + forward + 1

        if length < CONNECT_N:
            return np.empty(0, dtype=self.grid.dtype)

        steps = np.arange(length)
        return self.grid[origin_row + row_step * steps, origin_col + steps]

    @staticmethod
    def _has_run(cells: Iterable, value) -> bool:
        count = 0
        for cell in cells:
            if cell == value:
                count += 1
                if count >= CONNECT_N:
                    return True
            else:
                count = 0
        return False

    # Validation

    @staticmethod
    def _check_column(column) -> None:
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            raise InvalidColumnError(column)
        if not 0 <= column < COLS:
            raise InvalidColumnError(column)

    @staticmethod
    def _as_token(token) -> Token:
        try:
            token = Token(token)
        except (ValueError, TypeError):
            raise NotATokenError(token) from None

        if token == Token.EMPTY:
            raise NotATokenError(token)
        return token

"""
Tests for connect_four.game.board

Placement rules, error cases and win detection in every orientation.
"""

import numpy as np
import pytest

from connect_four.game.board import Board
from connect_four.game.errors import (ConnectFourError, FilledColumnError,
                                      InvalidColumnError, NotATokenError)
from connect_four.utils import ROWS, COLS, Token

Y = Token.YELLOW
R = Token.RED


def play(board: Board, moves):
    """Apply (token, column) pairs, returning the win flag of each."""
    return [board.place_token(token, column) for token, column in moves]


class TestInitialization:

    def test_starts_empty(self, board: Board):
        assert board.is_empty() is True
        assert np.all(board.get_state() == Token.EMPTY.value)
        assert board.get_state().shape == (ROWS, COLS)

    def test_all_columns_available(self, board: Board):
        assert board.available_columns() == list(range(COLS))

    def test_every_cell_empty(self, board: Board):
        for column in range(COLS):
            for row in range(ROWS):
                assert board[column, row] == Token.EMPTY


class TestPlacement:

    def test_token_lands_on_bottom_row(self, board: Board):
        board.place_token(Y, 3)
        assert board[3, 0] == Y
        assert board.token_at(3, 1) == Token.EMPTY

    def test_tokens_stack(self, board: Board):
        play(board, [(Y, 2), (R, 2), (Y, 2)])
        assert [board[2, row] for row in range(3)] == [Y, R, Y]
        assert board.column_height(2) == 3

    def test_mutates_exactly_one_cell(self, board: Board):
        play(board, [(Y, 0), (R, 1)])
        before = board.get_state()
        board.place_token(Y, 4)
        changed = np.argwhere(board.get_state() != before)
        assert changed.tolist() == [[0, 4]]

    def test_accepts_token_values(self, board: Board):
        board.place_token(2, 0)
        assert board[0, 0] == R

    def test_is_empty_false_after_first_move(self, board: Board):
        board.place_token(R, 6)
        assert board.is_empty() is False

    def test_columns_stay_contiguous(self):
        """Filled cells always form a run from the bottom, for any legal game."""
        for seed in range(20):
            rng = np.random.default_rng(seed)
            board = Board()
            token = Y
            while board.available_columns():
                available = board.available_columns()
                board.place_token(token, available[rng.integers(len(available))])
                token = token.other()

                for column in range(COLS):
                    filled = board.get_state()[:, column] != Token.EMPTY.value
                    height = int(filled.sum())
                    assert filled[:height].all()
                    assert not filled[height:].any()

    def test_reset_clears_board(self, board: Board):
        play(board, [(Y, 0), (R, 0), (Y, 5)])
        board.reset()
        assert board.is_empty()
        assert board.available_columns() == list(range(COLS))

    def test_copy_is_independent(self, board: Board):
        board.place_token(Y, 1)
        clone = board.copy()
        clone.place_token(R, 1)
        assert board[1, 1] == Token.EMPTY
        assert clone[1, 1] == R


class TestFilledColumns:

    def fill_column(self, board: Board, column: int):
        token = Y
        for _ in range(ROWS):
            board.place_token(token, column)
            token = token.other()

    def test_full_column_raises(self, board: Board):
        self.fill_column(board, 0)
        with pytest.raises(FilledColumnError) as excinfo:
            board.place_token(Y, 0)
        assert excinfo.value.column == 0

    def test_full_column_not_available(self, board: Board):
        self.fill_column(board, 4)
        assert board.is_column_filled(4) is True
        assert board.is_column_filled(3) is False
        assert board.available_columns() == [0, 1, 2, 3, 5, 6]

    def test_failed_placement_leaves_board(self, board: Board):
        self.fill_column(board, 0)
        before = board.get_state()
        with pytest.raises(FilledColumnError):
            board.place_token(R, 0)
        assert np.array_equal(board.get_state(), before)

    def test_full_board_has_no_columns(self, board: Board, draw_sequence):
        token = Y
        for column in draw_sequence:
            assert board.place_token(token, column) is False
            token = token.other()
        assert board.available_columns() == []


class TestInvalidArguments:

    @pytest.mark.parametrize("column", [COLS, COLS + 5, 100, -1])
    def test_place_invalid_column(self, board: Board, column):
        with pytest.raises(InvalidColumnError):
            board.place_token(Y, column)

    @pytest.mark.parametrize("column", [COLS, 42, -1])
    def test_is_column_filled_invalid_column(self, board: Board, column):
        with pytest.raises(InvalidColumnError):
            board.is_column_filled(column)

    def test_non_integer_column(self, board: Board):
        with pytest.raises(InvalidColumnError):
            board.place_token(Y, "3")

    def test_empty_token_raises(self, board: Board):
        with pytest.raises(NotATokenError):
            board.place_token(Token.EMPTY, 0)

    def test_empty_token_raises_on_full_column(self, board: Board):
        for token in [Y, R] * 3:
            board.place_token(token, 0)
        with pytest.raises(NotATokenError):
            board.place_token(Token.EMPTY, 0)

    def test_token_checked_before_column(self, board: Board):
        with pytest.raises(NotATokenError):
            board.place_token(Token.EMPTY, COLS)

    @pytest.mark.parametrize("token", [0, 3, "red", None])
    def test_not_a_token_values(self, board: Board, token):
        with pytest.raises(NotATokenError):
            board.place_token(token, 0)
        assert board.is_empty()

    def test_errors_share_base_class(self, board: Board):
        with pytest.raises(ConnectFourError):
            board.place_token(Y, -3)
        with pytest.raises(IndexError):
            board.is_column_filled(9)

    def test_invalid_row(self, board: Board):
        with pytest.raises(IndexError):
            board.token_at(0, ROWS)


class TestHorizontalWin:

    def test_bottom_row(self, board: Board):
        results = play(board, [(Y, 0), (R, 0), (Y, 1), (R, 1), (Y, 2), (R, 2), (Y, 3)])
        assert results == [False] * 6 + [True]

    def test_completed_in_the_middle(self, board: Board):
        results = play(board, [(Y, 0), (Y, 1), (Y, 3), (Y, 2)])
        assert results == [False, False, False, True]

    def test_gap_breaks_the_run(self, board: Board):
        results = play(board, [(Y, 0), (Y, 1), (R, 2), (Y, 3), (Y, 4)])
        assert not any(results)

    def test_right_edge(self, board: Board):
        results = play(board, [(R, 6), (R, 5), (R, 4), (R, 3)])
        assert results == [False, False, False, True]


class TestVerticalWin:

    def test_four_stacked(self, board: Board):
        results = play(board, [(Y, 0), (R, 1), (Y, 0), (R, 1), (Y, 0), (R, 2), (Y, 0)])
        assert results == [False] * 6 + [True]

    def test_interrupted_stack(self, board: Board):
        results = play(board, [(Y, 0), (Y, 0), (Y, 0), (R, 0), (Y, 0)])
        assert not any(results)

    def test_top_of_column(self, board: Board):
        results = play(board, [(Y, 5), (Y, 5), (R, 5), (R, 5), (R, 5), (R, 5)])
        assert results == [False] * 5 + [True]


class TestDiagonalWin:

    def test_rising_diagonal(self, board: Board):
        moves = [
            (Y, 0),
            (R, 1), (Y, 1),
            (R, 2), (R, 2), (Y, 2),
            (R, 3), (R, 3), (R, 3), (Y, 3),
        ]
        results = play(board, moves)
        assert results == [False] * 9 + [True]

    def test_falling_diagonal(self, board: Board):
        moves = [
            (Y, 3),
            (R, 2), (Y, 2),
            (R, 1), (R, 1), (Y, 1),
            (R, 0), (R, 0), (R, 0), (Y, 0),
        ]
        results = play(board, moves)
        assert results == [False] * 9 + [True]

    def test_rising_completed_in_the_middle(self, board: Board):
        moves = [
            (Y, 0),
            (R, 1), (Y, 1),
            (R, 3), (R, 3), (R, 3), (Y, 3),
            (R, 2), (R, 2),
        ]
        assert not any(play(board, moves))
        assert board.place_token(Y, 2) is True

    def test_falling_away_from_edges(self, board: Board):
        """Run from (6, 1) up to (3, 4) on a diagonal touching no corner."""
        moves = [
            (R, 6), (Y, 6),
            (R, 5), (R, 5), (Y, 5),
            (Y, 4), (R, 4), (Y, 4), (Y, 4),
            (R, 3), (Y, 3), (R, 3), (Y, 3),
        ]
        assert not any(play(board, moves))
        assert board.place_token(Y, 3) is True

    def test_short_diagonals_near_corners(self, board: Board):
        """Corner cells sit on diagonals too short to ever win."""
        results = play(board, [(Y, 0), (Y, 6)])
        assert results == [False, False]

    def test_three_on_a_diagonal_is_not_a_win(self, board: Board):
        moves = [
            (Y, 0),
            (R, 1), (Y, 1),
            (R, 2), (R, 2), (Y, 2),
        ]
        assert not any(play(board, moves))


class TestRendering:

    def test_top_row_first(self, board: Board):
        board.place_token(Y, 0)
        board.place_token(R, 6)
        lines = board.render().splitlines()
        bottom = lines[-2]
        top = lines[2]
        assert bottom.startswith("| Y |")
        assert bottom.endswith("| R |")
        assert "Y" not in top and "R" not in top

    def test_header_lists_columns(self, board: Board):
        header = board.render().splitlines()[0]
        for column in range(COLS):
            assert str(column) in header

    def test_str_matches_render(self, board: Board):
        board.place_token(R, 2)
        assert str(board) == board.render()

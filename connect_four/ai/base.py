"""
base.py - Capability interface implemented by every Connect Four player
"""

import abc

from connect_four.game.board import Board
from connect_four.utils import Token


class PlayerAgent(abc.ABC):
    """
    Something that can take a seat in a match.

    The match controller calls ``choose_move`` once per turn and blocks until
    it returns. Agents are expected to answer one of
    ``board.available_columns()``; anything else aborts the match.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Display name, reported as the winner."""
        raise NotImplementedError

    @abc.abstractmethod
    def choose_move(self, board: Board, token: Token) -> int:
        """
        Pick the column to play.

        Args:
            board: The current board, must not be modified
            token: The token this agent is playing

        Returns:
            Column index in [0, COLS)
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

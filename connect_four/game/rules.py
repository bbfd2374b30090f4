"""
rules.py - Match controller for Connect Four

This module provides ConnectFourMatch, which seats two player agents,
alternates their turns on a shared Board and reports the outcome once a
placement wins or the board is full.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

from connect_four.debug import debug
from connect_four.game.board import Board
from connect_four.game.errors import ConnectFourError, InvalidPlayerSlotError
from connect_four.utils import Token, PlayerSlot

if TYPE_CHECKING:
    from connect_four.ai.base import PlayerAgent

# Token played by each seat
SLOT_TOKENS = {
    PlayerSlot.FIRST: Token.YELLOW,
    PlayerSlot.SECOND: Token.RED,
}


@dataclass(frozen=True)
class MatchOutcome:
    """Result of a finished match: the winner's name, or None for a draw."""
    winner: Optional[str]
    moves: int

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def __str__(self):
        if self.is_draw:
            return f"Draw after {self.moves} moves"
        return f"{self.winner} wins after {self.moves} moves"


class ConnectFourMatch:
    """
    Plays full matches between two agents.

    The first seat always plays Token.YELLOW and moves first, the second
    seat plays Token.RED. The board is owned by the match and only mutated
    through Board.place_token.
    """

    def __init__(self, first: 'PlayerAgent', second: 'PlayerAgent'):
        self.board = Board()
        self._players = {
            PlayerSlot.FIRST: first,
            PlayerSlot.SECOND: second,
        }
        self._history: List[Tuple[str, Token, int]] = []

    @property
    def history(self) -> List[Tuple[str, Token, int]]:
        """Moves of the current match as (player name, token, column)."""
        return list(self._history)

    def get_player(self, slot: Union[PlayerSlot, str]) -> 'PlayerAgent':
        return self._players[self._as_slot(slot)]

    def set_player(self, slot: Union[PlayerSlot, str], agent: 'PlayerAgent') -> None:
        """
        Seat another agent.

        Args:
            slot: "first", "second" or a PlayerSlot

        Raises:
            InvalidPlayerSlotError: any other slot
        """
        slot = self._as_slot(slot)
        debug.debug(f"Seating {agent.name} as {slot.value} player", "match")
        self._players[slot] = agent

    def reset(self) -> None:
        """Clear the board. Seated agents are kept."""
        debug.debug("Resetting match", "match")
        self.board.reset()
        self._history = []

    def play(self) -> MatchOutcome:
        """
        Run a match to its end.

        Returns:
            MatchOutcome naming the winner, or with winner None on a draw

        Raises:
            ConnectFourError: an agent chose an illegal column; the match
                is abandoned with the board left as it was
        """
        slot = PlayerSlot.FIRST
        debug.info(f"Match starts: {self._players[PlayerSlot.FIRST].name} vs "
                   f"{self._players[PlayerSlot.SECOND].name}", "match")

        while True:
            agent = self._players[slot]
            token = SLOT_TOKENS[slot]

            column = agent.choose_move(self.board, token)
            debug.debug(f"{agent.name} ({token}) plays column {column}", "match")

            try:
                won = self.board.place_token(token, column)
            except ConnectFourError as e:
                debug.warning(f"Match aborted, {agent.name} made an illegal move: {e}", "match")
                raise

            self._history.append((agent.name, token, column))

            if won:
                outcome = MatchOutcome(winner=agent.name, moves=len(self._history))
                debug.info(str(outcome), "match")
                return outcome

            if not self.board.available_columns():
                outcome = MatchOutcome(winner=None, moves=len(self._history))
                debug.info(str(outcome), "match")
                return outcome

            slot = PlayerSlot.SECOND if slot == PlayerSlot.FIRST else PlayerSlot.FIRST

    @staticmethod
    def _as_slot(slot) -> PlayerSlot:
        try:
            return PlayerSlot(slot)
        except (ValueError, TypeError):
            raise InvalidPlayerSlotError(slot) from None

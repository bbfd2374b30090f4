"""
connect_four.game - Core rules of Connect Four

This package contains the board representation, the win detection and
the match controller that drives two player agents.
"""

from connect_four.game.board import Board
from connect_four.game.errors import (ConnectFourError, InvalidColumnError, NotATokenError,
                                      FilledColumnError, InvalidPlayerSlotError)
from connect_four.game.rules import ConnectFourMatch, MatchOutcome

__all__ = ['Board', 'ConnectFourMatch', 'MatchOutcome', 'ConnectFourError',
           'InvalidColumnError', 'NotATokenError', 'FilledColumnError',
           'InvalidPlayerSlotError']

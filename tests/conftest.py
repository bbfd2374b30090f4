"""
Shared test fixtures for connect_four tests.

Scripted agents make matches deterministic.
"""

from typing import Iterable, List

import pytest

from connect_four.ai.base import PlayerAgent
from connect_four.debug import debug, DebugLevel
from connect_four.game.board import Board
from connect_four.utils import Token

# Fills the board row by row without ever aligning four tokens.
# Yellow plays the even moves, red the odd ones.
DRAW_ROW = [0, 2, 1, 3, 4, 6, 5]
DRAW_SEQUENCE = DRAW_ROW * 6


class ScriptedAgent(PlayerAgent):
    """Plays a fixed list of columns and remembers the tokens it was given."""

    def __init__(self, name: str, columns: Iterable[int]):
        self._name = name
        self.columns: List[int] = list(columns)
        self.tokens_seen: List[Token] = []

    @property
    def name(self) -> str:
        return self._name

    def choose_move(self, board: Board, token: Token) -> int:
        self.tokens_seen.append(token)
        return self.columns.pop(0)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def quiet_debug():
    """Restore the shared debug settings after each test."""
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])


@pytest.fixture
def board() -> Board:
    """Fresh empty board."""
    return Board()


@pytest.fixture
def draw_agents():
    """Two agents whose moves fill the board without a winner."""
    first = ScriptedAgent("Alice", DRAW_SEQUENCE[0::2])
    second = ScriptedAgent("Bob", DRAW_SEQUENCE[1::2])
    return first, second


@pytest.fixture
def draw_sequence() -> List[int]:
    """Columns of a 42-move game with no winner, yellow first."""
    return list(DRAW_SEQUENCE)


@pytest.fixture
def make_agent():
    """Factory for scripted agents: make_agent(name, columns)."""
    return ScriptedAgent

"""
random_bot.py - Agent playing a uniformly random available column
"""

from typing import Optional

import numpy as np

from connect_four.ai.base import PlayerAgent
from connect_four.debug import debug
from connect_four.game.board import Board
from connect_four.utils import Token


class RandomBot(PlayerAgent):
    """Picks any of the available columns with equal probability."""

    def __init__(self, name: str = "Random bot", seed: Optional[int] = None):
        """
        Args:
            name: Display name
            seed: Seed for the random generator, None for fresh entropy
        """
        self._name = name
        self.rng = np.random.default_rng(seed)

    @property
    def name(self) -> str:
        return self._name

    def choose_move(self, board: Board, token: Token) -> int:
        available = board.available_columns()
        column = available[int(self.rng.integers(len(available)))]
        debug.trace(f"{self._name} ({token}) picks column {column} among {available}", "agent")
        return column

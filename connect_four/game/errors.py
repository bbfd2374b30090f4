"""
errors.py - Exceptions raised by the board and the match controller

They only come out of programming misuse (an agent answering an illegal
column, a misconfigured match), so the engine never catches them itself.
"""

from typing import Any


class ConnectFourError(Exception):
    """Base class of every Connect Four engine error."""


class InvalidColumnError(ConnectFourError, IndexError):
    """Column index outside of the board."""

    def __init__(self, column: Any):
        self.column = column
        super().__init__(f"Invalid column {column!r}")


class NotATokenError(ConnectFourError, ValueError):
    """The value given for a placement is not a playable token."""

    def __init__(self, token: Any):
        self.token = token
        super().__init__(f"{token!r} is not a token")


class FilledColumnError(ConnectFourError, ValueError):
    """The column has no room left."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is already filled")


class InvalidPlayerSlotError(ConnectFourError, ValueError):
    """Only the 'first' and 'second' slots exist."""

    def __init__(self, slot: Any):
        self.slot = slot
        super().__init__(f"Player slot {slot!r} does not exist, expected 'first' or 'second'")

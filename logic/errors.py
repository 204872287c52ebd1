"""
Errors raised by the TicTacToe game logic.
"""


class MoveError(Exception):
    """Base class for every refused move."""


class IllegalMove(MoveError):
    """The position is off the board or already taken."""

    def __init__(self, position, message=None):
        self.position = position
        if message is None:
            message = f"Illegal move at {tuple(position)}"
        super().__init__(message)


class OccupiedCell(IllegalMove):
    """The target cell already holds a mark."""

    def __init__(self, position, occupant):
        self.occupant = occupant
        super().__init__(
            position,
            f"Cell {tuple(position)} is already occupied by {occupant.symbol}",
        )


class GameAlreadyOver(MoveError):
    """A move was attempted after the game finished."""

    def __init__(self, outcome):
        self.outcome = outcome
        super().__init__(f"Game is already over ({outcome})")

"""
Win checker for TicTacToe.
Checks if a mark has won or if the game is a draw.
"""

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from .board import Board, EMPTY, LINE_INDICES, Line, Mark, WINNING_LINES


@dataclass(frozen=True)
class InProgress:
    """The game has not ended yet."""
    is_terminal = False

    def __str__(self) -> str:
        return "in progress"


@dataclass(frozen=True)
class Win:
    """A mark completed a line."""
    mark: Mark
    is_terminal = True

    def __str__(self) -> str:
        return f"{self.mark.symbol} wins"


@dataclass(frozen=True)
class Draw:
    """The board filled up with no completed line."""
    is_terminal = True

    def __str__(self) -> str:
        return "draw"


GameOutcome = Union[InProgress, Win, Draw]

IN_PROGRESS = InProgress()
DRAW = Draw()


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells holding the same mark in a row
    (horizontally, vertically, or diagonally).

    Lines are checked rows first, then columns, then the two diagonals.
    """

    WINNING_LINES = WINNING_LINES

    def _completed_lines(self, board: Board) -> np.ndarray:
        """Indices of the lines fully owned by a single mark."""
        line_cells = board.cells[LINE_INDICES]
        owned = (line_cells[:, 0] != EMPTY) & np.all(
            line_cells == line_cells[:, :1], axis=1
        )
        return np.flatnonzero(owned)

    def winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        A board where both marks complete a line can't be reached by
        alternating legal moves, so it is rejected rather than resolved.

        Args:
            board: The board to inspect.

        Returns:
            The winning Mark, or None if no line is complete.

        Raises:
            ValueError: If both marks own a completed line.
        """
        completed = self._completed_lines(board)
        if len(completed) == 0:
            return None

        owners = board.cells[LINE_INDICES[completed, 0]]
        if len(np.unique(owners)) > 1:
            raise ValueError(f"Both marks have a completed line on {board!r}")

        return Mark(int(owners[0]))

    def winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the first completed line, if there is one.

        Args:
            board: The board to inspect.

        Returns:
            The winning line as a triple of positions, or None.
        """
        completed = self._completed_lines(board)
        if len(completed) == 0:
            return None
        return self.WINNING_LINES[int(completed[0])]

    def is_draw(self, board: Board) -> bool:
        """True if the board is full and nobody has won."""
        return board.is_full() and self.winner(board) is None

    def outcome(self, board: Board) -> GameOutcome:
        """
        Work out the state of the game from the board alone.

        Args:
            board: The board to inspect.

        Returns:
            Win(mark) if a line is complete, DRAW if the board is full,
            IN_PROGRESS otherwise.
        """
        winner = self.winner(board)
        if winner is not None:
            return Win(winner)
        if board.is_full():
            return DRAW
        return IN_PROGRESS

"""
Board model for TicTacToe.
A fixed 3x3 grid of cells, each empty or holding an X or an O.
"""

from enum import Enum
from typing import Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

from .errors import IllegalMove, OccupiedCell


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Stored in the board array for an empty cell
EMPTY = 0


class Mark(Enum):
    """The two marks a player can place."""
    X = 1
    O = 2

    def other(self) -> "Mark":
        """Get the opposing mark."""
        return Mark.O if self == Mark.X else Mark.X

    @property
    def symbol(self) -> str:
        """Lowercase letter used when printing the mark."""
        return self.name.lower()


# A cell is either empty (None) or holds a mark
Cell = Optional[Mark]


class Position(NamedTuple):
    """A (row, col) coordinate on the board."""
    row: int
    col: int

    def in_bounds(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    @property
    def index(self) -> int:
        """Row-major offset into the cell array."""
        return self.row * BOARD_SIZE + self.col

    @classmethod
    def from_index(cls, index: int) -> "Position":
        return cls(*divmod(index, BOARD_SIZE))


Line = Tuple[Position, Position, Position]

# All possible winning lines, in the order they are checked
WINNING_LINES: List[Line] = [
    # Rows
    (Position(0, 0), Position(0, 1), Position(0, 2)),
    (Position(1, 0), Position(1, 1), Position(1, 2)),
    (Position(2, 0), Position(2, 1), Position(2, 2)),
    # Columns
    (Position(0, 0), Position(1, 0), Position(2, 0)),
    (Position(0, 1), Position(1, 1), Position(2, 1)),
    (Position(0, 2), Position(1, 2), Position(2, 2)),
    # Diagonals
    (Position(0, 0), Position(1, 1), Position(2, 2)),
    (Position(0, 2), Position(1, 1), Position(2, 0)),
]

# Same lines as cell offsets, shape (8, 3)
LINE_INDICES = np.array(
    [[pos.index for pos in line] for line in WINNING_LINES], dtype=np.intp
)


class Board:
    """
    The 3x3 TicTacToe board.

    Cells are kept in a fixed 9-element array in row-major order.
    A cell only ever changes from empty to a mark, through place().
    """

    def __init__(self):
        self._cells = np.full(CELL_COUNT, EMPTY, dtype=np.int8)

    @classmethod
    def from_rows(cls, rows) -> "Board":
        """
        Build a board from three rows of cells.

        Args:
            rows: 3 sequences of 3 items, each a Mark or None.

        Returns:
            A new Board holding those cells.
        """
        board = cls()
        for row, cells in enumerate(rows):
            for col, cell in enumerate(cells):
                if cell is not None:
                    board.place(Position(row, col), cell)
        return board

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the raw cell array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def get(self, position: Position) -> Cell:
        """
        Get the content of a cell.

        Args:
            position: A position on the board.

        Returns:
            The Mark in that cell, or None if it is empty.
        """
        position = Position(*position)
        if not position.in_bounds():
            raise IllegalMove(position)
        value = int(self._cells[position.index])
        return None if value == EMPTY else Mark(value)

    def place(self, position: Position, mark: Mark):
        """
        Put a mark in an empty cell.

        Args:
            position: Where to place the mark.
            mark: The mark to place.

        Raises:
            IllegalMove: If the position is off the board.
            OccupiedCell: If the cell already holds a mark.
        """
        position = Position(*position)
        occupant = self.get(position)
        if occupant is not None:
            raise OccupiedCell(position, occupant)
        self._cells[position.index] = mark.value

    def is_empty(self, position: Position) -> bool:
        return self.get(position) is None

    def is_full(self) -> bool:
        """True if every cell holds a mark."""
        return bool(np.all(self._cells != EMPTY))

    def empty_positions(self) -> List[Position]:
        """All empty positions in row-major order."""
        return [Position.from_index(int(i)) for i in np.flatnonzero(self._cells == EMPTY)]

    def lines(self) -> Iterator[Line]:
        """Iterate over the 8 winning lines: rows, columns, then diagonals."""
        return iter(WINNING_LINES)

    def rows(self) -> List[List[Cell]]:
        """The board as 3 rows of cells."""
        return [
            [self.get(Position(row, col)) for col in range(BOARD_SIZE)]
            for row in range(BOARD_SIZE)
        ]

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board()
        new_board._cells = self._cells.copy()
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        rows = "/".join(
            "".join(cell.symbol if cell else "." for cell in row) for row in self.rows()
        )
        return f"Board({rows!r})"

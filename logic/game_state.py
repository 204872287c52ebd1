"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and the moves played so far.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from .board import Board, Mark, Position
from .errors import GameAlreadyOver, IllegalMove, OccupiedCell
from .move_validator import MoveValidator
from .win_checker import GameOutcome, IN_PROGRESS, WinChecker

logger = logging.getLogger(__name__)


# X always opens the game
FIRST_MARK = Mark.X


@dataclass(frozen=True)
class Move:
    """
    An accepted move.
    """
    mark: Mark              # Who made the move
    position: Position      # Where the mark went
    move_number: int        # 1 for the opening move


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 3x3 board
    - The mark that moves next
    - Move history
    - Game outcome (in progress, won, draw)

    The game starts in progress with X to move. Each accepted move either
    hands the turn to the other mark or finishes the game; a finished game
    refuses every further move.
    """

    board: Board = field(default_factory=Board)
    current_mark: Mark = FIRST_MARK
    moves: List[Move] = field(default_factory=list)
    outcome: GameOutcome = IN_PROGRESS

    def __post_init__(self):
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    def make_move(self, position: Position) -> GameOutcome:
        """
        Place the current mark at the given position.

        Args:
            position: Row and column, each 0-2.

        Returns:
            The outcome after the move.

        Raises:
            GameAlreadyOver: If the game has already finished.
            OccupiedCell: If the cell already holds a mark.
            IllegalMove: If the position is off the board.
        """
        if self.is_game_over:
            raise GameAlreadyOver(self.outcome)

        position = Position(*position)
        result = self.validator.validate_move(self.board, position)
        if not result.is_valid:
            logger.debug("Rejected move %s: %s", tuple(position), result.error_message)
            occupant = self.board.get(position) if position.in_bounds() else None
            if occupant is not None:
                raise OccupiedCell(position, occupant)
            raise IllegalMove(position, result.error_message)

        mark = self.current_mark
        self.board.place(position, mark)
        self.moves.append(Move(mark=mark, position=position, move_number=len(self.moves) + 1))
        logger.debug("Move %d: %s at %s", len(self.moves), mark.symbol, tuple(position))

        self.outcome = self.win_checker.outcome(self.board)
        if self.is_game_over:
            logger.debug("Game finished after %d moves: %s", len(self.moves), self.outcome)
        else:
            self.current_mark = mark.other()

        return self.outcome

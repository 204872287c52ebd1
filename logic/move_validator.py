"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import List, Optional
from dataclasses import dataclass

from .board import Board, Position


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The position must be on the board
    2. Can only place on empty cells

    Whose turn it is and whether the game is over are tracked by GameState.
    """

    def validate_move(self, board: Board, position: Position) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            position: Where the next mark would go.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        position = Position(*position)

        if not position.in_bounds():
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {tuple(position)}. Must be 0-2."
            )

        occupant = board.get(position)
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {tuple(position)} is already occupied by {occupant.symbol}"
            )

        return ValidationResult(is_valid=True)

    def is_legal_move(self, board: Board, position: Position) -> bool:
        """True if the position is on the board and its cell is empty."""
        return self.validate_move(board, position).is_valid

    def legal_moves(self, board: Board) -> List[Position]:
        """
        Get all legal moves on the board.

        Args:
            board: Current board.

        Returns:
            List of empty positions, in row-major order.
        """
        return board.empty_positions()

"""
Tests for move validation.
"""

import pytest

from logic.board import Board, Mark, Position
from logic.move_validator import MoveValidator

ALL_POSITIONS = [Position(row, col) for row in range(3) for col in range(3)]


@pytest.mark.parametrize("position", ALL_POSITIONS)
def test_every_position_legal_on_empty_board_until_placed(position):
    validator = MoveValidator()
    board = Board()
    assert validator.is_legal_move(board, position)

    board.place(position, Mark.X)
    assert not validator.is_legal_move(board, position)


def test_occupied_cell_message():
    board = Board()
    board.place(Position(1, 1), Mark.O)

    result = MoveValidator().validate_move(board, Position(1, 1))
    assert not result.is_valid
    assert "occupied by o" in result.error_message


@pytest.mark.parametrize("position", [(3, 0), (0, 3), (-1, 1), (5, 5)])
def test_out_of_bounds_is_illegal(position):
    result = MoveValidator().validate_move(Board(), position)
    assert not result.is_valid
    assert "Must be 0-2" in result.error_message


def test_legal_moves_skip_taken_cells():
    board = Board()
    board.place(Position(0, 0), Mark.X)
    board.place(Position(2, 2), Mark.O)

    moves = MoveValidator().legal_moves(board)
    assert len(moves) == 7
    assert Position(0, 0) not in moves
    assert Position(2, 2) not in moves
    assert moves == sorted(moves)

"""
Text renderer for the TicTacToe board.
"""

from typing import Callable, Optional

from logic.board import Board, Position
from logic.win_checker import GameOutcome, Win

from .config import ConsoleConfig


def format_position(position: Position, config: ConsoleConfig = ConsoleConfig()) -> str:
    """Position in the notation players type, e.g. (0, 0) -> "1A"."""
    return config.ROW_LABELS[position.row] + config.COLUMN_LABELS[position.col]


def format_board(board: Board, config: ConsoleConfig = ConsoleConfig()) -> str:
    """
    Draw the board as text.

    The first line holds the column letters, every other line starts with
    its row number:

           A B C
         1 x ▢ ▢
         2 ▢ o ▢
         3 ▢ ▢ ▢
    """
    lines = ["  " + "".join(f" {label}" for label in config.COLUMN_LABELS)]
    for label, row in zip(config.ROW_LABELS, board.rows()):
        lines.append(f" {label}" + "".join(f" {config.GLYPHS[cell]}" for cell in row))
    return "\n".join(lines) + "\n"


def format_outcome(outcome: GameOutcome, config: ConsoleConfig = ConsoleConfig()) -> Optional[str]:
    """Final result line, or None while the game is still going."""
    if isinstance(outcome, Win):
        return config.WIN.format(piece=config.GLYPHS[outcome.mark])
    if outcome.is_terminal:
        return config.DRAW
    return None


def render(board: Board, output: Callable[[str], None] = print, config: ConsoleConfig = ConsoleConfig()):
    """Print the board followed by a blank line."""
    output(format_board(board, config))

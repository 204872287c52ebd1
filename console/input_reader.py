"""
Reads a player's move from the terminal.
"""

import logging
import sys
from typing import Callable, Optional, TextIO

from logic.board import Position

from .config import ConsoleConfig

logger = logging.getLogger(__name__)


class InvalidMoveInput(ValueError):
    """Typed text that doesn't name a cell."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid move: {text!r}")


def parse_move(text: str, config: ConsoleConfig = ConsoleConfig()) -> Position:
    """
    Parse a move such as "1A" or "3c".

    Args:
        text: Row number (1-3) followed by column letter (A-C).

    Returns:
        The matching board position.

    Raises:
        InvalidMoveInput: If the text isn't a valid move.
    """
    move = text.strip()
    if len(move) != 2:
        raise InvalidMoveInput(move)

    row_label, col_label = move[0], move[1].upper()
    if row_label not in config.ROW_LABELS or col_label not in config.COLUMN_LABELS:
        raise InvalidMoveInput(move)

    return Position(config.ROW_LABELS.index(row_label), config.COLUMN_LABELS.index(col_label))


def read_move(
    prompt: Optional[Callable[[str], str]] = None,
    errors: Optional[TextIO] = None,
    config: ConsoleConfig = ConsoleConfig(),
) -> Position:
    """
    Ask for a move until the player types a valid one.

    Args:
        prompt: Function that shows a prompt and returns the typed line
            (default: input).
        errors: Stream for "try again" messages (default: stderr).

    Returns:
        The chosen position. It may still be occupied; that's for the game to decide.

    Raises:
        EOFError: If input ends before a valid move is typed.
    """
    while True:
        line = (prompt or input)(config.PROMPT)
        try:
            return parse_move(line, config)
        except InvalidMoveInput as e:
            logger.debug("Rejected input %r", line)
            print(config.INVALID_INPUT.format(text=e.text), file=errors or sys.stderr)

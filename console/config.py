"""
Console configuration for TicTacToe.
Glyphs, labels and messages shown in the terminal.
"""

from logic.board import Mark


class ConsoleConfig:
    """
    Configuration class for the console front end.
    """

    # ==================== BOARD GLYPHS ====================
    GLYPHS = {
        Mark.X: "x",
        Mark.O: "o",
        None: "▢",  # empty cell
    }

    # ==================== COORDINATES ====================
    # Moves are typed as row number then column letter, e.g. "1A"
    ROW_LABELS = "123"
    COLUMN_LABELS = "ABC"

    # ==================== MESSAGES ====================
    PROMPT = "Enter move (e.g. 1A): "
    CURRENT_PIECE = "Current piece: {piece}"
    INVALID_INPUT = "Invalid move: '{text}'. Please try again."
    OCCUPIED_CELL = "The tile at position {position} already has piece {piece} in it!"
    WIN = "{piece} wins!"
    DRAW = "Tie!"
    INTERRUPTED = "Game interrupted by user."

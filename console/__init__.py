"""
Console front end for TicTacToe.
Draws the board and reads moves in the terminal.
"""

from .config import ConsoleConfig
from .input_reader import InvalidMoveInput, parse_move, read_move
from .renderer import format_board, format_outcome, format_position, render

"""
Logic module for TicTacToe.
Handles the board, the rules, and turn order.
"""

from .board import Board, Mark, Position
from .errors import GameAlreadyOver, IllegalMove, MoveError, OccupiedCell
from .game_state import GameState, Move
from .move_validator import MoveValidator
from .win_checker import DRAW, IN_PROGRESS, Draw, InProgress, Win, WinChecker

__version__ = "1.0.0"

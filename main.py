"""
Main script for console TicTacToe.

This script ties together:
- Logic (board, game state, rules)
- Console (board renderer, move input)

Run this script to play TicTacToe with two players at one terminal!
"""

import argparse
import logging
import sys
from typing import Callable, Optional

# Logic imports
from logic.board import Board, Position
from logic.errors import IllegalMove, OccupiedCell
from logic.game_state import GameState
from logic.win_checker import GameOutcome

# Console imports
from console.config import ConsoleConfig
from console.input_reader import read_move
from console.renderer import format_outcome, format_position, render


class ConsoleGame:
    """
    Runs one game of TicTacToe in the terminal.

    Game flow:
    1. Show the board and whose turn it is
    2. Read a move from the current player
    3. Apply it, or explain why the cell is taken and ask again
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        read: Callable[[], Position] = read_move,
        show: Callable[[Board], None] = render,
        config: ConsoleConfig = ConsoleConfig(),
    ):
        """
        Initialize the game.

        Args:
            read: Returns the next move typed by a player.
            show: Draws the board.
        """
        self.read = read
        self.show = show
        self.config = config
        self.game_state = GameState()

    def play(self) -> GameOutcome:
        """Play until the game is over and return the outcome."""
        while not self.game_state.is_game_over:
            self.show(self.game_state.board)
            piece = self.config.GLYPHS[self.game_state.current_mark]
            print(self.config.CURRENT_PIECE.format(piece=piece))

            position = self.read()
            try:
                self.game_state.make_move(position)
            except OccupiedCell as e:
                print(
                    self.config.OCCUPIED_CELL.format(
                        position=format_position(e.position, self.config),
                        piece=self.config.GLYPHS[e.occupant],
                    ),
                    file=sys.stderr,
                )
            except IllegalMove as e:
                print(e, file=sys.stderr)

        self._show_game_result()
        return self.game_state.outcome

    def _show_game_result(self):
        """Show the final board and result."""
        self.show(self.game_state.board)
        print(format_outcome(self.game_state.outcome, self.config))


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Two-player TicTacToe in the terminal. Enter moves as row and column, e.g. 1A."
    )
    parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")

    game = ConsoleGame()
    try:
        game.play()
    except EOFError:
        # Input closed (Ctrl-D): end the line the prompt left open
        print()
    except KeyboardInterrupt:
        print("\n" + game.config.INTERRUPTED)

    return 0


if __name__ == "__main__":
    sys.exit(main())

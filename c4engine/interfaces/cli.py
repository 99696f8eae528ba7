"""
cli.py - Command-line front end for the Connect Four engine

This module provides a text interface that plays the human side against the
engine's random computer player, plus commands to inspect the computer's
column distribution and to benchmark the engine.
"""

import argparse
import sys
from typing import List, Optional

import numpy as np

from c4engine.debug import debug, DebugLevel
from c4engine.game.engine import GameEngine
from c4engine.utils import COLS, Player

QUIT = -1

WELCOME_MESSAGE = "Welcome to Connect 4!"
INSTRUCTION_MESSAGE = f"Enter a column (0-{COLS - 1}) to place a piece, or 'q' to quit."
COLUMN_FULL_MESSAGE = "That column is full. Choose a different column."
HUMAN_WIN_MESSAGE = "Congratulations! You've won!"
COMPUTER_WIN_MESSAGE = "Sorry, but the computer's beat you..."
DRAW_MESSAGE = "The board is full. It's a draw!"
PLAY_AGAIN_PROMPT = "Press Enter to play again, or 'q' to quit: "


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, engine: Optional[GameEngine] = None):
        """Initialize the CLI."""
        self.engine = engine
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog='c4engine',
            description='Play Connect Four against a random computer opponent')

        common = argparse.ArgumentParser(add_help=False)
        common.add_argument('--debug', action='store_true',
                            help='Enable debug mode (equivalent to --debug_level debug)')
        common.add_argument('--debug_level',
                            choices=[level.name.lower() for level in DebugLevel],
                            default='warning',
                            help='Set debug level: none (silent) through trace (most verbose)')
        common.add_argument('--log_file', type=str, default=None,
                            help='Also write log messages to this file')
        common.add_argument('--seed', type=int, default=None,
                            help="Seed for the computer player's random choices")

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', parents=[common], help='Play a game interactively')

        stats_parser = subparsers.add_parser(
            'stats', parents=[common],
            help="Show how often the computer picks each column on an empty board")
        stats_parser.add_argument('--iterations', type=int, default=1000,
                                  help='Number of computer moves to sample')

        benchmark_parser = subparsers.add_parser('benchmark', parents=[common],
                                                 help='Benchmark engine performance')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of iterations for benchmarking')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and apply the logging options."""
        self.args = self.build_parser().parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.set_from_string(self.args.debug_level)

        if getattr(self.args, 'log_file', None):
            debug.configure(log_file=self.args.log_file)

        if self.engine is None:
            self.engine = GameEngine(seed=getattr(self.args, 'seed', None))

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'stats':
            self.column_stats(self.args.iterations)
        elif self.args.command == 'benchmark':
            self.benchmark(self.args.iterations)
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def play_game(self) -> None:
        """Play rounds against the computer until the user quits."""
        print(WELCOME_MESSAGE)
        print(INSTRUCTION_MESSAGE)

        while True:
            self.engine.reset_game()
            if not self.play_round():
                print("Quitting game.")
                return

            self.announce_result()
            try:
                answer = input(PLAY_AGAIN_PROMPT).strip().lower()
            except EOFError:
                return
            if answer == 'q':
                return

    def play_round(self) -> bool:
        """
        Play one round to a win or a draw.

        Returns:
            False if the user quit in the middle of the round
        """
        engine = self.engine
        print(engine.render())

        while not engine.get_has_winner() and not engine.is_draw():
            column = self.get_human_move()
            if column is None:
                continue
            if column == QUIT:
                return False

            if not engine.place_piece(column):
                print(COLUMN_FULL_MESSAGE)
                continue

            row = engine.get_landing_row(column)
            if engine.has_won(row, column):
                print(engine.render())
                break

            engine.next_player()
            if engine.is_draw():
                break

            row, column = engine.computer_move()
            print(f"Computer plays column {column}")
            if not engine.has_won(row, column):
                engine.next_player()
            print(engine.render())

        return True

    def announce_result(self) -> None:
        winner = self.engine.get_winner()
        if winner == Player.HUMAN:
            print(HUMAN_WIN_MESSAGE)
        elif winner == Player.COMPUTER:
            print(COMPUTER_WIN_MESSAGE)
        else:
            print(DRAW_MESSAGE)

    def get_human_move(self) -> Optional[int]:
        """
        Get a move from human player input.

        Returns:
            Column index, QUIT, or None if the input was invalid
        """
        try:
            user_input = input(f"Your move (columns 0-{COLS - 1}, q): ").strip().lower()
        except EOFError:
            return QUIT

        if user_input == 'q':
            return QUIT

        try:
            move = int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or 'q'.")
            return None

        if 0 <= move < COLS:
            return move

        print(f"Column must be between 0 and {COLS - 1}.")
        return None

    def column_stats(self, iterations: int) -> np.ndarray:
        """
        Sample the computer's first move on an empty board.

        Args:
            iterations: Number of samples, with a reset before each one

        Returns:
            Array of per-column selection counts
        """
        counts = np.zeros(COLS, dtype=int)
        for _ in range(iterations):
            self.engine.reset_game()
            _, column = self.engine.computer_move()
            counts[column] += 1
        self.engine.reset_game()

        expected = iterations / COLS
        print(f"Computer column choices over {iterations} moves:")
        for column, count in enumerate(counts):
            print(f"  Column {column}: {count:5d} ({count / iterations * 100:5.1f}%)")
        if iterations:
            chi_square = float(np.sum((counts - expected) ** 2 / expected))
            print(f"Chi-square vs uniform ({COLS - 1} dof): {chi_square:.2f}")

        return counts

    def benchmark(self, iterations: int) -> None:
        """Benchmark placement, win checks and full random games."""
        print(f"Running benchmark with {iterations} iterations...")
        engine = GameEngine(seed=0)

        debug.start_timer("moves")
        moves_made = 0
        for _ in range(iterations):
            if engine.get_has_winner() or engine.is_draw():
                engine.reset_game()
            row, column = engine.computer_move()
            engine.has_won(row, column)
            moves_made += 1
        moves_time = debug.end_timer("moves", "cli")
        print(f"Making {moves_made} moves with win checks: {moves_time:.6f} seconds total, "
              f"{moves_time / max(moves_made, 1) * 1000:.6f} ms per move")

        debug.start_timer("game_simulation")
        games_played = 0
        total_moves = 0
        for _ in range(max(iterations // 10, 1)):
            engine.reset_game()
            while True:
                if engine.get_current_player() == Player.HUMAN:
                    legal = engine.legal_columns()
                    column = legal[int(engine.rng.integers(len(legal)))]
                    engine.place_piece(column)
                    row = engine.get_landing_row(column)
                else:
                    row, column = engine.computer_move()
                total_moves += 1
                if engine.has_won(row, column) or engine.is_draw():
                    break
                engine.next_player()
            games_played += 1
        simulation_time = debug.end_timer("game_simulation", "cli")
        print(f"Played {games_played} games with {total_moves} total moves: "
              f"{simulation_time:.6f} seconds total, "
              f"{simulation_time / games_played * 1000:.6f} ms per game")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())

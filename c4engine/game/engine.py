"""
engine.py - Game state and turn management for Connect Four

This module provides the GameEngine class, the single object a front end
talks to. A front end drives one move as a sequence of small calls:

    engine.place_piece(col)                 # False: column full, retry
    row = engine.get_landing_row(col)
    if not engine.has_won(row, col):
        engine.next_player()
        if not engine.is_draw():
            row, col = engine.computer_move()
            if not engine.has_won(row, col):
                engine.next_player()

Placement never evaluates wins or changes turns by itself, so each step can
be driven and tested on its own.
"""

import numpy as np
from typing import List, Optional, Tuple

from c4engine.debug import debug
from c4engine.game.board import Board
from c4engine.utils import (COLS, Player, RoundState, check_win_at_position,
                            is_valid_column, is_valid_position)


class GameError(Exception):
    """Base class for engine errors."""


class NoLegalMoveError(GameError):
    """Raised when a move is requested but every column is full."""


class RoundFinishedError(GameError):
    """Raised when a move is requested after the round has been won."""


class GameEngine:
    """
    Connect Four game state: board, current player and winner flag.

    Randomness for the computer player comes from ``rng``, a
    ``numpy.random.Generator``. Pass one in (or a ``seed``) to make the
    computer's choices reproducible.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")

        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.board = Board()
        self.reset_game()

    def reset_game(self) -> None:
        """Clear the board and winner flag and give the first turn to the human."""
        debug.debug("Resetting game", "engine")
        self.board.reset()
        self.current_player = Player.HUMAN
        self.has_winner = False
        self.winner: Optional[Player] = None
        self._landing_rows: List[Optional[int]] = [None] * COLS

    @property
    def round_state(self) -> RoundState:
        if self.has_winner:
            return RoundState.FINISHED
        return RoundState.IN_PROGRESS

    def _place(self, column: int, player: Player) -> Optional[int]:
        if self.has_winner:
            debug.debug(f"Rejected move in column {column}: round is finished", "engine")
            return None

        row = self.board.drop(column, player)
        if row is not None:
            self._landing_rows[column] = row
        return row

    def place_piece(self, column: int) -> bool:
        """
        Drop a piece for the current player into a column.

        Args:
            column: Column to place a piece (0-indexed)

        Returns:
            True if the piece was placed, False if the column is full, out of
            range, or the round is already finished. A failed call changes
            nothing.
        """
        debug.debug(f"Attempting move in column {column} for {self.current_player.name}", "engine")
        return self._place(column, self.current_player) is not None

    def get_landing_row(self, column: int) -> Optional[int]:
        """
        Row of the most recent piece placed in ``column``.

        Only meaningful right after a successful placement in that column;
        returns None if nothing has been placed there since the last reset.
        """
        if not is_valid_column(column):
            return None
        return self._landing_rows[column]

    get_top_row = get_landing_row

    def has_won(self, row: int, column: int) -> bool:
        """
        Check whether the piece at (row, column) completes a run of four.

        The four axes through the cell are scanned outward in both directions.
        A winning result also records the winner and finishes the round.

        Args:
            row: Row index of the piece just placed
            column: Column index of the piece just placed

        Returns:
            True if the piece is part of a run of CONNECT_N or more
        """
        if not is_valid_position(row, column):
            return False

        if not check_win_at_position(self.board.grid, row, column):
            return False

        self.has_winner = True
        self.winner = self.board.get_cell(row, column)
        debug.info(f"{self.winner.name} wins with the piece at ({row}, {column})", "engine")
        return True

    def computer_move(self) -> Tuple[int, int]:
        """
        Drop a computer piece into a uniformly random non-full column.

        Returns:
            (row, column) of the placed piece

        Raises:
            RoundFinishedError: the round has already been won
            NoLegalMoveError: every column is full
        """
        if self.has_winner:
            raise RoundFinishedError("The round is finished; reset the game first")

        legal = self.board.legal_columns()
        if not legal:
            raise NoLegalMoveError("Every column is full")

        column = legal[int(self.rng.integers(len(legal)))]
        row = self._place(column, Player.COMPUTER)
        debug.debug(f"Computer plays column {column}, lands in row {row}", "engine")
        return row, column

    def get_current_player(self) -> Player:
        return self.current_player

    def next_player(self) -> None:
        """Hand the turn to the other player."""
        self.current_player = self.current_player.other()
        debug.trace(f"Switching to {self.current_player.name}", "engine")

    def get_has_winner(self) -> bool:
        return self.has_winner

    def get_winner(self) -> Optional[Player]:
        return self.winner

    def is_draw(self) -> bool:
        """True when the board is full and nobody has won."""
        return not self.has_winner and self.board.is_full()

    def legal_columns(self) -> List[int]:
        """Columns that can still take a piece."""
        if self.has_winner:
            return []
        return self.board.legal_columns()

    def get_fill_count(self, column: int) -> int:
        return self.board.get_fill_count(column)

    def get_board(self) -> np.ndarray:
        """Copy of the board grid."""
        return self.board.get_state()

    def render(self) -> str:
        return self.board.render()

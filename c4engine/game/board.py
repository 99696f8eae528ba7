"""
board.py - Board representation for the Connect Four engine

This module implements the Board class which stores the 6x7 grid together
with the per-column fill counts, so that move legality and the landing row
of a dropped piece are both known without scanning the column.
"""

import numpy as np
from typing import List, Optional

from c4engine.debug import debug
from c4engine.utils import (ROWS, COLS, EMPTY, Player, is_valid_column,
                            render_board_ascii)


class Board:
    """
    Represents a Connect Four game board.

    Row 0 is the top row. Pieces fall to the lowest empty row of a column;
    ``fill_counts[col]`` is the number of pieces already in that column.
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        debug.trace("Initializing new Board", "board")
        self.reset()

    def reset(self):
        """Reset the board to an empty state."""
        self.grid = np.full((ROWS, COLS), EMPTY, dtype=np.int8)
        self.fill_counts = np.zeros(COLS, dtype=np.int8)

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same state
        """
        new_board = Board()
        new_board.grid = self.grid.copy()
        new_board.fill_counts = self.fill_counts.copy()
        return new_board

    def is_column_full(self, column: int) -> bool:
        return int(self.fill_counts[column]) >= ROWS

    def can_drop(self, column: int) -> bool:
        """
        Check if a piece can be dropped into a column.

        Args:
            column: The column to place a piece (0-indexed)

        Returns:
            True if the column exists and is not full, False otherwise
        """
        if not is_valid_column(column):
            debug.debug(f"Invalid drop: column {column} out of bounds", "board")
            return False

        if self.is_column_full(column):
            debug.debug(f"Invalid drop: column {column} is full", "board")
            return False

        return True

    def next_free_row(self, column: int) -> Optional[int]:
        """Row a piece dropped into ``column`` would land in, or None when full."""
        if self.is_column_full(column):
            return None
        return ROWS - 1 - int(self.fill_counts[column])

    def drop(self, column: int, player: Player) -> Optional[int]:
        """
        Drop a piece for ``player`` into the lowest empty row of a column.

        Args:
            column: The column to place a piece (0-indexed)
            player: Owner of the new piece

        Returns:
            The row the piece landed in, or None if the drop was rejected
        """
        if not self.can_drop(column):
            return None

        row = self.next_free_row(column)
        self.grid[row, column] = player.value
        self.fill_counts[column] += 1
        debug.trace(f"Placed {player.name} piece at ({row}, {column})", "board")
        return row

    def get_cell(self, row: int, column: int) -> Optional[Player]:
        """Owner of a cell, or None when it is empty."""
        value = int(self.grid[row, column])
        if value == EMPTY:
            return None
        return Player(value)

    def get_fill_count(self, column: int) -> int:
        return int(self.fill_counts[column])

    def legal_columns(self) -> List[int]:
        """
        Get a list of columns where a piece can still be placed.

        Returns:
            List of column indices, in ascending order
        """
        return [col for col in range(COLS) if not self.is_column_full(col)]

    def is_full(self) -> bool:
        """True when every column holds ROWS pieces."""
        return bool(np.all(self.fill_counts >= ROWS))

    def is_empty(self) -> bool:
        return not np.any(self.fill_counts)

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the 2D grid
        """
        return self.grid.copy()

    def render(self) -> str:
        """Render the board as a string."""
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()

"""
utils.py - Constants, enumerations and grid helpers for the Connect Four engine

This module holds the fixed board geometry, the player and round-state
enumerations, and the stateless grid functions (bounds checks, run counting,
win detection, ASCII rendering) shared by the board, the engine and the
interfaces.
"""

from enum import Enum, auto
from typing import Tuple
import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
EMPTY = 0      # Cell value for an unoccupied cell


class Player(Enum):
    """Enumeration of the two sides. The value doubles as the cell marker."""
    HUMAN = 1
    COMPUTER = 2

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.HUMAN:
            return Player.COMPUTER
        return Player.HUMAN

    def __str__(self):
        if self == Player.HUMAN:
            return "X"
        return "O"


class RoundState(Enum):
    """State of the current round."""
    IN_PROGRESS = auto()
    FINISHED = auto()


class Direction(Enum):
    """Enumeration representing the four alignment axes."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()  # Diagonal from bottom-left to top-right
    DIAGONAL_DOWN = auto()  # Diagonal from top-left to bottom-right


# Direction vectors (row, col) for each axis
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (-1, 1),
    Direction.DIAGONAL_DOWN: (1, 1)
}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def is_valid_column(col: int) -> bool:
    """Check if a column index addresses one of the board columns."""
    return 0 <= col < COLS


def count_run(grid: np.ndarray, row: int, col: int, vector: Tuple[int, int]) -> int:
    """
    Count the contiguous same-owner cells through (row, col) along one axis.

    The walk goes outward in both directions and stops at the board edge,
    an empty cell or an opponent cell. The cell itself counts as 1; an
    empty start cell yields 0.

    Args:
        grid: The game board
        row: Row index of the start cell
        col: Column index of the start cell
        vector: (row step, column step) of the axis

    Returns:
        Length of the run through the cell
    """
    owner = grid[row, col]
    if owner == EMPTY:
        return 0

    dr, dc = vector
    count = 1

    # Check in the positive direction
    r, c = row + dr, col + dc
    while is_valid_position(r, c) and grid[r, c] == owner:
        count += 1
        r += dr
        c += dc

    # Check in the negative direction
    r, c = row - dr, col - dc
    while is_valid_position(r, c) and grid[r, c] == owner:
        count += 1
        r -= dr
        c -= dc

    return count


def check_win_at_position(grid: np.ndarray, row: int, col: int) -> bool:
    """
    Check if the piece at the given position is part of a winning run.

    Args:
        grid: The game board
        row: Row index where piece was placed
        col: Column index where piece was placed

    Returns:
        True if any axis through the cell holds CONNECT_N or more, False otherwise
    """
    if not is_valid_position(row, col):
        return False

    for vector in DIRECTION_VECTORS.values():
        if count_run(grid, row, col, vector) >= CONNECT_N:
            return True

    return False


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the board as ASCII art.

    Args:
        grid: The game board

    Returns:
        ASCII representation of the board
    """
    result = []
    result.append("|" + "-" * (COLS * 2 - 1) + "|")

    for row in range(ROWS):
        cells = []
        for col in range(COLS):
            cell = grid[row, col]
            if cell == EMPTY:
                cells.append(" ")
            else:
                cells.append(str(Player(int(cell))))
        result.append("|" + " ".join(cells) + "|")

    result.append("|" + "-" * (COLS * 2 - 1) + "|")
    result.append("|" + " ".join(str(i) for i in range(COLS)) + "|")

    return "\n".join(result)

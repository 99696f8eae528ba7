"""
Tests for the grid helpers in c4engine.utils
"""

import numpy as np
import pytest

from c4engine.utils import (ROWS, COLS, EMPTY, Player, DIRECTION_VECTORS, Direction,
                            is_valid_position, count_run, check_win_at_position,
                            render_board_ascii)


def empty_grid():
    return np.full((ROWS, COLS), EMPTY, dtype=np.int8)


class TestPlayer:
    """Player enum"""

    def test_other(self):
        assert Player.HUMAN.other() == Player.COMPUTER
        assert Player.COMPUTER.other() == Player.HUMAN

    def test_values_are_cell_markers(self):
        assert Player.HUMAN.value == 1
        assert Player.COMPUTER.value == 2
        assert EMPTY == 0


class TestPositions:
    """Bounds checks"""

    @pytest.mark.parametrize("row,col", [(0, 0), (5, 6), (3, 3)])
    def test_valid(self, row, col):
        assert is_valid_position(row, col) is True

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (6, 0), (0, 7)])
    def test_invalid(self, row, col):
        assert is_valid_position(row, col) is False


class TestCountRun:
    """Run counting along one axis"""

    def test_empty_cell_has_no_run(self):
        assert count_run(empty_grid(), 5, 0, (0, 1)) == 0

    def test_single_piece(self):
        grid = empty_grid()
        grid[5, 3] = Player.HUMAN.value
        for vector in DIRECTION_VECTORS.values():
            assert count_run(grid, 5, 3, vector) == 1

    def test_counts_both_directions(self):
        grid = empty_grid()
        grid[5, 1:4] = Player.HUMAN.value
        assert count_run(grid, 5, 2, DIRECTION_VECTORS[Direction.HORIZONTAL]) == 3

    def test_stops_at_opponent(self):
        grid = empty_grid()
        grid[5, 0:2] = Player.HUMAN.value
        grid[5, 2] = Player.COMPUTER.value
        grid[5, 3] = Player.HUMAN.value
        assert count_run(grid, 5, 1, DIRECTION_VECTORS[Direction.HORIZONTAL]) == 2

    def test_does_not_wrap_around_edges(self):
        grid = empty_grid()
        grid[5, 0:3] = Player.HUMAN.value
        grid[5, COLS - 1] = Player.HUMAN.value
        assert count_run(grid, 5, 0, DIRECTION_VECTORS[Direction.HORIZONTAL]) == 3


class TestCheckWin:
    """Win detection on a raw grid"""

    def test_horizontal(self):
        grid = empty_grid()
        grid[ROWS - 1, 0:4] = Player.HUMAN.value
        assert check_win_at_position(grid, ROWS - 1, 0)

    def test_vertical(self):
        grid = empty_grid()
        grid[2:6, 4] = Player.COMPUTER.value
        assert check_win_at_position(grid, 2, 4)

    def test_diagonal_down(self):
        grid = empty_grid()
        for i in range(4):
            grid[i, i] = Player.COMPUTER.value
        assert check_win_at_position(grid, 3, 3)

    def test_diagonal_up(self):
        grid = empty_grid()
        for i in range(4):
            grid[ROWS - 1 - i, i] = Player.HUMAN.value
        assert check_win_at_position(grid, ROWS - 1, 0)

    def test_three_is_not_a_win(self):
        grid = empty_grid()
        grid[ROWS - 1, 0:3] = Player.HUMAN.value
        assert not check_win_at_position(grid, ROWS - 1, 2)

    def test_out_of_bounds(self):
        assert not check_win_at_position(empty_grid(), ROWS, 0)


def test_render_board_ascii():
    grid = empty_grid()
    grid[ROWS - 1, 0] = Player.HUMAN.value
    grid[ROWS - 1, 1] = Player.COMPUTER.value

    lines = render_board_ascii(grid).split("\n")

    assert len(lines) == ROWS + 3
    assert lines[ROWS] == "|X O          |"
    assert lines[-1] == "|0 1 2 3 4 5 6|"

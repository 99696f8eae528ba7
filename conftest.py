"""
Shared pytest fixtures for the Connect Four engine tests
"""

from unittest.mock import Mock

import pytest

from c4engine.debug import debug, DebugLevel
from c4engine.game.engine import GameEngine
from c4engine.utils import Player


@pytest.fixture(autouse=True)
def reset_debug():
    """Restore the logging singleton after every test."""
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])


@pytest.fixture
def engine():
    """Engine with a fixed seed."""
    return GameEngine(seed=1234)


@pytest.fixture
def first_column_rng():
    """Random source that always picks the first legal column."""
    rng = Mock()
    rng.integers.return_value = 0
    return rng


def play_as(engine, player, column):
    """Place a piece for ``player`` regardless of whose turn it is; returns the row."""
    if engine.get_current_player() != player:
        engine.next_player()
    assert engine.place_piece(column)
    return engine.get_landing_row(column)

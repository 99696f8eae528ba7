"""
c4engine.game - Core game mechanics for Connect Four

This package contains the board representation, the game engine that
manages turns and winners, and a Gymnasium wrapper around the engine.
"""

from c4engine.game.board import Board
from c4engine.game.engine import GameEngine, GameError, NoLegalMoveError, RoundFinishedError
from c4engine.game.env import ConnectFourEnv

__all__ = ['Board', 'GameEngine', 'GameError', 'NoLegalMoveError',
           'RoundFinishedError', 'ConnectFourEnv']

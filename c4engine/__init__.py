"""
c4engine - Connect Four game engine

This package provides the game logic for a human-versus-computer Connect
Four game: board storage, move legality, win detection, turn management and
a random computer opponent, plus a text front end and a Gymnasium wrapper.
"""

# Version number
__version__ = '0.1.0'

"""
c4engine.interfaces - Front ends for the Connect Four engine

This package contains the text-mode front end that drives the engine
the way a graphical one would.
"""

# Don't import anything here to avoid circular imports
__all__ = []

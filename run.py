#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine

    Examples:

    # Play Connect Four against the random computer player
    python run.py play

    # Reproducible computer moves with detailed logging
    python run.py play --seed 42 --debug

    # Check the computer's column distribution over 5000 moves
    python run.py stats --iterations 5000

    # Benchmark performance with 5000 iterations
    python run.py benchmark --iterations 5000
"""

import sys

from c4engine.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())

"""
env.py - Gymnasium environment around the Connect Four engine

The agent plays the human side. Each step drops the agent's piece and, if the
game goes on, lets the engine answer with its random computer move, following
the same place / check / switch sequence a front end uses.
"""

import numpy as np
import gymnasium as gym
from gymnasium import spaces
from typing import Dict, Optional, Tuple

from c4engine.debug import debug
from c4engine.game.engine import GameEngine
from c4engine.utils import ROWS, COLS, Player


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Observations are the raw 6x7 grid (0 empty, 1 agent, 2 computer).
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    reward_win = 1.0
    reward_lose = -1.0
    reward_draw = 0.0
    reward_invalid_move = -0.5
    reward_step = 0.0

    def __init__(self, render_mode: Optional[str] = None):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: Mode for rendering the environment
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.action_space = spaces.Discrete(COLS)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(ROWS, COLS), dtype=np.int8
        )

        self.render_mode = render_mode
        self.engine = GameEngine(rng=self.np_random)

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to initial state.

        Args:
            seed: Seed for the computer player's random choices
            options: Unused

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)
        debug.debug(f"Resetting environment (seed={seed})", "env")

        self.engine.rng = self.np_random
        self.engine.reset_game()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop the agent's piece and play the computer's reply.

        Args:
            action: Column to place a piece (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        column = int(action)
        engine = self.engine

        if not engine.place_piece(column):
            debug.debug(f"Invalid action: {column}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, False, info

        reward, terminated = self.reward_step, False
        row = engine.get_landing_row(column)

        if engine.has_won(row, column):
            reward, terminated = self.reward_win, True
        else:
            engine.next_player()
            if engine.is_draw():
                reward, terminated = self.reward_draw, True
            else:
                row, column = engine.computer_move()
                if engine.has_won(row, column):
                    reward, terminated = self.reward_lose, True
                else:
                    engine.next_player()
                    if engine.is_draw():
                        reward, terminated = self.reward_draw, True

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        """
        Render the current state of the environment.

        Returns:
            The ASCII board for ``ascii`` mode, None otherwise
        """
        if self.render_mode == "ascii":
            return self.engine.render()

        if self.render_mode == "human":
            print(self.engine.render())

        return None

    def _get_observation(self) -> np.ndarray:
        return self.engine.get_board()

    def _get_info(self) -> Dict:
        legal = self.engine.legal_columns()
        winner = self.engine.get_winner()

        return {
            'valid_moves': legal,
            'num_valid_moves': len(legal),
            'current_player': self.engine.get_current_player().value,
            'round_state': self.engine.round_state.name,
            'winner': winner.name if winner is not None else None,
            'draw': self.engine.is_draw(),
            'agent': Player.HUMAN.name,
        }

from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from mancala.core import (
    BOARD_SLOTS,
    PITS_PER_SIDE,
    TOTAL_STONES,
    GameOutcome,
    PlayerId,
    format_board,
    legal_action_mask,
    new_game_state,
    play_turn,
)
from mancala.validation import validate_board


class MancalaEnv(gym.Env):
    """Two-player Mancala seen from whichever player is due to move.

    Observations are the perspective-relative board; actions are pits 0-5.
    The reward goes to the player who made the final move.
    """

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        self.observation_space = spaces.Box(low=0, high=TOTAL_STONES, shape=(BOARD_SLOTS,), dtype=np.int16)
        self.action_space = spaces.Discrete(PITS_PER_SIDE)

        self._state = new_game_state()
        self._last_info: Dict[str, object] = {}

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        first = options.get("first_player", PlayerId.ONE) if options else PlayerId.ONE
        self._state = new_game_state(PlayerId(first))
        observation = self._build_observation()
        info = self._build_info()
        self._last_info = info
        return observation, info

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")
        if self._state.is_terminal:
            raise ValueError("Cannot step a finished game; call reset().")

        legal_mask = self.legal_action_mask()
        if self._enforce_legal and not legal_mask[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        mover = self._state.current_player
        play_turn(self._state, int(action_index))
        validate_board(self._state.board)

        observation = self._build_observation()
        info = self._build_info()
        self._last_info = info

        reward = self._compute_reward(self._state.outcome, mover)
        terminated = self._state.is_terminal
        truncated = False

        return observation, reward, terminated, truncated, info

    def legal_action_mask(self) -> np.ndarray:
        return legal_action_mask(self._state.board)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._render_ascii()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> np.ndarray:
        return self._state.board.copy()

    def _build_info(self) -> Dict[str, object]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "current_player": int(self._state.current_player),
        }

    def _compute_reward(self, outcome: GameOutcome, mover: PlayerId) -> float:
        if outcome.winner is None:
            return 0.0
        return 1.0 if outcome.winner == mover else -1.0

    def _render_ascii(self) -> str:
        header = f"Turn {self._state.turn_number}, Player {int(self._state.current_player)}"
        return f"{header}\n{format_board(self._state.board)}"

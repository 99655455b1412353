from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from mancala.core import GameOutcome, GameState, PlayerId
from mancala.env import MancalaEnv
from mancala.policies import Policy, select_action


@dataclass
class EvaluationResult:
    games_played: int
    player_one_wins: int
    player_two_wins: int
    draws: int
    average_length: float

    def winrate_player_one(self) -> float:
        return self.player_one_wins / max(1, self.games_played)

    def winrate_player_two(self) -> float:
        return self.player_two_wins / max(1, self.games_played)


def evaluate_policies(
    policy_one: Policy,
    policy_two: Policy,
    *,
    episodes: int,
    env_factory: Optional[Callable[[], MancalaEnv]] = None,
    temperature: float = 1.0,
    rng: Optional[np.random.Generator] = None,
) -> EvaluationResult:
    env_factory = env_factory or MancalaEnv
    rng = rng or np.random.default_rng()

    player_one_wins = 0
    player_two_wins = 0
    draws = 0
    total_moves = 0

    for _ in range(episodes):
        env = env_factory()
        obs, info = env.reset()
        terminated = False
        moves = 0

        while not terminated:
            state_snapshot: GameState = env._state.copy()
            legal_mask = info["legal_action_mask"]
            policy = policy_one if state_snapshot.current_player == PlayerId.ONE else policy_two
            probs = policy.act(state_snapshot, legal_mask) * legal_mask
            if probs.sum() <= 0:
                probs = legal_mask.astype(np.float32)
            action_index = select_action(probs, temperature, rng)
            obs, reward, terminated, truncated, info = env.step(action_index)
            moves += 1
            if truncated:
                terminated = True

        total_moves += moves
        outcome = env._state.outcome
        if outcome == GameOutcome.PLAYER_ONE_WIN:
            player_one_wins += 1
        elif outcome == GameOutcome.PLAYER_TWO_WIN:
            player_two_wins += 1
        else:
            draws += 1

    average_length = total_moves / max(1, episodes)
    return EvaluationResult(
        games_played=episodes,
        player_one_wins=player_one_wins,
        player_two_wins=player_two_wins,
        draws=draws,
        average_length=average_length,
    )

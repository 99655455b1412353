from __future__ import annotations

from typing import Optional

import numpy as np

from mancala.core import PITS_PER_SIDE, GameState
from mancala.search import AlphaBetaSearch, SearchConfig


class Policy:
    """Policy interface producing probabilities over the six pits of the mover."""

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class RandomPolicy(Policy):
    """Uniform over legal pits; sampling happens in select_action."""

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        logits = legal_mask.astype(np.float64)
        if logits.sum() == 0:
            return logits.astype(np.float32)
        return (logits / logits.sum()).astype(np.float32)


class AlphaBetaPolicy(Policy):
    """Puts all probability on the pit chosen by the alpha-beta search."""

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.search = AlphaBetaSearch(config)

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        probs = np.zeros(PITS_PER_SIDE, dtype=np.float32)
        pit = self.search.choose_move(state.board)
        if pit is not None and legal_mask[pit]:
            probs[pit] = 1.0
        return probs


def select_action(
    probabilities: np.ndarray,
    temperature: float,
    rng: np.random.Generator,
) -> int:
    if probabilities.sum() == 0:
        raise ValueError("Policy produced zero probability over legal actions.")
    probs = probabilities.astype(np.float64, copy=True)
    if temperature <= 1e-6:
        return int(np.argmax(probs))
    adjusted = probs ** (1.0 / temperature)
    adjusted /= adjusted.sum()
    return int(rng.choice(len(adjusted), p=adjusted))

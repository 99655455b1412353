from __future__ import annotations

from typing import Sequence

from mancala.core import OPPONENT_STORE_INDEX, PITS_PER_SIDE, STORE_INDEX

STORE_WEIGHT = 2


def evaluate(board: Sequence[int]) -> int:
    """Score the board for the owner of slots 0-6.

    Banked stones count double compared to stones still in play.
    """
    own = sum(board[:PITS_PER_SIDE]) + STORE_WEIGHT * board[STORE_INDEX]
    theirs = sum(board[STORE_INDEX + 1:OPPONENT_STORE_INDEX]) + STORE_WEIGHT * board[OPPONENT_STORE_INDEX]
    return int(own - theirs)

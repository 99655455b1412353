from __future__ import annotations

import numpy as np

from mancala.core import BOARD_SLOTS, TOTAL_STONES, MancalaError


class BoardInvariantError(MancalaError, ValueError):
    pass


def validate_board(board: np.ndarray, expected_total: int = TOTAL_STONES) -> None:
    if board.shape != (BOARD_SLOTS,):
        raise BoardInvariantError(f"board must have shape ({BOARD_SLOTS},), got {board.shape}")
    if (board < 0).any():
        raise BoardInvariantError("board contains negative stone counts")
    total = int(board.sum())
    if total != expected_total:
        raise BoardInvariantError(f"board holds {total} stones, expected {expected_total}")

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import numpy as np

from .errors import GameOverError, IllegalMoveError
from .state import (
    BOARD_SLOTS,
    OPPONENT_STORE_INDEX,
    PITS_PER_SIDE,
    STORE_INDEX,
    BoardArray,
    GameOutcome,
    GameState,
    MoveRecord,
    flip_perspective,
)

# side 0 owns pits 0-5 and store 6, side 1 owns pits 7-12 and store 13
SIDE_PITS: Tuple[range, range] = (range(0, PITS_PER_SIDE), range(STORE_INDEX + 1, OPPONENT_STORE_INDEX))
SIDE_STORES: Tuple[int, int] = (STORE_INDEX, OPPONENT_STORE_INDEX)

SowCallback = Callable[[int], None]


@dataclass(frozen=True)
class SowResult:
    landing_index: Optional[int]
    ended_in_store: bool
    captured: int = 0


def opposite_pit(index: int) -> int:
    return 12 - index


def sow(
    board: BoardArray,
    pit: int,
    *,
    side: int = 0,
    on_sow: Optional[SowCallback] = None,
) -> SowResult:
    """Sow the stones of ``pit`` in place and resolve a capture.

    ``side`` selects whose half of the board is moving: 0 for pits 0-5 (the
    perspective-relative mover), 1 for pits 7-12. The opponent's store is
    skipped without consuming a stone. Sowing from an empty pit changes
    nothing and reports the move as ending in the store.
    """
    own_pits, own_store, skipped = _side_layout(side)
    pit = int(pit)
    if pit not in own_pits:
        raise IllegalMoveError(f"Pit {pit} does not belong to side {side}.")

    stones = int(board[pit])
    if stones < 1:
        return SowResult(landing_index=None, ended_in_store=True)

    board[pit] = 0
    pointer = pit
    while stones > 0:
        pointer = (pointer + 1) % BOARD_SLOTS
        if pointer == skipped:
            continue
        board[pointer] += 1
        stones -= 1
        if on_sow is not None:
            on_sow(pointer)

    captured = 0
    if pointer in own_pits and board[pointer] == 1:
        opposite = opposite_pit(pointer)
        if board[opposite] > 0:
            captured = int(board[opposite]) + 1
            board[own_store] += captured
            board[pointer] = 0
            board[opposite] = 0

    return SowResult(landing_index=pointer, ended_in_store=pointer == own_store, captured=captured)


def apply_move(
    board: BoardArray,
    pit: int,
    *,
    side: int = 0,
    on_sow: Optional[SowCallback] = None,
) -> bool:
    """Apply a sowing move in place; returns True when the mover goes again."""
    return sow(board, pit, side=side, on_sow=on_sow).ended_in_store


def legal_pits(board: BoardArray, side: int = 0) -> List[int]:
    own_pits, _, _ = _side_layout(side)
    return [i for i in own_pits if board[i] > 0]


def legal_action_mask(board: BoardArray) -> np.ndarray:
    return (board[:PITS_PER_SIDE] > 0).astype(np.int8)


def row_empty(board: BoardArray, side: int) -> bool:
    own_pits = SIDE_PITS[side]
    return not any(board[own_pits.start:own_pits.stop])


def is_game_over(board: BoardArray) -> bool:
    return row_empty(board, 0) or row_empty(board, 1)


def sweep_remaining(board: BoardArray) -> BoardArray:
    """Return a copy with the non-empty row collected into its own store.

    When both rows are empty there is nothing to sweep.
    """
    swept = board.copy()
    empties = (row_empty(board, 0), row_empty(board, 1))
    if empties[0] == empties[1]:
        return swept
    side = 1 if empties[0] else 0
    own_pits = SIDE_PITS[side]
    swept[SIDE_STORES[side]] += swept[own_pits.start:own_pits.stop].sum()
    swept[own_pits.start:own_pits.stop] = 0
    return swept


def check_for_win(state: GameState) -> bool:
    """End the game when either row is empty.

    Sweeps the remaining row into its store and decides the outcome in terms
    of absolute player ids, so it must run before the board is flipped.
    Calling it again on a finished game changes nothing.
    """
    if state.is_terminal:
        return True
    if not is_game_over(state.board):
        return False

    state.board = sweep_remaining(state.board)
    state.outcome = _resolve_outcome(state)
    return True


def pass_turn(state: GameState) -> None:
    state.board = flip_perspective(state.board)
    state.current_player = state.current_player.other()


def play_turn(state: GameState, pit: int, *, on_sow: Optional[SowCallback] = None) -> MoveRecord:
    """Play ``pit`` for the player due to move and resolve the turn.

    Counts the turn, sows, checks for the end of the game and, unless the
    move earned a bonus turn, hands the board to the other player.
    """
    if state.is_terminal:
        raise GameOverError("The game is over; no further moves are accepted.")
    player = state.current_player
    result = sow(state.board, pit, on_sow=on_sow)
    state.turn_number += 1
    record = MoveRecord(
        player=player,
        pit=int(pit),
        landing_index=result.landing_index,
        ended_in_store=result.ended_in_store,
        captured=result.captured,
    )
    state.last_move = record
    if not check_for_win(state) and not result.ended_in_store:
        pass_turn(state)
    return record


def _resolve_outcome(state: GameState) -> GameOutcome:
    own = state.board[STORE_INDEX]
    theirs = state.board[OPPONENT_STORE_INDEX]
    if own > theirs:
        return GameOutcome.win_for(state.current_player)
    if own < theirs:
        return GameOutcome.win_for(state.other_player)
    return GameOutcome.DRAW


def _side_layout(side: int) -> Tuple[range, int, int]:
    if side not in (0, 1):
        raise ValueError(f"side must be 0 or 1, got {side!r}")
    return SIDE_PITS[side], SIDE_STORES[side], SIDE_STORES[1 - side]

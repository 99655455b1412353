"""Core game logic for Mancala."""

from .errors import GameOverError, IllegalMoveError, MancalaError
from .state import (
    BOARD_SLOTS,
    OPPONENT_STORE_INDEX,
    PITS_PER_SIDE,
    STARTING_STONES,
    STORE_INDEX,
    TOTAL_STONES,
    BoardSnapshot,
    GameOutcome,
    GameState,
    MoveRecord,
    PlayerId,
    as_board,
    flip_perspective,
    format_board,
    initial_board,
    new_game_state,
)
from .rules import (
    SowResult,
    apply_move,
    check_for_win,
    is_game_over,
    legal_action_mask,
    legal_pits,
    opposite_pit,
    pass_turn,
    play_turn,
    sow,
    sweep_remaining,
)

__all__ = [
    "MancalaError",
    "IllegalMoveError",
    "GameOverError",
    "BOARD_SLOTS",
    "OPPONENT_STORE_INDEX",
    "PITS_PER_SIDE",
    "STARTING_STONES",
    "STORE_INDEX",
    "TOTAL_STONES",
    "BoardSnapshot",
    "GameOutcome",
    "GameState",
    "MoveRecord",
    "PlayerId",
    "as_board",
    "flip_perspective",
    "format_board",
    "initial_board",
    "new_game_state",
    "SowResult",
    "apply_move",
    "check_for_win",
    "is_game_over",
    "legal_action_mask",
    "legal_pits",
    "opposite_pit",
    "pass_turn",
    "play_turn",
    "sow",
    "sweep_remaining",
]

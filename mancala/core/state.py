from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

BoardArray = NDArray[np.int16]

PITS_PER_SIDE = 6
BOARD_SLOTS = 14
STORE_INDEX = 6
OPPONENT_STORE_INDEX = 13
STARTING_STONES = 4
TOTAL_STONES = 2 * PITS_PER_SIDE * STARTING_STONES


class PlayerId(IntEnum):
    ONE = 1
    TWO = 2

    def other(self) -> "PlayerId":
        return PlayerId.TWO if self == PlayerId.ONE else PlayerId.ONE


class GameOutcome(Enum):
    ONGOING = "ongoing"
    DRAW = "draw"
    PLAYER_ONE_WIN = "player_one_win"
    PLAYER_TWO_WIN = "player_two_win"

    @property
    def winner(self) -> Optional[PlayerId]:
        if self == GameOutcome.PLAYER_ONE_WIN:
            return PlayerId.ONE
        if self == GameOutcome.PLAYER_TWO_WIN:
            return PlayerId.TWO
        return None

    @staticmethod
    def win_for(player: PlayerId) -> "GameOutcome":
        player = PlayerId(player)
        return GameOutcome.PLAYER_ONE_WIN if player == PlayerId.ONE else GameOutcome.PLAYER_TWO_WIN


@dataclass(frozen=True)
class MoveRecord:
    player: PlayerId
    pit: int
    landing_index: Optional[int] = None
    ended_in_store: bool = False
    captured: int = 0


@dataclass(frozen=True)
class BoardSnapshot:
    pits: Tuple[int, ...]
    current_player: PlayerId
    outcome: GameOutcome
    turn_number: int


def initial_board() -> BoardArray:
    board = np.full(BOARD_SLOTS, STARTING_STONES, dtype=np.int16)
    board[STORE_INDEX] = 0
    board[OPPONENT_STORE_INDEX] = 0
    return board


def as_board(values) -> BoardArray:
    board = np.asarray(values, dtype=np.int16).copy()
    if board.shape != (BOARD_SLOTS,):
        raise ValueError(f"board must have {BOARD_SLOTS} slots, got shape {board.shape}")
    return board


def flip_perspective(board: BoardArray) -> BoardArray:
    """Return a new board with the two seven-slot halves swapped."""
    half = BOARD_SLOTS // 2
    return np.concatenate((board[half:], board[:half])).astype(np.int16, copy=False)


@dataclass
class GameState:
    board: BoardArray  # shape (14,), perspective of current_player
    current_player: PlayerId = PlayerId.ONE
    turn_number: int = 0
    outcome: GameOutcome = GameOutcome.ONGOING
    last_move: Optional[MoveRecord] = None

    def __post_init__(self) -> None:
        self.current_player = PlayerId(self.current_player)

    def copy(self) -> "GameState":
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            turn_number=self.turn_number,
            outcome=self.outcome,
            last_move=self.last_move,
        )

    @property
    def is_terminal(self) -> bool:
        return self.outcome != GameOutcome.ONGOING

    @property
    def other_player(self) -> PlayerId:
        return self.current_player.other()

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            pits=tuple(int(v) for v in self.board),
            current_player=self.current_player,
            outcome=self.outcome,
            turn_number=self.turn_number,
        )

    def __repr__(self) -> str:
        return (
            f"GameState(current={self.current_player.name}, outcome={self.outcome.value}, "
            f"turn={self.turn_number})\n{format_board(self.board)}"
        )


def new_game_state(first_player: PlayerId = PlayerId.ONE) -> GameState:
    return GameState(board=initial_board(), current_player=PlayerId(first_player))


def format_board(board: BoardArray) -> str:
    """Render the board as text: opponent row on top, mover's row below."""
    top = " ".join(f"{int(board[i]):2d}" for i in range(12, 6, -1))
    bottom = " ".join(f"{int(board[i]):2d}" for i in range(0, 6))
    middle = f"{int(board[13]):2d}" + " " * (len(top) + 4) + f"{int(board[6]):2d}"
    return f"    {top}\n{middle}\n    {bottom}"

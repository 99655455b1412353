from __future__ import annotations

import logging
from typing import Callable, List, Optional

import numpy as np

from mancala.config import GameConfig
from mancala.core import (
    PITS_PER_SIDE,
    BoardSnapshot,
    GameOverError,
    GameState,
    IllegalMoveError,
    MoveRecord,
    PlayerId,
    check_for_win,
    new_game_state,
    pass_turn,
    play_turn,
)
from mancala.search import AlphaBetaSearch
from mancala.validation import validate_board

logger = logging.getLogger(__name__)

Listener = Callable[[BoardSnapshot], None]


class TurnController:
    """Owns one game and drives it from move requests to a final outcome.

    The board is always stored from the perspective of the player due to
    move, so submitted pits are 0-5. When the computer is due it moves
    immediately, repeating on bonus turns, before control returns.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        search: Optional[AlphaBetaSearch] = None,
        state: Optional[GameState] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.search = search or AlphaBetaSearch(self.config.search_config())
        self._listeners: List[Listener] = []
        self._state = state.copy() if state is not None else new_game_state()
        self.history: List[MoveRecord] = []
        self._run_computer_turns()

    # ------------------------------------------------------------------
    @property
    def state(self) -> GameState:
        return self._state.copy()

    @property
    def current_player(self) -> PlayerId:
        return self._state.current_player

    @property
    def is_over(self) -> bool:
        return self._state.is_terminal

    def snapshot(self) -> BoardSnapshot:
        return self._state.snapshot()

    def is_computer(self, player: PlayerId) -> bool:
        return self.config.ai_player is not None and PlayerId(player) == self.config.ai_player

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def reset(self) -> None:
        self._state = new_game_state()
        self.history = []
        self._notify()
        self._run_computer_turns()

    def submit_move(self, pit: int) -> MoveRecord:
        """Play ``pit`` for the human player due to move.

        Any computer replies are played before this returns.
        """
        if self._state.is_terminal:
            raise GameOverError("The game is over; no further moves are accepted.")
        if isinstance(pit, bool) or not isinstance(pit, (int, np.integer)) or not 0 <= pit < PITS_PER_SIDE:
            raise IllegalMoveError(f"Pit must be between 0 and {PITS_PER_SIDE - 1}, got {pit!r}.")
        if self.is_computer(self._state.current_player):
            raise IllegalMoveError(f"Player {int(self._state.current_player)} is computer-controlled.")

        record = self._play(int(pit))
        self._run_computer_turns()
        return record

    # ------------------------------------------------------------------
    def _play(self, pit: int) -> MoveRecord:
        state = self._state
        record = play_turn(state, pit, on_sow=lambda _index: self._notify())
        self.history.append(record)
        if self.config.validate_invariants:
            validate_board(state.board)
        if state.is_terminal:
            logger.info("Game over after turn %d: %s", state.turn_number, state.outcome.value)
        self._notify()
        return record

    def _run_computer_turns(self) -> None:
        while not self._state.is_terminal and self.is_computer(self._state.current_player):
            pit = self.search.choose_move(self._state.board)
            if pit is None:
                logger.info("Player %d has no move; passing.", int(self._state.current_player))
                if not check_for_win(self._state):
                    pass_turn(self._state)
                self._notify()
                continue
            logger.info("Player %d (computer) sows pit %d.", int(self._state.current_player), pit)
            self._play(pit)

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self._state.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

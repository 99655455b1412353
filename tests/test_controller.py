import numpy as np
import pytest

from mancala.config import GameConfig
from mancala.core import (
    GameOutcome,
    GameOverError,
    GameState,
    IllegalMoveError,
    PlayerId,
    as_board,
)
from mancala.session import TurnController
from mancala.validation import BoardInvariantError


def two_player(state=None) -> TurnController:
    return TurnController(GameConfig(ai_player=None), state=state)


def test_new_game_awaits_player_one():
    controller = two_player()
    snapshot = controller.snapshot()

    assert snapshot.current_player == PlayerId.ONE
    assert snapshot.outcome == GameOutcome.ONGOING
    assert snapshot.turn_number == 0
    assert snapshot.pits == (4, 4, 4, 4, 4, 4, 0, 4, 4, 4, 4, 4, 4, 0)


def test_bonus_turn_keeps_player_and_perspective():
    controller = two_player()
    record = controller.submit_move(2)

    assert record.ended_in_store
    assert record.landing_index == 6
    assert controller.current_player == PlayerId.ONE
    assert controller.snapshot().pits == (4, 4, 0, 5, 5, 5, 1, 4, 4, 4, 4, 4, 4, 0)


def test_completed_turn_flips_board_to_next_player():
    controller = two_player()
    controller.submit_move(2)
    record = controller.submit_move(0)

    assert not record.ended_in_store
    snapshot = controller.snapshot()
    assert snapshot.current_player == PlayerId.TWO
    assert snapshot.turn_number == 2
    assert snapshot.pits == (4, 4, 4, 4, 4, 4, 0, 0, 5, 1, 6, 6, 5, 1)
    assert [r.player for r in controller.history] == [PlayerId.ONE, PlayerId.ONE]


def test_returned_state_is_a_copy():
    controller = two_player()
    state = controller.state
    state.board[0] = 40
    assert controller.snapshot().pits[0] == 4


@pytest.mark.parametrize("pit", [-1, 6, 7, 12, True, 2.7, "2", None])
def test_out_of_range_pit_is_rejected(pit):
    controller = two_player()
    with pytest.raises(IllegalMoveError):
        controller.submit_move(pit)
    assert controller.snapshot().turn_number == 0


def test_numpy_integer_pit_is_accepted():
    controller = two_player()
    record = controller.submit_move(np.int64(2))
    assert record.pit == 2
    assert controller.snapshot().pits[6] == 1


def test_empty_pit_passes_without_ending_turn():
    controller = two_player()
    controller.submit_move(2)
    record = controller.submit_move(2)

    assert record.ended_in_store
    assert record.landing_index is None
    assert controller.current_player == PlayerId.ONE
    assert controller.snapshot().turn_number == 2


def test_last_move_ends_game_and_rejects_more_moves():
    board = as_board([0, 0, 0, 0, 0, 1, 20, 1, 0, 0, 0, 0, 0, 26])
    controller = two_player(GameState(board=board))
    controller.submit_move(5)

    snapshot = controller.snapshot()
    assert controller.is_over
    assert snapshot.outcome == GameOutcome.PLAYER_TWO_WIN
    assert snapshot.pits == (0, 0, 0, 0, 0, 0, 21, 0, 0, 0, 0, 0, 0, 27)
    with pytest.raises(GameOverError):
        controller.submit_move(0)


def test_winner_uses_absolute_player_identity():
    board = as_board([0, 0, 0, 0, 0, 1, 30, 1, 0, 0, 0, 0, 0, 16])
    controller = two_player(GameState(board=board, current_player=PlayerId.TWO))
    controller.submit_move(5)
    assert controller.snapshot().outcome == GameOutcome.PLAYER_TWO_WIN


def test_listeners_fire_per_stone_and_after_resolution():
    controller = two_player()
    seen = []
    controller.subscribe(seen.append)
    controller.submit_move(2)

    assert len(seen) == 5
    assert [snap.pits[6] for snap in seen] == [0, 0, 0, 1, 1]
    assert sum(seen[-1].pits) == 48


def test_unsubscribe_stops_notifications():
    controller = two_player()
    seen = []
    unsubscribe = controller.subscribe(seen.append)
    unsubscribe()
    controller.submit_move(2)
    assert seen == []


def test_invariant_violation_is_reported():
    board = as_board([5, 4, 4, 4, 4, 4, 0, 4, 4, 4, 4, 4, 4, 0])
    controller = two_player(GameState(board=board))
    with pytest.raises(BoardInvariantError):
        controller.submit_move(0)


def test_invariant_check_can_be_disabled():
    board = as_board([5, 4, 4, 4, 4, 4, 0, 4, 4, 4, 4, 4, 4, 0])
    controller = TurnController(GameConfig(ai_player=None, validate_invariants=False), state=GameState(board=board))
    controller.submit_move(0)
    assert sum(controller.snapshot().pits) == 49


def test_computer_replies_before_control_returns():
    controller = TurnController(GameConfig(search_depth=2, ai_player=PlayerId.TWO))
    controller.submit_move(0)

    assert len(controller.history) >= 2
    assert controller.history[0].player == PlayerId.ONE
    assert all(record.player == PlayerId.TWO for record in controller.history[1:])
    assert controller.is_over or controller.current_player == PlayerId.ONE
    assert sum(controller.snapshot().pits) == 48


def test_computer_moves_first_when_it_is_player_one():
    controller = TurnController(GameConfig(search_depth=1, ai_player=PlayerId.ONE))

    assert controller.history
    assert controller.history[0].player == PlayerId.ONE
    assert controller.current_player == PlayerId.TWO


def test_human_cannot_move_for_the_computer():
    board = as_board([4, 4, 4, 4, 4, 4, 0, 4, 4, 4, 4, 4, 4, 0])
    controller = TurnController(
        GameConfig(search_depth=1, ai_player=PlayerId.TWO),
        state=GameState(board=board, current_player=PlayerId.ONE),
    )
    controller.config.ai_player = PlayerId.ONE
    with pytest.raises(IllegalMoveError):
        controller.submit_move(0)


def test_full_game_against_computer_terminates():
    controller = TurnController(GameConfig(search_depth=2, ai_player=PlayerId.TWO))
    moves = 0
    while not controller.is_over:
        state = controller.state
        pit = next(i for i in range(6) if state.board[i] > 0)
        controller.submit_move(pit)
        moves += 1
        assert moves < 200

    snapshot = controller.snapshot()
    assert snapshot.outcome != GameOutcome.ONGOING
    assert sum(snapshot.pits) == 48
    assert snapshot.pits[6] + snapshot.pits[13] == 48


def test_reset_restores_initial_layout():
    controller = two_player()
    controller.submit_move(2)
    controller.submit_move(0)
    controller.reset()

    assert controller.history == []
    assert controller.snapshot().pits == (4, 4, 4, 4, 4, 4, 0, 4, 4, 4, 4, 4, 4, 0)
    assert controller.current_player == PlayerId.ONE

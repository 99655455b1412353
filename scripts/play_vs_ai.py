#!/usr/bin/env python3
"""Play Mancala against the alpha-beta computer via the console, with optional logging & replay."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from mancala import GameConfig, TurnController, load_game_config
from mancala.core import GameOutcome, PlayerId, format_board, legal_pits


def outcome_message(outcome: GameOutcome) -> str:
    if outcome == GameOutcome.DRAW:
        return "Draw!"
    return f"Player {int(outcome.winner)} wins!"


def prompt_human_move(controller: TurnController) -> int:
    state = controller.state
    legal = legal_pits(state.board)
    print(f"Player {int(state.current_player)}'s turn. Pits with stones: {legal}")
    while True:
        raw = input("Pit to sow, 0-5 (q to quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Leaving the game.")
            sys.exit(0)
        if not raw.isdigit():
            print("Please enter a number.")
            continue
        pit = int(raw)
        if 0 <= pit <= 5:
            return pit
        print("Pit must be between 0 and 5.")


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"Saved game log to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    controller = TurnController(GameConfig(ai_player=None))
    if verbose:
        print("Replaying logged game.")
        print(format_board(controller.state.board))
    for entry in moves:
        player = PlayerId(entry["player"])
        if player != controller.current_player:
            raise ValueError(
                f"Log move {entry.get('move_index')} is for player {int(player)} "
                f"but player {int(controller.current_player)} is due"
            )
        controller.submit_move(entry["pit"])
        if verbose:
            print(f"{entry.get('actor', 'unknown')} (Player {int(player)}) sows pit {entry['pit']}")
            print(format_board(controller.state.board))
    snapshot = controller.snapshot()
    summary = {
        "result": snapshot.outcome.value,
        "moves": len(moves),
        "board": list(snapshot.pits),
        "current_player": int(snapshot.current_player),
    }
    if verbose:
        print("Replay finished.")
        print(f"Result: {summary['result']}")
    return summary


def build_config(args: argparse.Namespace) -> GameConfig:
    config = load_game_config(args.config) if args.config else GameConfig()
    if args.depth is not None:
        config = GameConfig(
            search_depth=args.depth,
            ai_player=config.ai_player,
            terminal_score=config.terminal_score,
            validate_invariants=config.validate_invariants,
        )
    if args.two_player:
        config.ai_player = None
    return config


def play_interactive(args: argparse.Namespace) -> None:
    config = build_config(args)
    log_records: List[Dict] = []
    controller = TurnController(config)

    def record_computer_moves(start: int) -> None:
        for record in controller.history[start:]:
            if controller.is_computer(record.player):
                print(f"Computer (Player {int(record.player)}) sows pit {record.pit}.")
                log_records.append(
                    {
                        "move_index": len(log_records),
                        "actor": "ai",
                        "player": int(record.player),
                        "pit": record.pit,
                    }
                )

    record_computer_moves(0)
    while not controller.is_over:
        print("\nCurrent board:")
        print(format_board(controller.state.board))
        pit = prompt_human_move(controller)
        seen = len(controller.history)
        record = controller.submit_move(pit)
        log_records.append(
            {
                "move_index": len(log_records),
                "actor": "human",
                "player": int(record.player),
                "pit": record.pit,
            }
        )
        record_computer_moves(seen + 1)

    snapshot = controller.snapshot()
    print("\nFinal board:")
    print(format_board(controller.state.board))
    print(outcome_message(snapshot.outcome))

    if args.log_file:
        metadata = {
            "ai_player": int(config.ai_player) if config.ai_player is not None else None,
            "search_depth": config.search_depth,
            "result": snapshot.outcome.value,
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play Mancala in the console against the computer.")
    parser.add_argument("--config", type=str, default=None, help="YAML game config")
    parser.add_argument("--depth", type=int, default=None, help="Search depth for the computer player")
    parser.add_argument("--two-player", action="store_true", help="Two humans, no computer player")
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--verbose", action="store_true", help="Log search details")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(args)


if __name__ == "__main__":
    main()

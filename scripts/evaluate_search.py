#!/usr/bin/env python3
"""Play the alpha-beta search against a baseline policy and report statistics."""

import argparse
import json
from typing import List, Optional

import numpy as np

from mancala import AlphaBetaPolicy, RandomPolicy, SearchConfig, evaluate_policies, load_game_config


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default=None, help="YAML game config")
    parser.add_argument("--episodes", type=int, default=10)
    parser.add_argument("--depth", type=int)
    parser.add_argument("--baseline", choices=["random", "search"], default="random")
    parser.add_argument("--baseline-depth", type=int, default=2)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--search-second", action="store_true", help="Let the baseline move first")
    args = parser.parse_args(argv)

    cfg = load_game_config(args.config) if args.config else None
    depth = args.depth if args.depth is not None else (cfg.search_depth if cfg else 6)
    terminal_score = cfg.terminal_score if cfg else -1

    rng = np.random.default_rng(args.seed)
    policy_search = AlphaBetaPolicy(SearchConfig(depth=depth, terminal_score=terminal_score))
    if args.baseline == "random":
        baseline_policy = RandomPolicy()
    else:
        baseline_policy = AlphaBetaPolicy(SearchConfig(depth=args.baseline_depth))

    if args.search_second:
        result = evaluate_policies(baseline_policy, policy_search, episodes=args.episodes, rng=rng)
    else:
        result = evaluate_policies(policy_search, baseline_policy, episodes=args.episodes, rng=rng)

    output = {
        "games": result.games_played,
        "search_depth": depth,
        "baseline": args.baseline,
        "search_player": 2 if args.search_second else 1,
        "player_one_wins": result.player_one_wins,
        "player_two_wins": result.player_two_wins,
        "draws": result.draws,
        "average_length": result.average_length,
        "player_one_winrate": result.winrate_player_one(),
        "player_two_winrate": result.winrate_player_two(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()

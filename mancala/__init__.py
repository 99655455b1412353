"""Mancala game core with an alpha-beta computer player."""

from . import core, env, evaluation, search, session, validation
from .config import GameConfig, load_game_config
from .env import MancalaEnv
from .evaluation import EvaluationResult, evaluate_policies
from .policies import AlphaBetaPolicy, Policy, RandomPolicy
from .search import AlphaBetaSearch, SearchConfig, choose_move, evaluate
from .session import TurnController

__all__ = [
    "core",
    "env",
    "evaluation",
    "search",
    "session",
    "validation",
    "GameConfig",
    "load_game_config",
    "MancalaEnv",
    "EvaluationResult",
    "evaluate_policies",
    "AlphaBetaPolicy",
    "Policy",
    "RandomPolicy",
    "AlphaBetaSearch",
    "SearchConfig",
    "choose_move",
    "evaluate",
    "TurnController",
]

"""Alpha-beta search for the computer player."""

from .alphabeta import DEFAULT_DEPTH, AlphaBetaSearch, SearchConfig, SearchResult, choose_move
from .heuristic import evaluate

__all__ = [
    "DEFAULT_DEPTH",
    "AlphaBetaSearch",
    "SearchConfig",
    "SearchResult",
    "choose_move",
    "evaluate",
]

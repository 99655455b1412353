from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from mancala.core import apply_move, is_game_over, legal_pits

from .heuristic import evaluate

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 12

# boards inside the search are plain lists, copied with board[:]
SearchBoard = List[int]
EvaluationFn = Callable[[SearchBoard], float]


@dataclass
class SearchConfig:
    depth: int = DEFAULT_DEPTH
    terminal_score: float = -1

    def __post_init__(self) -> None:
        if isinstance(self.depth, bool) or not isinstance(self.depth, int) or self.depth < 1:
            raise ValueError(f"depth must be a positive integer, got {self.depth!r}")


class SearchNode:
    __slots__ = ("pit", "board")

    def __init__(self, pit: int, board: SearchBoard) -> None:
        self.pit: int = pit
        self.board: SearchBoard = board


@dataclass
class SearchResult:
    pit: Optional[int]
    score: float
    nodes: int


class AlphaBetaSearch:
    """Fixed-depth minimax with alpha-beta pruning over one unflipped board.

    The maximizing side owns slots 0-6 and the minimizing side slots 7-13;
    sides alternate with every ply and bonus turns are not modelled.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        *,
        evaluator: EvaluationFn = evaluate,
    ) -> None:
        self.config = config or SearchConfig()
        self.evaluator = evaluator
        self._nodes = 0

    # ------------------------------------------------------------------
    def run(self, board: Sequence[int]) -> SearchResult:
        board = [int(v) for v in board]
        self._nodes = 1
        if is_game_over(board):
            return SearchResult(pit=None, score=self.config.terminal_score, nodes=self._nodes)

        alpha = -math.inf
        beta = math.inf
        best_score = -math.inf
        best_pit: Optional[int] = None

        for child in self._successors(board, maximizing=True):
            score = self._search(child.board, self.config.depth - 1, alpha, beta, False)
            if score > best_score:
                best_score = score
                best_pit = child.pit
            alpha = max(alpha, score)
            if alpha > beta:
                break

        logger.debug("alpha-beta depth=%d pit=%s score=%s nodes=%d", self.config.depth, best_pit, best_score, self._nodes)
        return SearchResult(pit=best_pit, score=best_score, nodes=self._nodes)

    def choose_move(self, board: Sequence[int]) -> Optional[int]:
        return self.run(board).pit

    # ------------------------------------------------------------------
    def _search(self, board: SearchBoard, depth: int, alpha: float, beta: float, maximizing: bool) -> float:
        self._nodes += 1
        if is_game_over(board):
            return self.config.terminal_score
        if depth == 0:
            return self.evaluator(board)

        score = -math.inf if maximizing else math.inf
        for child in self._successors(board, maximizing):
            child_score = self._search(child.board, depth - 1, alpha, beta, not maximizing)
            if maximizing:
                if child_score > score:
                    score = child_score
                alpha = max(alpha, child_score)
            else:
                if child_score < score:
                    score = child_score
                beta = min(beta, child_score)
            if alpha > beta:
                break
        return score

    def _successors(self, board: SearchBoard, maximizing: bool) -> List[SearchNode]:
        side = 0 if maximizing else 1
        children: List[SearchNode] = []
        for pit in legal_pits(board, side):
            child_board = board[:]
            apply_move(child_board, pit, side=side)
            children.append(SearchNode(pit, child_board))
        return children


def choose_move(board: Sequence[int], depth_limit: int = DEFAULT_DEPTH) -> Optional[int]:
    return AlphaBetaSearch(SearchConfig(depth=depth_limit)).choose_move(board)

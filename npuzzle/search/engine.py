from __future__ import annotations
from enum import Enum
from typing import Dict, Optional, Sequence, Union

from npuzzle.domains.board import Board
from npuzzle.search.a_star import a_star, uniform_cost
from npuzzle.search.bfs import breadth_first
from npuzzle.search.dfs import depth_first, depth_first_recursive
from npuzzle.search.graph_search import SearchConfig, StrategyFn
from npuzzle.search.ida_star import iterative_deepening_a_star
from npuzzle.search.iddfs import iterative_deepening_dfs
from npuzzle.search.result import SearchResult


class Strategy(str, Enum):
    DEPTH_FIRST_RECURSIVE = "depth_first_recursive"
    DEPTH_FIRST = "depth_first"
    BREADTH_FIRST = "breadth_first"
    UNIFORM_COST = "uniform_cost"
    A_STAR = "a_star"
    ITERATIVE_DEEPENING_DFS = "iterative_deepening_dfs"
    ITERATIVE_DEEPENING_A_STAR = "iterative_deepening_a_star"

    def __str__(self) -> str:
        return self.value

    @property
    def optimal(self) -> bool:
        """Guaranteed to return a shortest path (all moves cost 1)."""
        return self in OPTIMAL


STRATEGIES: Dict[Strategy, StrategyFn] = {
    Strategy.DEPTH_FIRST_RECURSIVE: depth_first_recursive,
    Strategy.DEPTH_FIRST: depth_first,
    Strategy.BREADTH_FIRST: breadth_first,
    Strategy.UNIFORM_COST: uniform_cost,
    Strategy.A_STAR: a_star,
    Strategy.ITERATIVE_DEEPENING_DFS: iterative_deepening_dfs,
    Strategy.ITERATIVE_DEEPENING_A_STAR: iterative_deepening_a_star,
}

OPTIMAL = frozenset({
    Strategy.BREADTH_FIRST,
    Strategy.UNIFORM_COST,
    Strategy.A_STAR,
    Strategy.ITERATIVE_DEEPENING_A_STAR,
})

# Short names accepted by the CLIs
ALIASES: Dict[str, Strategy] = {
    "rdfs": Strategy.DEPTH_FIRST_RECURSIVE,
    "dfs": Strategy.DEPTH_FIRST,
    "bfs": Strategy.BREADTH_FIRST,
    "ucs": Strategy.UNIFORM_COST,
    "a": Strategy.A_STAR,
    "astar": Strategy.A_STAR,
    "iddfs": Strategy.ITERATIVE_DEEPENING_DFS,
    "ida": Strategy.ITERATIVE_DEEPENING_A_STAR,
}


def parse_strategy(name: Union[str, Strategy]) -> Strategy:
    if isinstance(name, Strategy):
        return name
    key = name.strip().lower().replace("-", "_")
    if key in ALIASES:
        return ALIASES[key]
    try:
        return Strategy(key)
    except ValueError:
        choices = sorted([s.value for s in Strategy] + list(ALIASES))
        raise ValueError(f"unknown strategy {name!r}; choose from {choices}") from None


def solve(board: Union[Board, Sequence[int]], strategy: Union[str, Strategy],
          config: Optional[SearchConfig] = None) -> SearchResult:
    """Run one strategy on `board` from a clean slate.

    Timeouts and recursion exhaustion come back as results with their
    counters; only an invalid board raises (InvalidBoard).
    """
    if not isinstance(board, Board):
        board = Board(board)
    return STRATEGIES[parse_strategy(strategy)](board, config)

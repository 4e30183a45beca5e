from __future__ import annotations
from dataclasses import dataclass
from functools import wraps
from time import perf_counter
from typing import Any, Callable, Dict, Optional, Set
import random

from npuzzle.domains.board import Board
from npuzzle.heuristics.registry import Heuristic, get_heuristic
from npuzzle.search.frontier import Frontier
from npuzzle.search.node import Path, SearchNode
from npuzzle.search.result import (
    ResourceExhausted, SearchAborted, SearchResult, SearchTimeout, Termination,
)

ProgressFn = Callable[[str, Dict[str, Any]], None]


@dataclass
class SearchConfig:
    """Per-call knobs shared by every strategy.

    timeout_sec:          wall-clock bound, None = unbounded
    max_recursion_depth:  recursion bound for the recursive strategies
    max_cutoff:           stop iterative deepening once its bound passes this
    shuffle / seed:       randomise child order with a seeded RNG
    heuristic:            name in HEURISTICS, used by A* and IDA*
    progress:             observer called as progress(event, counters)
    progress_every:       expansions between "progress" events
    """
    timeout_sec: Optional[float] = None
    max_recursion_depth: int = 500
    max_cutoff: Optional[int] = None
    shuffle: bool = False
    seed: Optional[int] = None
    heuristic: str = "manhattan"
    progress: Optional[ProgressFn] = None
    progress_every: int = 1000

    def rng(self) -> Optional[random.Random]:
        return random.Random(self.seed) if self.shuffle else None

    def hfun(self) -> Heuristic:
        return get_heuristic(self.heuristic)


class SearchContext:
    """State owned by one solve() call: visited set, counters, clock, RNG."""

    def __init__(self, algorithm: str, config: SearchConfig, default_timeout: Optional[float] = None):
        self.algorithm = algorithm
        self.config = config
        self.rng = config.rng()
        self.t0 = perf_counter()
        limit = config.timeout_sec if config.timeout_sec is not None else default_timeout
        self.timeout_sec = limit
        self.deadline = self.t0 + limit if limit is not None else None
        self.visited: Set[Board] = set()
        self.frontier: Optional[Frontier] = None
        self.expanded = 0
        self.generated = 0
        self.depth_reached = 0
        self.peak_frontier = 0
        self.bound: Optional[int] = None
        self.rounds = 0

    # ---------- Bookkeeping ----------
    def elapsed(self) -> float:
        return perf_counter() - self.t0

    def check_clock(self) -> None:
        if self.deadline is not None and perf_counter() > self.deadline:
            raise SearchTimeout(f"timed out after {self.timeout_sec:g} seconds", depth=self.depth_reached)

    def check_depth(self, depth: int) -> None:
        """Call before recursing to `depth`."""
        if depth > self.config.max_recursion_depth:
            raise ResourceExhausted(
                f"recursion depth exceeded {self.config.max_recursion_depth}", depth=depth - 1)
        if depth > self.depth_reached:
            self.depth_reached = depth

    def counters(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "visited": len(self.visited),
            "frontier": len(self.frontier) if self.frontier is not None else 0,
            "expanded": self.expanded,
            "generated": self.generated,
            "bound": self.bound,
            "elapsed": self.elapsed(),
        }

    def notify(self, event: str) -> None:
        if self.config.progress is not None:
            self.config.progress(event, self.counters())

    def tick(self) -> None:
        every = self.config.progress_every
        if every and self.expanded % every == 0:
            self.notify("progress")

    def new_round(self, bound: int) -> None:
        self.bound = bound
        self.rounds += 1
        self.visited = set()
        self.notify("round")

    # ---------- Results ----------
    def finish(self, termination: Termination, path: Optional[Path] = None, message: str = "") -> SearchResult:
        frontier = self.frontier
        if frontier is not None:
            self.peak_frontier = max(self.peak_frontier, frontier.peak)
        res = SearchResult(
            algorithm=self.algorithm,
            termination=termination,
            path=path if termination is Termination.OK else None,
            visited_count=len(self.visited),
            frontier_remaining=len(frontier) if frontier is not None else 0,
            expanded=self.expanded,
            generated=self.generated,
            peak_frontier=self.peak_frontier,
            depth_reached=self.depth_reached,
            bound_final=self.bound,
            rounds=self.rounds,
            time_sec=self.elapsed(),
            message=message,
        )
        self.notify("done")
        return res


StrategyFn = Callable[[Board, Optional[SearchConfig]], SearchResult]


def strategy(algorithm: str, default_timeout: Optional[float] = None):
    """Wrap `body(board, ctx)` as `fn(board, config=None) -> SearchResult`.

    Resource aborts raised anywhere inside the body become diagnostic
    results carrying the counters accumulated so far.
    """
    def decorate(body: Callable[[Board, SearchContext], SearchResult]) -> StrategyFn:
        @wraps(body)
        def run(board: Board, config: Optional[SearchConfig] = None) -> SearchResult:
            ctx = SearchContext(algorithm, config or SearchConfig(), default_timeout)
            try:
                return body(board, ctx)
            except SearchAborted as e:
                if e.depth > ctx.depth_reached:
                    ctx.depth_reached = e.depth
                return ctx.finish(e.termination, message=str(e))
            except RecursionError:
                return ctx.finish(Termination.STACK_EXHAUSTED,
                                  message=f"interpreter recursion limit hit at depth {ctx.depth_reached}")
        run.algorithm = algorithm
        return run
    return decorate


def graph_search(root: SearchNode, frontier: Frontier, ctx: SearchContext) -> Optional[SearchNode]:
    """The shared loop: goal test, mark visited, expand, filter, push, pop.

    Returns the goal node, or None once the frontier is exhausted.
    """
    if ctx.frontier is not None:
        ctx.peak_frontier = max(ctx.peak_frontier, ctx.frontier.peak)
    ctx.frontier = frontier
    node: Optional[SearchNode] = root
    while node is not None:
        ctx.check_clock()
        if node.is_goal():
            return node

        ctx.visited.add(node.board)
        ctx.expanded += 1
        if node.path_cost() > ctx.depth_reached:
            ctx.depth_reached = node.path_cost()
        for child in node.expand(ctx.rng):
            ctx.generated += 1
            if child.board in ctx.visited:
                continue
            frontier.add(child)
        ctx.tick()

        node = None
        while len(frontier):
            candidate = frontier.pop()
            # an equal board may have been queued twice before its first expansion
            if candidate.board not in ctx.visited:
                node = candidate
                break
    return None


def run_frontier(board: Board, frontier: Frontier, ctx: SearchContext) -> SearchResult:
    found = graph_search(SearchNode(board), frontier, ctx)
    if found is None:
        return ctx.finish(Termination.EXHAUSTED)
    return ctx.finish(Termination.OK, found.path)

from __future__ import annotations
from typing import Dict, Optional, Tuple
import math

from npuzzle.domains.board import Board
from npuzzle.search.graph_search import SearchContext, strategy
from npuzzle.search.node import SearchNode
from npuzzle.search.result import SearchResult, Termination


@strategy("IDA*")
def iterative_deepening_a_star(board: Board, ctx: SearchContext) -> SearchResult:
    """Recursive branch-and-bound on f = g + h with a growing cost bound.

    - a node whose f exceeds the bound is pruned and reports its f
    - a child is skipped when its board was already reached this round with a strictly lower f
    - the next bound is the smallest f pruned in the round (not bound + 1)
    - when several goals fit under the bound, the cheapest is kept
    """
    hfun = ctx.config.hfun()
    max_cutoff = ctx.config.max_cutoff
    costs: Dict[Board, int] = {}

    def recurse(node: SearchNode, bound: int, depth: int) -> Tuple[Optional[SearchNode], float]:
        ctx.check_clock()
        f = node.estimated_total_cost(hfun)
        costs[node.board] = f
        ctx.visited.add(node.board)
        if f > bound:
            return None, f
        if node.is_goal():
            return node, bound

        ctx.expanded += 1
        ctx.tick()
        next_best = math.inf
        best: Optional[SearchNode] = None
        for child in node.expand(ctx.rng):
            ctx.generated += 1
            if costs.get(child.board, math.inf) < child.estimated_total_cost(hfun):
                continue
            ctx.check_depth(depth + 1)
            solved, deeper = recurse(child, bound, depth + 1)
            if solved is not None:
                if best is None or solved.path_cost() < best.path_cost():
                    best = solved
            elif deeper < next_best:
                next_best = deeper
        if best is not None:
            return best, bound
        return None, next_best

    root = SearchNode(board)
    bound = root.estimated_total_cost(hfun)
    while True:
        if max_cutoff is not None and bound > max_cutoff:
            return ctx.finish(Termination.BOUND_REACHED,
                              message=f"no solution within max cost {max_cutoff}")
        ctx.new_round(bound)
        costs.clear()
        solved, next_bound = recurse(root, bound, 0)
        if solved is not None:
            return ctx.finish(Termination.OK, solved.path)
        if next_bound == math.inf:
            return ctx.finish(Termination.EXHAUSTED)
        bound = int(next_bound)

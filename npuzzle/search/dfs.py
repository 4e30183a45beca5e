from __future__ import annotations
from typing import Optional

from npuzzle.domains.board import Board
from npuzzle.search.frontier import StackFrontier
from npuzzle.search.graph_search import SearchContext, run_frontier, strategy
from npuzzle.search.node import SearchNode
from npuzzle.search.result import SearchResult, Termination

# Plain DFS can wander for a long time; bound it unless the caller picks a limit
DFS_DEFAULT_TIMEOUT = 60.0


@strategy("DFS", default_timeout=DFS_DEFAULT_TIMEOUT)
def depth_first(board: Board, ctx: SearchContext) -> SearchResult:
    return run_frontier(board, StackFrontier(), ctx)


@strategy("DFS (recursive)")
def depth_first_recursive(board: Board, ctx: SearchContext) -> SearchResult:
    """DFS on the call stack with a global visited set.

    The depth is checked before every recursive call, so running out of
    `max_recursion_depth` ends the run with STACK_EXHAUSTED and the depth reached.
    """

    def recurse(node: SearchNode, depth: int) -> Optional[SearchNode]:
        ctx.check_clock()
        if node.is_goal():
            return node
        ctx.visited.add(node.board)
        ctx.expanded += 1
        ctx.tick()
        for child in node.expand(ctx.rng):
            ctx.generated += 1
            if child.board in ctx.visited:
                continue
            ctx.check_depth(depth + 1)
            found = recurse(child, depth + 1)
            if found is not None:
                return found
        return None

    found = recurse(SearchNode(board), 0)
    if found is None:
        return ctx.finish(Termination.EXHAUSTED)
    return ctx.finish(Termination.OK, found.path)

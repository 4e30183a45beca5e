from npuzzle.domains.board import Board
from npuzzle.search.frontier import PriorityFrontier
from npuzzle.search.graph_search import SearchContext, run_frontier, strategy
from npuzzle.search.node import SearchNode
from npuzzle.search.result import SearchResult


@strategy("UCS")
def uniform_cost(board: Board, ctx: SearchContext) -> SearchResult:
    """Priority queue keyed by g (path length); FIFO among equal costs."""
    return run_frontier(board, PriorityFrontier(SearchNode.path_cost), ctx)


@strategy("A*")
def a_star(board: Board, ctx: SearchContext) -> SearchResult:
    """Priority queue keyed by f = g + h."""
    hfun = ctx.config.hfun()
    return run_frontier(board, PriorityFrontier(lambda n: n.estimated_total_cost(hfun)), ctx)

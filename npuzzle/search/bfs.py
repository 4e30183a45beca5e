from npuzzle.domains.board import Board
from npuzzle.search.frontier import QueueFrontier
from npuzzle.search.graph_search import SearchContext, run_frontier, strategy
from npuzzle.search.result import SearchResult


@strategy("BFS")
def breadth_first(board: Board, ctx: SearchContext) -> SearchResult:
    return run_frontier(board, QueueFrontier(), ctx)

from npuzzle.domains.board import Board
from npuzzle.search.frontier import DepthBoundedFrontier
from npuzzle.search.graph_search import SearchContext, graph_search, strategy
from npuzzle.search.node import SearchNode
from npuzzle.search.result import SearchResult, Termination


@strategy("IDDFS")
def iterative_deepening_dfs(board: Board, ctx: SearchContext) -> SearchResult:
    """Depth-first with a cutoff that grows by one each round.

    Visited set and frontier start empty every round. A round that drops
    nothing past the cutoff has seen the whole reachable space, so a miss
    there is final.
    """
    root = SearchNode(board)
    max_cutoff = ctx.config.max_cutoff
    cutoff = 0
    while True:
        cutoff += 1
        if max_cutoff is not None and cutoff > max_cutoff:
            return ctx.finish(Termination.BOUND_REACHED,
                              message=f"no solution within cutoff {max_cutoff}")
        ctx.new_round(cutoff)
        frontier = DepthBoundedFrontier(cutoff)
        found = graph_search(root, frontier, ctx)
        if found is not None:
            return ctx.finish(Termination.OK, found.path)
        if frontier.dropped == 0:
            return ctx.finish(Termination.EXHAUSTED)

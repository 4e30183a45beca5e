from __future__ import annotations
from typing import Callable, Iterable, List, Optional, Tuple
import random

from npuzzle.domains.board import Board, Direction, DIRECTIONS
from npuzzle.heuristics.manhattan import manhattan

Path = Tuple[Direction, ...]
# (last move, moves before it); children share their parent's chain
MoveChain = Optional[Tuple[Direction, "MoveChain"]]


class SearchNode:
    """A board plus the moves that reached it from the root.

    No parent pointers to other nodes: replaying `path` from the root gives
    `board`. Moves are kept as a shared-tail chain so a child costs O(1)
    regardless of depth; `path` materialises the tuple on demand.
    """

    __slots__ = ("board", "depth", "_moves")

    def __init__(self, board: Board, path: Iterable[Direction] = ()):
        self.board = board
        self.depth = 0
        self._moves: MoveChain = None
        for d in path:
            self._moves = (Direction(d), self._moves)
            self.depth += 1

    @classmethod
    def _child(cls, board: Board, parent: "SearchNode", direction: Direction) -> "SearchNode":
        node = cls.__new__(cls)
        node.board = board
        node.depth = parent.depth + 1
        node._moves = (direction, parent._moves)
        return node

    @property
    def path(self) -> Path:
        out: List[Direction] = []
        link = self._moves
        while link is not None:
            out.append(link[0])
            link = link[1]
        out.reverse()
        return tuple(out)

    def is_goal(self) -> bool:
        return self.board.is_goal()

    def branch_toward(self, direction: Direction) -> Optional["SearchNode"]:
        nxt = self.board.apply_move(direction)
        if nxt is None:
            return None
        return SearchNode._child(nxt, self, direction)

    def expand(self, rng: Optional[random.Random] = None) -> List["SearchNode"]:
        """Children for every legal move, in left/right/up/down order unless `rng` shuffles them."""
        out: List[SearchNode] = []
        for d in DIRECTIONS:
            child = self.branch_toward(d)
            if child is not None:
                out.append(child)
        if rng is not None:
            rng.shuffle(out)
        return out

    def path_cost(self) -> int:
        return self.depth

    def estimated_total_cost(self, heuristic: Callable[[Board], int] = manhattan) -> int:
        return self.depth + heuristic(self.board)

    def __repr__(self) -> str:
        return f"SearchNode({self.board!r}, path={[d.value for d in self.path]})"

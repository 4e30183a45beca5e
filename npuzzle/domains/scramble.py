from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import random

from npuzzle.domains.board import Board, Direction


@dataclass(frozen=True)
class Scramble:
    board: Board
    walk: Tuple[Direction, ...]      # moves applied to the goal
    inverse: Tuple[Direction, ...]   # moves that take `board` back to the goal

    @property
    def upper_bound(self) -> int:
        """Known upper bound on the optimal solution length."""
        return len(self.inverse)


def inverse_path(path: Sequence[Direction]) -> Tuple[Direction, ...]:
    return tuple(Direction(m).opposite for m in reversed(path))


def random_walk(size: int, steps: int, rng: random.Random) -> Tuple[Board, Tuple[Direction, ...]]:
    """Random legal blank moves from the goal, never undoing the previous move."""
    b = Board.goal(size)
    walk: List[Direction] = []
    for _ in range(steps):
        cand = b.legal_moves()
        if walk and walk[-1].opposite in cand and len(cand) > 1:
            cand.remove(walk[-1].opposite)
        d = rng.choice(cand)
        b = b.apply_move(d)
        walk.append(d)
    return b, tuple(walk)


def scramble(size: int, steps: int, seed: Optional[int] = None) -> Scramble:
    rng = random.Random(seed)
    board, walk = random_walk(size, steps, rng)
    return Scramble(board=board, walk=walk, inverse=inverse_path(walk))


def solvable_from_path(path: Sequence[Direction], size: int = 3) -> Board:
    """Board that `path` solves: undo each step of `path` starting from the goal."""
    return Board.goal(size).replay(inverse_path(path))


def make_unsolvable_variant(board: Board) -> Board:
    """Swap the first two non-blank tiles, flipping permutation parity."""
    lst = list(board.cells)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return Board(lst, board.size)

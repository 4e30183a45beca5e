from bisect import bisect_left
from typing import List, Sequence

from npuzzle.domains.board import Board
from npuzzle.heuristics.manhattan import manhattan


def _must_leave(goals: Sequence[int]) -> int:
    """Tiles that have to step out of the line: len(goals) - LIS(goals)."""
    tails: List[int] = []
    for g in goals:
        i = bisect_left(tails, g)
        if i == len(tails):
            tails.append(g)
        else:
            tails[i] = g
    return len(goals) - len(tails)


def linear_conflict(b: Board) -> int:
    """Manhattan + 2 for each tile that must leave its goal row or column to let others pass.

    Counting every conflicting pair overestimates a reversed line, so each
    line only pays for the tiles outside its longest correctly ordered run.
    """
    m = manhattan(b)
    N = b.size
    s = b.cells
    # Row conflicts: tiles in their goal row, by goal column
    for r in range(N):
        row = s[r * N:(r + 1) * N]
        m += 2 * _must_leave([t % N for t in row if t != 0 and t // N == r])
    # Column conflicts: tiles in their goal column, by goal row
    for c in range(N):
        col = [s[c + r * N] for r in range(N)]
        m += 2 * _must_leave([t // N for t in col if t != 0 and t % N == c])
    return m

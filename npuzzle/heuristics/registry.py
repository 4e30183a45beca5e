from typing import Callable, Dict

from npuzzle.domains.board import Board
from npuzzle.heuristics.linear_conflict import linear_conflict
from npuzzle.heuristics.manhattan import manhattan

Heuristic = Callable[[Board], int]

HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "linear_conflict": linear_conflict,
}


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ValueError(f"unknown heuristic {name!r}; choose from {sorted(HEURISTICS)}") from None

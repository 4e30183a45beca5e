from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from npuzzle.domains.board import Direction


class Termination(str, Enum):
    OK = "ok"
    EXHAUSTED = "exhausted"              # frontier emptied, no goal
    TIMEOUT = "timeout"                  # wall-clock bound elapsed
    STACK_EXHAUSTED = "stack_exhausted"  # recursion limit hit
    BOUND_REACHED = "bound_reached"      # iterative deepening hit max_cutoff

    def __str__(self) -> str:
        return self.value


class SearchAborted(Exception):
    """Raised inside a strategy when a resource bound is hit; the engine turns it into a result."""
    termination: Termination

    def __init__(self, message: str = "", depth: int = 0):
        super().__init__(message)
        self.depth = depth


class SearchTimeout(SearchAborted):
    termination = Termination.TIMEOUT


class ResourceExhausted(SearchAborted):
    termination = Termination.STACK_EXHAUSTED


@dataclass
class SearchResult:
    algorithm: str
    termination: Termination
    path: Optional[Tuple[Direction, ...]] = None
    visited_count: int = 0
    frontier_remaining: int = 0
    expanded: int = 0
    generated: int = 0
    peak_frontier: int = 0
    depth_reached: int = 0
    bound_final: Optional[int] = None
    rounds: int = 0
    time_sec: float = 0.0
    message: str = ""

    @property
    def solved(self) -> bool:
        return self.termination is Termination.OK and self.path is not None

    @property
    def g(self) -> Optional[int]:
        return len(self.path) if self.path is not None else None

    @property
    def reason(self) -> Optional[str]:
        """Why the run stopped without a path (None when solved)."""
        if self.solved:
            return None
        return self.termination.value

    def moves(self) -> Tuple[str, ...]:
        return tuple(d.value for d in self.path or ())

    def as_row(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "termination": self.termination.value,
            "g": self.g if self.g is not None else "",
            "visited": self.visited_count,
            "frontier_remaining": self.frontier_remaining,
            "expanded": self.expanded,
            "generated": self.generated,
            "peak_open": self.peak_frontier,
            "peak_recursion": self.depth_reached,
            "bound_final": self.bound_final if self.bound_final is not None else "",
            "rounds": self.rounds,
            "time_sec": f"{self.time_sec:.6f}",
        }

    def describe(self) -> str:
        lines = []
        if self.solved:
            lines.append(f"  path ({self.g} moves): {' '.join(self.moves()) or '(already solved)'}")
        else:
            lines.append(f"  no solution: {self.reason}" + (f" ({self.message})" if self.message else ""))
        lines.append(f"  found in : {self.time_sec:0.4f} seconds")
        lines.append(f"  we checked: {self.visited_count} states")
        lines.append(f"  we generated: {self.frontier_remaining} as-yet-unexplored states")
        if self.bound_final is not None:
            lines.append(f"  final bound: {self.bound_final} after {self.rounds} rounds")
        if self.termination is Termination.STACK_EXHAUSTED:
            lines.append(f"  recursed {self.depth_reached} times")
        return "\n".join(lines)

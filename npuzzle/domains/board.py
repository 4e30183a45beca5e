from __future__ import annotations
from enum import Enum
from math import isqrt
from numbers import Integral
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

Cells = Tuple[int, ...]

SUPPORTED_SIZES = (3, 4)


class InvalidBoard(ValueError):
    """Cells are not a permutation of 0..size*size-1 (or the size is unsupported)."""


class Direction(str, Enum):
    """Direction the blank travels."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]

    def __str__(self) -> str:
        return self.value


_OPPOSITE: Dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

# Attempt order used by expansion
DIRECTIONS: Tuple[Direction, ...] = (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN)


def goal_cells(size: int) -> Cells:
    return tuple(range(size * size))


class Board:
    """Immutable N×N sliding-tile board (0 is the blank, goal is 0,1,...,N²-1).

    Every move returns a new Board; equality and hashing are over the cell
    sequence, so boards can live in sets and dict keys (visited sets).
    """

    __slots__ = ("size", "cells", "_zero", "_h")

    def __init__(self, cells: Iterable[int], size: Optional[int] = None):
        cells = tuple(cells)
        bad = [c for c in cells if isinstance(c, bool) or not isinstance(c, Integral)]
        if bad:
            raise InvalidBoard(f"cells must be integers, got {bad!r}")
        cells = tuple(int(c) for c in cells)
        if size is None:
            size = isqrt(len(cells))
        if size not in SUPPORTED_SIZES:
            raise InvalidBoard(f"unsupported board size {size}; expected one of {SUPPORTED_SIZES}")
        if len(cells) != size * size:
            raise InvalidBoard(f"expected {size * size} cells for a {size}x{size} board, got {len(cells)}")
        if sorted(cells) != list(range(size * size)):
            raise InvalidBoard(f"cells must be a permutation of 0..{size * size - 1}: {cells}")
        self.size = size
        self.cells: Cells = cells
        self._zero = cells.index(0)
        self._h: Optional[int] = None

    @classmethod
    def goal(cls, size: int = 3) -> "Board":
        return cls(goal_cells(size), size)

    @classmethod
    def _trusted(cls, cells: Cells, size: int, zero: int) -> "Board":
        # Skip validation for boards derived from an already valid one
        b = cls.__new__(cls)
        b.size = size
        b.cells = cells
        b._zero = zero
        b._h = None
        return b

    # ---------- Queries ----------
    def zero_position(self) -> int:
        return self._zero

    def is_goal(self) -> bool:
        return self.cells == goal_cells(self.size)

    def rows(self) -> List[Tuple[int, ...]]:
        n = self.size
        return [self.cells[r * n:(r + 1) * n] for r in range(n)]

    # ---------- Core dynamics ----------
    def target_index(self, direction: Direction) -> Optional[int]:
        """Index the blank would move to, or None when the move leaves the grid."""
        n = self.size
        z = self._zero
        x, y = z % n, z // n
        direction = Direction(direction)
        if direction is Direction.LEFT:
            return z - 1 if x != 0 else None
        if direction is Direction.RIGHT:
            return z + 1 if x != n - 1 else None
        if direction is Direction.UP:
            return z - n if y != 0 else None
        return z + n if y != n - 1 else None

    def apply_move(self, direction: Direction) -> Optional["Board"]:
        """Swap the blank with its neighbour in `direction`; None if illegal."""
        j = self.target_index(direction)
        if j is None:
            return None
        lst = list(self.cells)
        lst[self._zero], lst[j] = lst[j], 0
        return Board._trusted(tuple(lst), self.size, j)

    def legal_moves(self) -> List[Direction]:
        return [d for d in DIRECTIONS if self.target_index(d) is not None]

    def replay(self, moves: Sequence[Direction]) -> "Board":
        """Apply `moves` in order; raises ValueError on the first illegal one."""
        b = self
        for i, m in enumerate(moves):
            nxt = b.apply_move(m)
            if nxt is None:
                raise ValueError(f"move {i} ({Direction(m).value}) is illegal with the blank at {b.zero_position()}")
            b = nxt
        return b

    # ---------- Heuristics ----------
    def manhattan_distance_to_goal(self) -> int:
        """Sum of Manhattan distances of every tile to index == tile value (blank ignored)."""
        if self._h is None:
            n = self.size
            dist = 0
            for idx, tile in enumerate(self.cells):
                if tile == 0:
                    continue
                dist += abs(idx % n - tile % n) + abs(idx // n - tile // n)
            self._h = dist
        return self._h

    # ---------- Solvability ----------
    def inversions(self) -> int:
        arr = [x for x in self.cells if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        return inv

    def is_solvable(self) -> bool:
        """Parity rule relative to the blank-first goal:
           - N odd: inversions must be even
           - N even: inversions + blank row (0-based from the top) must be even
        """
        inv = self.inversions()
        if self.size % 2 == 1:
            return inv % 2 == 0
        return (inv + self._zero // self.size) % 2 == 0

    # ---------- Value semantics ----------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __hash__(self) -> int:
        return hash(self.cells)

    def __repr__(self) -> str:
        return f"Board({list(self.cells)!r}, size={self.size})"

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        return "\n".join(
            " ".join(("." * width) if t == 0 else str(t).rjust(width) for t in row)
            for row in self.rows()
        )

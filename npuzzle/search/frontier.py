from __future__ import annotations
from collections import deque
from typing import Callable, Deque, List, Tuple
import heapq
import itertools

from npuzzle.search.node import SearchNode


class Frontier:
    """Pending nodes; subclasses decide the add/pop discipline."""

    def __init__(self):
        self.peak = 0

    def add(self, node: SearchNode) -> None:
        raise NotImplementedError

    def pop(self) -> SearchNode:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    def _track(self) -> None:
        n = len(self)
        if n > self.peak:
            self.peak = n


class StackFrontier(Frontier):
    """LIFO: depth-first."""

    def __init__(self):
        super().__init__()
        self._items: List[SearchNode] = []

    def add(self, node: SearchNode) -> None:
        self._items.append(node)
        self._track()

    def pop(self) -> SearchNode:
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class QueueFrontier(Frontier):
    """FIFO: breadth-first."""

    def __init__(self):
        super().__init__()
        self._items: Deque[SearchNode] = deque()

    def add(self, node: SearchNode) -> None:
        self._items.append(node)
        self._track()

    def pop(self) -> SearchNode:
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class PriorityFrontier(Frontier):
    """Binary heap on key(node); equal keys pop in insertion order."""

    def __init__(self, key: Callable[[SearchNode], int]):
        super().__init__()
        self.key = key
        self._heap: List[Tuple[int, int, SearchNode]] = []
        self._counter = itertools.count()

    def add(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (self.key(node), next(self._counter), node))
        self._track()

    def pop(self) -> SearchNode:
        _, _, node = heapq.heappop(self._heap)
        return node

    def __len__(self) -> int:
        return len(self._heap)


class DepthBoundedFrontier(StackFrontier):
    """LIFO that drops nodes deeper than `cutoff`."""

    def __init__(self, cutoff: int):
        super().__init__()
        self.cutoff = cutoff
        self.dropped = 0

    def add(self, node: SearchNode) -> None:
        if node.path_cost() <= self.cutoff:
            super().add(node)
        else:
            self.dropped += 1

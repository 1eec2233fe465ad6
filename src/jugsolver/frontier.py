"""
Frontier Module - Ordering structures for not-yet-expanded search nodes.

Each strategy picks one frontier: FIFO for breadth-first, LIFO for
depth-first and a min-priority heap for uniform-cost and A*.
"""

import heapq
import itertools
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

from .move import Move
from .state import JugState


@dataclass(frozen=True)
class SearchNode:
    """
    Frontier entry: a state with the path and moves that reached it.

    Attributes:
        state: State at this node
        path: States from the search start to this node (inclusive)
        moves: Moves along the path (one fewer than path)
        cost: Cumulative path cost g(n)
    """
    state: JugState
    path: Tuple[JugState, ...]
    moves: Tuple[Move, ...] = ()
    cost: int = 0

    @classmethod
    def root(cls, state: JugState) -> 'SearchNode':
        """Frontier entry for the search start."""
        return cls(state=state, path=(state,))

    def child(self, state: JugState, move: Move) -> 'SearchNode':
        """Entry for a successor reached by one move."""
        return SearchNode(
            state=state,
            path=self.path + (state,),
            moves=self.moves + (move,),
            cost=self.cost + move.cost,
        )

    @property
    def depth(self) -> int:
        """Number of moves from the search start."""
        return len(self.path) - 1

    @property
    def parent(self) -> Optional[JugState]:
        """State this node was reached from, None for the root."""
        return self.path[-2] if len(self.path) > 1 else None


class Frontier(ABC):
    """Common interface of all frontier structures."""

    @abstractmethod
    def push(self, node: SearchNode, priority: float = 0) -> None:
        """Add a node; priority is ignored by unordered frontiers."""
        pass

    @abstractmethod
    def pop(self) -> SearchNode:
        """Remove and return the next node to expand."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def is_empty(self) -> bool:
        """True when no nodes remain."""
        return len(self) == 0


class FifoFrontier(Frontier):
    """First-in first-out queue."""

    def __init__(self):
        self._items: Deque[SearchNode] = deque()

    def push(self, node: SearchNode, priority: float = 0) -> None:
        self._items.append(node)

    def pop(self) -> SearchNode:
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class LifoFrontier(Frontier):
    """Last-in first-out stack."""

    def __init__(self):
        self._items: List[SearchNode] = []

    def push(self, node: SearchNode, priority: float = 0) -> None:
        self._items.append(node)

    def pop(self) -> SearchNode:
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class PriorityFrontier(Frontier):
    """
    Min-priority queue, stable for equal priorities.

    Entries are ordered by (priority, insertion counter), so among equal
    priorities the earliest pushed node pops first.
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, SearchNode]] = []
        self._counter = itertools.count()

    def push(self, node: SearchNode, priority: float = 0) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), node))

    def pop(self) -> SearchNode:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

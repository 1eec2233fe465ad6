"""
Search Tree Module - Bounded recording of discovered states for visualization.

The recorder is a per-search accumulator: strategies call record() when a
state is first discovered and the engine calls mark_path() once a solution
is known. Recording stops silently at the node cap; the search itself is
never affected by it.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set

from .heuristic import manhattan_distance
from .state import JugState

logger = logging.getLogger(__name__)


# Default cap on recorded nodes (visualization only)
MAX_TREE_NODES = 200


@dataclass(frozen=True)
class SearchTreeNode:
    """
    One discovered state in the recorded search tree.

    Attributes:
        key: Canonical state key (node identity)
        state: Fill state of this node
        parent_key: Key of the node that discovered it, None for the root
        depth: Moves from the search start
        heuristic: h(n) against the goal
        g_cost: Path cost at discovery (equals depth under unit cost)
        f_cost: g_cost + heuristic
        is_path: True if the node lies on the returned solution path
    """
    key: str
    state: JugState
    parent_key: Optional[str]
    depth: int
    heuristic: int
    g_cost: int
    f_cost: int
    is_path: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form for the rendering layer."""
        return {
            "id": self.key,
            "state": self.state.to_list(),
            "parentId": self.parent_key,
            "depth": self.depth,
            "isPath": self.is_path,
            "heuristic": self.heuristic,
            "gCost": self.g_cost,
            "fCost": self.f_cost,
        }


class SearchTreeRecorder:
    """
    Bounded, idempotent accumulator of SearchTreeNode entries.

    Attributes:
        goal_state: Goal used to compute heuristic fields
        max_nodes: Node cap; record() is a no-op once reached
    """

    def __init__(self, goal_state: Sequence[int], max_nodes: int = MAX_TREE_NODES):
        self.goal_state = JugState.from_list(goal_state)
        self.max_nodes = max_nodes
        self._nodes: List[SearchTreeNode] = []
        self._keys: Set[str] = set()

    def record(self, state: JugState, parent_key: Optional[str], depth: int) -> bool:
        """
        Record a newly discovered state.

        Args:
            state: Discovered state
            parent_key: Key of the discovering state, None for the root
            depth: Moves from the search start

        Returns:
            True if a node was added, False if the key was already
            recorded or the cap is reached
        """
        key = state.key
        if key in self._keys or self.is_full:
            return False

        h = manhattan_distance(state, self.goal_state)
        self._nodes.append(SearchTreeNode(
            key=key,
            state=state,
            parent_key=parent_key,
            depth=depth,
            heuristic=h,
            g_cost=depth,
            f_cost=depth + h,
        ))
        self._keys.add(key)

        if self.is_full:
            logger.debug(f"Search tree reached {self.max_nodes} nodes, recording stopped")
        return True

    def record_path(self, path: Sequence[JugState]) -> None:
        """Record a whole path as a parent-linked chain of nodes."""
        parent_key = None
        for depth, state in enumerate(path):
            self.record(state, parent_key, depth)
            parent_key = state.key

    def mark_path(self, path: Iterable[JugState]) -> List[SearchTreeNode]:
        """
        Produce the final tree with solution-path membership annotated.

        Args:
            path: Winning path of states

        Returns:
            Copy of the recorded nodes with is_path set
        """
        path_keys = {state.key for state in path}
        return [replace(node, is_path=node.key in path_keys) for node in self._nodes]

    @property
    def nodes(self) -> List[SearchTreeNode]:
        """Recorded nodes without path annotation."""
        return list(self._nodes)

    @property
    def is_full(self) -> bool:
        """True once the node cap is reached."""
        return len(self._nodes) >= self.max_nodes

    def __len__(self) -> int:
        return len(self._nodes)

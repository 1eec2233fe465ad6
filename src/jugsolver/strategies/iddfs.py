"""
Iterative Deepening Strategy - Depth-limited DFS with growing limits.

Finds the same solution depth as breadth-first search while only
keeping one branch (plus pending siblings) in memory.
"""

import logging
from typing import FrozenSet, List, Optional, Tuple

from ..base import SolverStrategy
from ..context import SearchContext
from ..factory import register_strategy
from ..frontier import SearchNode
from ..solution import SolverResult

logger = logging.getLogger(__name__)


# Largest depth limit tried before giving up
MAX_DEPTH_LIMIT = 1000


@register_strategy
class IterativeDeepeningStrategy(SolverStrategy):
    """
    Iterative deepening depth-first search.

    Each pass runs a depth-limited DFS with limit 0, 1, 2, ... A pass
    forbids cycles along the current branch only: every stack entry
    carries its own set of ancestor keys, so sibling branches may pass
    through states another branch already tried. Each entry copies its
    parent's set, so memory grows with depth times pending entries.

    Only the winning path is recorded in the search tree; the discarded
    passes are not captured.

    Attributes:
        max_depth_limit: Limits tried are 0 .. max_depth_limit - 1
    """
    name = "IDDFS"
    description = "Iterative deepening - DFS memory, BFS solution depth"
    optimal = True

    def __init__(self, max_depth_limit: int = MAX_DEPTH_LIMIT):
        self.max_depth_limit = max_depth_limit

    def search(self, context: SearchContext) -> Optional[SolverResult]:
        for limit in range(self.max_depth_limit):
            node, cutoff = self._depth_limited_search(context, limit)
            logger.debug(
                f"IDDFS limit={limit}: {'found' if node else 'no goal'}, "
                f"{context.nodes_expanded} nodes expanded so far"
            )

            if node is not None:
                context.recorder.record_path(node.path)
                return self._build_result(context, node.path, node.moves, 0)

            if not cutoff:
                # Nothing reached the limit, so deeper passes would repeat this one
                logger.debug(f"IDDFS search space exhausted at limit={limit}")
                return None

        return None

    def _depth_limited_search(
        self,
        context: SearchContext,
        limit: int
    ) -> Tuple[Optional[SearchNode], bool]:
        """
        One depth-limited pass.

        Args:
            context: Search context
            limit: Maximum depth (in moves) explored in this pass

        Returns:
            (goal node or None, True if any branch was cut off by the limit)
        """
        cutoff = False
        stack: List[Tuple[SearchNode, FrozenSet[str]]] = [
            (SearchNode.root(context.initial_state), frozenset())
        ]

        while stack:
            node, ancestors = stack.pop()
            context.note_expansion(node.depth)

            if context.is_goal(node.state):
                return node, cutoff

            if node.depth >= limit:
                cutoff = True
                continue

            branch_visited = ancestors | {node.state.key}
            children = [
                (node.child(next_state, move), branch_visited)
                for next_state, move in self.expand(node.state, context)
                if next_state.key not in branch_visited
            ]
            # Reversed so children pop in generator order
            stack.extend(reversed(children))

        return None, cutoff

"""
Depth-First Strategy - Stack-based search, first goal found wins.
"""

import logging
from typing import Optional, Set

from ..base import SolverStrategy
from ..context import SearchContext
from ..factory import register_strategy
from ..frontier import LifoFrontier, SearchNode
from ..solution import SolverResult

logger = logging.getLogger(__name__)


@register_strategy
class DepthFirstStrategy(SolverStrategy):
    """
    Depth-first search with an explicit stack.

    A state may be pushed several times before it is popped; it is
    marked visited at pop time and later duplicates are skipped.
    Successors are pushed in reverse generator order so they pop in
    generator order. Solutions are not necessarily shortest.
    """
    name = "DFS"
    description = "Depth-first - follows one branch as deep as possible"
    optimal = False

    def search(self, context: SearchContext) -> Optional[SolverResult]:
        frontier = LifoFrontier()
        frontier.push(SearchNode.root(context.initial_state))
        visited: Set[str] = set()

        while not frontier.is_empty():
            node = frontier.pop()
            key = node.state.key
            if key in visited:
                continue
            visited.add(key)
            context.note_expansion(node.depth)

            if context.is_goal(node.state):
                return self._build_result(context, node.path, node.moves, len(frontier))

            for next_state, move in reversed(self.expand(node.state, context)):
                if next_state.key in visited:
                    continue
                context.recorder.record(next_state, key, node.depth + 1)
                frontier.push(node.child(next_state, move))

        logger.debug(f"DFS exhausted {len(visited)} states")
        return None

"""
Breadth-First Strategy - Level-order search, minimum-move solutions.
"""

import logging
from typing import Optional, Set

from ..base import SolverStrategy
from ..context import SearchContext
from ..factory import register_strategy
from ..frontier import FifoFrontier, SearchNode
from ..solution import SolverResult

logger = logging.getLogger(__name__)


@register_strategy
class BreadthFirstStrategy(SolverStrategy):
    """
    Breadth-first search over the jug state graph.

    States are marked visited when enqueued, so each state enters the
    queue at most once. The queue is processed in non-decreasing depth
    order, so the first goal dequeued has the fewest moves.
    """
    name = "BFS"
    description = "Breadth-first - explores level by level, fewest moves"
    optimal = True

    def search(self, context: SearchContext) -> Optional[SolverResult]:
        frontier = FifoFrontier()
        frontier.push(SearchNode.root(context.initial_state))
        visited: Set[str] = {context.initial_state.key}

        while not frontier.is_empty():
            node = frontier.pop()
            context.note_expansion(node.depth)

            if context.is_goal(node.state):
                return self._build_result(context, node.path, node.moves, len(frontier))

            parent_key = node.state.key
            for next_state, move in self.expand(node.state, context):
                next_key = next_state.key
                if next_key in visited:
                    continue
                visited.add(next_key)
                context.recorder.record(next_state, parent_key, node.depth + 1)
                frontier.push(node.child(next_state, move))

        logger.debug(f"BFS exhausted {len(visited)} states")
        return None

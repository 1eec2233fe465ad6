"""
Cost-Ordered Strategies - Uniform-cost search and A*.

Both pop the frontier entry with the lowest priority and differ only in
how that priority is computed: g(n) for uniform-cost, g(n) + h(n) for A*.
"""

import logging
from abc import abstractmethod
from typing import Dict, Optional

from ..base import SolverStrategy
from ..context import SearchContext
from ..factory import register_strategy
from ..frontier import PriorityFrontier, SearchNode
from ..solution import SolverResult
from ..state import JugState

logger = logging.getLogger(__name__)


class CostOrderedStrategy(SolverStrategy):
    """
    Shared loop for priority-ordered search.

    A state may sit in the frontier several times with different costs.
    When an entry is popped and a cost no worse than its own was already
    settled for that state, the entry is dominated and discarded without
    expansion. Equal priorities pop in insertion order.
    """

    @abstractmethod
    def priority(self, cost: int, state: JugState, context: SearchContext) -> int:
        """Frontier ordering key for a state reached at the given cost."""
        pass

    def search(self, context: SearchContext) -> Optional[SolverResult]:
        frontier = PriorityFrontier()
        root = SearchNode.root(context.initial_state)
        frontier.push(root, self.priority(0, root.state, context))
        best_cost: Dict[str, int] = {}
        discarded = 0

        while not frontier.is_empty():
            node = frontier.pop()
            key = node.state.key

            settled = best_cost.get(key)
            if settled is not None and settled <= node.cost:
                discarded += 1
                continue
            best_cost[key] = node.cost

            context.note_expansion(node.depth)

            if context.is_goal(node.state):
                return self._build_result(context, node.path, node.moves, len(frontier))

            for next_state, move in self.expand(node.state, context):
                child = node.child(next_state, move)
                context.recorder.record(next_state, key, child.depth)
                frontier.push(child, self.priority(child.cost, next_state, context))

        logger.debug(
            f"{self.name} exhausted {len(best_cost)} states, "
            f"{discarded} dominated entries discarded"
        )
        return None


@register_strategy
class UniformCostStrategy(CostOrderedStrategy):
    """Uniform-cost search: expand the cheapest path first."""
    name = "UCS"
    description = "Uniform-cost - cheapest path first"
    optimal = True

    def priority(self, cost: int, state: JugState, context: SearchContext) -> int:
        return cost


@register_strategy
class AStarStrategy(CostOrderedStrategy):
    """
    A* search with the Manhattan-distance heuristic.

    Priority is f(n) = g(n) + h(n). A state is re-expanded whenever it is
    reached again more cheaply. The first goal popped is shortest only
    while h never overestimates the remaining moves; a single FILL or
    EMPTY can close more than one unit of Manhattan distance.
    """
    name = "A*"
    description = "A* - cost so far plus Manhattan distance to goal"
    optimal = False

    def priority(self, cost: int, state: JugState, context: SearchContext) -> int:
        return cost + context.heuristic(state)

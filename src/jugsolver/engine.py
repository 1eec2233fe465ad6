"""
Engine Module - solve() entry point used by the UI layer.
"""

import logging
from typing import Optional, Sequence

from .context import SearchContext
from .factory import create_strategy
from .solution import SolverResult
from .tree import MAX_TREE_NODES

logger = logging.getLogger(__name__)


def solve(
    initial_state: Sequence[int],
    goal_state: Sequence[int],
    capacities: Sequence[int],
    algorithm: str,
    max_tree_nodes: int = MAX_TREE_NODES
) -> Optional[SolverResult]:
    """
    Find a move sequence from initial_state to goal_state.

    Inputs are not validated; see rules.validate_puzzle() for the
    caller-side check.

    Args:
        initial_state: Starting fill levels
        goal_state: Target fill levels
        capacities: Jug capacities
        algorithm: "BFS", "DFS", "IDDFS", "UCS" or "A*"
        max_tree_nodes: Cap on recorded search tree nodes

    Returns:
        SolverResult with path, moves, tree and analytics, or None if the
        goal cannot be reached

    Raises:
        ValueError: If algorithm is not a registered tag
    """
    strategy = create_strategy(algorithm)
    context = SearchContext.create(initial_state, goal_state, capacities, max_tree_nodes)

    logger.debug(
        f"{algorithm} search: {context.initial_state} -> {context.goal_state}, "
        f"capacities={list(context.capacities)}"
    )

    result = strategy.search(context)

    if result is None:
        logger.info(
            f"{algorithm}: no solution from {context.initial_state} to {context.goal_state} "
            f"({context.nodes_expanded} nodes expanded, {context.elapsed_ms():.1f}ms)"
        )
        return None

    analytics = result.analytics
    logger.info(
        f"{algorithm}: solved in {analytics.solution_depth} moves "
        f"({analytics.nodes_expanded} nodes expanded, {analytics.time_taken_ms:.1f}ms)"
    )
    return result

"""
Heuristic Module - Distance estimates used by informed search.
"""

from typing import Sequence


def manhattan_distance(state: Sequence[int], goal_state: Sequence[int]) -> int:
    """
    Sum of absolute per-jug differences between state and goal.

    Used as h(n) by A* and reported as metadata by the other strategies.

    Args:
        state: Current fill levels
        goal_state: Target fill levels

    Returns:
        Non-negative integer distance
    """
    return sum(abs(a - b) for a, b in zip(state, goal_state))

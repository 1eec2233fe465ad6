"""
Puzzle Rules Module - Move generation, goal testing and input validation.
"""

from typing import List, Sequence, Tuple

from .move import Move
from .state import JugState


class PuzzleConfigError(ValueError):
    """Raised by validate_puzzle() for a malformed puzzle definition."""


def get_possible_moves(
    state: Sequence[int],
    capacities: Sequence[int]
) -> List[Tuple[JugState, Move]]:
    """
    Enumerate every legal move from a state.

    Order is fixed: for each jug i ascending, FILL(i), then EMPTY(i),
    then POUR(i, j) for each j != i ascending. Search strategies rely
    on this order for DFS branch order and priority tie-breaks.

    Args:
        state: Current fill levels
        capacities: Jug capacities

    Returns:
        List of (next_state, move) pairs
    """
    levels = tuple(state)
    n = len(levels)
    moves = []

    for i in range(n):
        if levels[i] < capacities[i]:
            next_levels = list(levels)
            next_levels[i] = capacities[i]
            moves.append((JugState(tuple(next_levels)), Move.fill(i)))

        if levels[i] > 0:
            next_levels = list(levels)
            next_levels[i] = 0
            moves.append((JugState(tuple(next_levels)), Move.empty(i)))

        for j in range(n):
            if i != j and levels[i] > 0 and levels[j] < capacities[j]:
                amount = min(levels[i], capacities[j] - levels[j])
                next_levels = list(levels)
                next_levels[i] -= amount
                next_levels[j] += amount
                moves.append((JugState(tuple(next_levels)), Move.pour(i, j)))

    return moves


def is_goal_reached(state: Sequence[int], goal_state: Sequence[int]) -> bool:
    """Element-wise equality of two fill states."""
    return tuple(state) == tuple(goal_state)


def validate_puzzle(
    capacities: Sequence[int],
    initial_state: Sequence[int],
    goal_state: Sequence[int]
) -> None:
    """
    Check that a puzzle definition is well formed.

    solve() does not call this; it is for the configuration layer
    that builds puzzles from user input.

    Raises:
        PuzzleConfigError: On empty or mismatched vectors, non-positive
            capacities, or levels outside [0, capacity]
    """
    n = len(capacities)
    if n == 0:
        raise PuzzleConfigError("At least one jug is required")

    if len(initial_state) != n or len(goal_state) != n:
        raise PuzzleConfigError(
            f"Expected {n} levels, got initial={len(initial_state)} goal={len(goal_state)}"
        )

    for i, cap in enumerate(capacities):
        if cap <= 0:
            raise PuzzleConfigError(f"Jug {i + 1} capacity must be positive, got {cap}")

    for name, levels in (("initial", initial_state), ("goal", goal_state)):
        for i, (level, cap) in enumerate(zip(levels, capacities)):
            if not 0 <= level <= cap:
                raise PuzzleConfigError(
                    f"Jug {i + 1} {name} level {level} outside [0, {cap}]"
                )

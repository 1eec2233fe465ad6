"""
Hint Module - Suggests the next move from the player's current state.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Sequence

from .engine import solve
from .move import Move, MoveType
from .rules import is_goal_reached

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Hint:
    """
    Suggested next action.

    Attributes:
        next_move: Move to play next (a placeholder when none applies)
        steps_to_goal: Moves remaining on the found solution, 0 when the
            goal is already reached, -1 when it is unreachable
        message: Text shown to the player
    """
    next_move: Move
    steps_to_goal: int
    message: str

    @property
    def is_reachable(self) -> bool:
        return self.steps_to_goal >= 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nextMove": self.next_move.to_dict(),
            "stepsToGoal": self.steps_to_goal,
            "message": self.message,
        }


def describe_suggestion(move: Move) -> str:
    """Imperative suggestion for a move, with 1-based jug numbers."""
    if move.type is MoveType.FILL:
        return f"Try filling Jug {move.jug_index + 1}."
    if move.type is MoveType.EMPTY:
        return f"Try emptying Jug {move.jug_index + 1}."
    return f"Try pouring Jug {move.jug_index + 1} into Jug {move.target_jug_index + 1}."


def get_hint(
    current_state: Sequence[int],
    goal_state: Sequence[int],
    capacities: Sequence[int],
    algorithm: str = "BFS"
) -> Hint:
    """
    Derive the next move from a full search starting at current_state.

    Args:
        current_state: Player's current fill levels
        goal_state: Target fill levels
        capacities: Jug capacities
        algorithm: Search algorithm tag

    Returns:
        Hint for the next move, an "already there" hint, or an
        unreachable hint with steps_to_goal == -1
    """
    if is_goal_reached(current_state, goal_state):
        return Hint(
            next_move=Move(type=MoveType.EMPTY, jug_index=0, label="Goal reached"),
            steps_to_goal=0,
            message="You've already reached the goal! Great job.",
        )

    result = solve(current_state, goal_state, capacities, algorithm)

    if result is None:
        logger.debug(f"No hint available from {list(current_state)} using {algorithm}")
        return Hint(
            next_move=Move(type=MoveType.EMPTY, jug_index=0, label="No solution"),
            steps_to_goal=-1,
            message=(
                f"The AI ({algorithm}) couldn't find a solution from this state. "
                f"Try a different strategy or reset."
            ),
        )

    next_move = result.moves[0]
    steps = result.move_count
    plural = "" if steps == 1 else "s"

    return Hint(
        next_move=next_move,
        steps_to_goal=steps,
        message=(
            f"{describe_suggestion(next_move)} You are {steps} step{plural} "
            f"away from the goal using {algorithm}."
        ),
    )

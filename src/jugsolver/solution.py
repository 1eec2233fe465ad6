"""
Solution Module - Search results, analytics and step-by-step playback.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .move import Move
from .state import JugState
from .tree import SearchTreeNode


@dataclass
class SearchAnalytics:
    """
    Observational statistics for one search call.

    Attributes:
        algorithm: Strategy tag that produced the result
        nodes_expanded: States popped and goal-tested (once per expansion)
        frontier_size: Entries left in the frontier at termination
        time_taken_ms: Wall-clock time of the call in milliseconds
        max_depth: Deepest expanded state, in moves
        solution_depth: Number of moves in the solution
        current_heuristic: h(n) of the search start state
    """
    algorithm: str = ""
    nodes_expanded: int = 0
    frontier_size: int = 0
    time_taken_ms: float = 0.0
    max_depth: int = 0
    solution_depth: int = 0
    current_heuristic: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "nodesExpanded": self.nodes_expanded,
            "frontierSize": self.frontier_size,
            "timeTakenMs": self.time_taken_ms,
            "maxDepth": self.max_depth,
            "solutionDepth": self.solution_depth,
            "currentHeuristic": self.current_heuristic,
        }


@dataclass
class SolverResult:
    """
    Successful result of a search.

    Attributes:
        path: States from the initial state to the goal (inclusive)
        moves: Moves along the path, len(path) - 1 of them
        analytics: Search statistics
        tree: Recorded search tree with solution path marked
    """
    path: List[JugState] = field(default_factory=list)
    moves: List[Move] = field(default_factory=list)
    analytics: SearchAnalytics = field(default_factory=SearchAnalytics)
    tree: List[SearchTreeNode] = field(default_factory=list)

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    def get_move(self, index: int) -> Move:
        """
        Get move at specific index.

        Raises:
            IndexError: If index out of range
        """
        return self.moves[index]

    def get_state_after_move(self, index: int) -> JugState:
        """
        Get state after executing move at index.

        Raises:
            IndexError: If index out of range
        """
        return self.path[index + 1]

    def to_dict(self) -> Dict[str, Any]:
        """
        Rendering-ready form of the result.

        Keys follow the camelCase shape consumed by the tree view.
        """
        return {
            "path": [state.to_list() for state in self.path],
            "moves": [move.to_dict() for move in self.moves],
            "tree": [node.to_dict() for node in self.tree],
            "analytics": self.analytics.to_dict(),
        }


@dataclass
class SolutionCursor:
    """
    Playback position over an already computed solution.

    Used by auto-solve and step-through views to walk the moves one at a
    time. Timing and animation belong to the caller.

    Attributes:
        result: The solved result being played back
        move_index: Current position in move sequence (0 = first move)
    """
    result: SolverResult
    move_index: int = 0

    @property
    def current_move(self) -> Optional[Move]:
        """Get next move to play, or None if exhausted."""
        if self.move_index < len(self.result.moves):
            return self.result.moves[self.move_index]
        return None

    @property
    def expected_state_before(self) -> Optional[JugState]:
        """Expected state before the current move executes."""
        if self.move_index < len(self.result.path):
            return self.result.path[self.move_index]
        return None

    @property
    def expected_state_after(self) -> Optional[JugState]:
        """Expected state after the current move executes."""
        if self.move_index + 1 < len(self.result.path):
            return self.result.path[self.move_index + 1]
        return None

    @property
    def is_exhausted(self) -> bool:
        """True if all moves have been played."""
        return self.move_index >= len(self.result.moves)

    @property
    def moves_remaining(self) -> int:
        """Number of moves left in the solution."""
        return max(0, len(self.result.moves) - self.move_index)

    @property
    def total_moves(self) -> int:
        return len(self.result.moves)

    def advance(self) -> Optional[Move]:
        """
        Move to next move in sequence.

        Returns:
            The move that was just played, or None if exhausted
        """
        if self.is_exhausted:
            return None
        played = self.current_move
        self.move_index += 1
        return played

    def peek_moves(self, count: int = 3) -> List[Move]:
        """
        Preview upcoming moves without advancing.

        Args:
            count: Number of moves to preview

        Returns:
            List of upcoming moves (may be shorter than count)
        """
        start = self.move_index
        end = min(start + count, len(self.result.moves))
        return self.result.moves[start:end]

    def matches(self, actual: JugState) -> bool:
        """
        Check whether an observed state is where playback expects to be.

        Args:
            actual: Current state of the jugs

        Returns:
            True if actual equals the state before the current move
        """
        expected = self.expected_state_before
        if expected is None:
            return False
        return expected == JugState.from_list(actual)

    def reset(self) -> None:
        """Rewind to the first move."""
        self.move_index = 0

"""
Search Context Module - Per-call accumulator shared by the strategies.
"""

import time
from dataclasses import dataclass, field
from typing import Sequence, Tuple

from .heuristic import manhattan_distance
from .move import Move
from .rules import is_goal_reached
from .solution import SearchAnalytics, SolverResult
from .state import JugState
from .tree import MAX_TREE_NODES, SearchTreeRecorder


@dataclass
class SearchContext:
    """
    Everything one solve() call owns: the puzzle, the tree recorder and
    the running statistics. Created per call and discarded at return.

    Attributes:
        initial_state: Search start
        goal_state: Target state
        capacities: Jug capacities
        max_tree_nodes: Cap on recorded tree nodes
        recorder: Bounded search tree accumulator
        nodes_expanded: States popped and goal-tested so far
        max_depth: Deepest expanded state so far
        start_time: perf_counter() at creation
    """
    initial_state: JugState
    goal_state: JugState
    capacities: Tuple[int, ...]
    max_tree_nodes: int = MAX_TREE_NODES
    recorder: SearchTreeRecorder = field(init=False)
    nodes_expanded: int = 0
    max_depth: int = 0
    start_time: float = field(default_factory=time.perf_counter)

    def __post_init__(self):
        self.initial_state = JugState.from_list(self.initial_state)
        self.goal_state = JugState.from_list(self.goal_state)
        self.capacities = tuple(self.capacities)
        self.recorder = SearchTreeRecorder(self.goal_state, self.max_tree_nodes)
        # The search start is always the tree root
        self.recorder.record(self.initial_state, None, 0)

    @classmethod
    def create(
        cls,
        initial_state: Sequence[int],
        goal_state: Sequence[int],
        capacities: Sequence[int],
        max_tree_nodes: int = MAX_TREE_NODES
    ) -> 'SearchContext':
        """Build a context from plain integer sequences."""
        return cls(
            initial_state=JugState.from_list(initial_state),
            goal_state=JugState.from_list(goal_state),
            capacities=tuple(capacities),
            max_tree_nodes=max_tree_nodes,
        )

    def is_goal(self, state: JugState) -> bool:
        return is_goal_reached(state, self.goal_state)

    def heuristic(self, state: JugState) -> int:
        """h(n) against this search's goal."""
        return manhattan_distance(state, self.goal_state)

    def note_expansion(self, depth: int) -> None:
        """Count one expanded state at the given depth."""
        self.nodes_expanded += 1
        self.max_depth = max(self.max_depth, depth)

    def elapsed_ms(self) -> float:
        """Milliseconds since the search started."""
        return (time.perf_counter() - self.start_time) * 1000

    def build_result(
        self,
        algorithm: str,
        path: Sequence[JugState],
        moves: Sequence[Move],
        frontier_size: int
    ) -> SolverResult:
        """
        Assemble the SolverResult for a found solution.

        Marks the recorded tree nodes lying on the path.
        """
        path = list(path)
        moves = list(moves)
        return SolverResult(
            path=path,
            moves=moves,
            tree=self.recorder.mark_path(path),
            analytics=SearchAnalytics(
                algorithm=algorithm,
                nodes_expanded=self.nodes_expanded,
                frontier_size=frontier_size,
                time_taken_ms=self.elapsed_ms(),
                max_depth=self.max_depth,
                solution_depth=len(moves),
                current_heuristic=self.heuristic(self.initial_state),
            ),
        )

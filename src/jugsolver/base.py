"""
Base Strategy Module - Abstract base class for search strategies.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from .context import SearchContext
from .move import Move
from .rules import get_possible_moves
from .solution import SolverResult
from .state import JugState


class SolverStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses must implement the search() method and define
    name and description class attributes.

    Attributes:
        name: Algorithm tag used to select the strategy
        description: Human-readable description for UI
        optimal: True if the strategy returns minimum-move solutions
    """
    name: str = "base"
    description: str = "Base strategy"
    optimal: bool = False

    @abstractmethod
    def search(self, context: SearchContext) -> Optional[SolverResult]:
        """
        Search from context.initial_state to context.goal_state.

        Runs to completion: returns a result for the first goal reached,
        or None once the search space is exhausted.

        Args:
            context: Per-call puzzle, tree recorder and counters

        Returns:
            SolverResult, or None if the goal is unreachable
        """
        pass

    def expand(self, state: JugState, context: SearchContext) -> List[Tuple[JugState, Move]]:
        """
        Generate the successors of a state in generator order.

        Args:
            state: State being expanded
            context: Search context (for capacities)

        Returns:
            List of (next_state, move) pairs
        """
        return get_possible_moves(state, context.capacities)

    def _build_result(
        self,
        context: SearchContext,
        path,
        moves,
        frontier_size: int
    ) -> SolverResult:
        """Build SolverResult tagged with this strategy's name."""
        return context.build_result(self.name, path, moves, frontier_size)

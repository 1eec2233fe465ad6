"""
jugsolver - State-space search engine for generalized water jug puzzles.

Given N jugs with integer capacities, an initial fill state and a goal
fill state, finds a sequence of FILL/EMPTY/POUR moves reaching the goal.
Five interchangeable strategies are registered: BFS, DFS, IDDFS, UCS
and A*. Every search also records a bounded trace of the explored tree
for visualization.

Public API:
    - get_possible_moves(): Legal successors of a state
    - is_goal_reached(): Goal test
    - solve(): Run a search, returns SolverResult or None
    - get_hint(): Next suggested move from the current state
    - JugState, Move, MoveType: State and move model
    - SolverResult, SearchAnalytics, SearchTreeNode: Search output
    - SolutionCursor: Step-by-step playback over a result
    - SolverStrategy, create_strategy(), get_strategy_names(): Strategy framework

Usage:
    from jugsolver import solve, get_hint

    result = solve([0, 0], [4, 0], [5, 3], "BFS")
    if result is None:
        print("No solution")
    else:
        for move in result.moves:
            print(move.description)

    hint = get_hint([0, 0], [4, 0], [5, 3], "A*")
    print(hint.message)
"""

# Core data structures
from .state import JugState
from .move import Move, MoveType, MOVE_COST
from .rules import get_possible_moves, is_goal_reached, validate_puzzle, PuzzleConfigError
from .heuristic import manhattan_distance
from .tree import SearchTreeNode, SearchTreeRecorder, MAX_TREE_NODES
from .solution import SearchAnalytics, SolverResult, SolutionCursor
from .context import SearchContext

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .engine import solve
from .hint import Hint, get_hint

__all__ = [
    # Data structures
    "JugState",
    "Move",
    "MoveType",
    "MOVE_COST",
    "SearchTreeNode",
    "SearchTreeRecorder",
    "MAX_TREE_NODES",
    "SearchAnalytics",
    "SolverResult",
    "SolutionCursor",
    "SearchContext",
    "Hint",
    # Rules
    "get_possible_moves",
    "is_goal_reached",
    "validate_puzzle",
    "PuzzleConfigError",
    "manhattan_distance",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "register_strategy",
    # Entry points
    "solve",
    "get_hint",
]

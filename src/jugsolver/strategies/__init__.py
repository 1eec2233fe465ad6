"""
Strategies Package - Concrete search strategy implementations.

Import this module to register all built-in strategies. Registration
order is the order algorithms are offered to the UI.
"""

from .bfs import BreadthFirstStrategy
from .dfs import DepthFirstStrategy
from .iddfs import IterativeDeepeningStrategy
from .best_first import CostOrderedStrategy, UniformCostStrategy, AStarStrategy

__all__ = [
    "BreadthFirstStrategy",
    "DepthFirstStrategy",
    "IterativeDeepeningStrategy",
    "CostOrderedStrategy",
    "UniformCostStrategy",
    "AStarStrategy",
]

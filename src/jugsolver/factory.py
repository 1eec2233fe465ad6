"""
Strategy Factory Module - Registry and factory for strategy instantiation.
"""

from typing import Dict, List, Type, Any

from .base import SolverStrategy


# Global registry of strategies, keyed by algorithm tag
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Decorator to register a strategy class.

    Usage:
        @register_strategy
        class MyStrategy(SolverStrategy):
            name = "MY"
            ...

    Args:
        cls: Strategy class to register

    Returns:
        The same class (for decorator chaining)
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Create a strategy instance by algorithm tag.

    Args:
        name: Algorithm tag ("BFS", "DFS", "IDDFS", "UCS" or "A*")
        **kwargs: Additional arguments passed to strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy name not found
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown algorithm: {name}. Available: {available}")
    return _STRATEGIES[name](**kwargs)


def get_strategy_names() -> List[str]:
    """
    Get list of available algorithm tags.

    Returns:
        List of registered tags in registration order
    """
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, Any]]:
    """
    Get name, description and optimality for all registered strategies.

    Returns:
        List of dicts with 'name', 'description' and 'optimal' keys
    """
    return [
        {"name": cls.name, "description": cls.description, "optimal": cls.optimal}
        for cls in _STRATEGIES.values()
    ]

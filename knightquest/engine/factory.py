"""
Strategy Factory Module - Registry and factory for strategy instantiation.
"""

from typing import Dict, List, Type, Any

from .base import SearchStrategy


# Global registry of strategies (class objects only, no per-run state)
_STRATEGIES: Dict[str, Type[SearchStrategy]] = {}


def register_strategy(cls: Type[SearchStrategy]) -> Type[SearchStrategy]:
    """
    Decorator to register a strategy class.

    Usage:
        @register_strategy
        class MyStrategy(SearchStrategy):
            name = "my_strategy"
            ...

    Args:
        cls: Strategy class to register

    Returns:
        The same class (for decorator chaining)
    """
    _STRATEGIES[cls.name] = cls
    return cls


def _resolve_name(name: str) -> str:
    """Map a registry name or display label ("A*", "ids") to a registry name."""
    wanted = name.strip().lower()
    for key, cls in _STRATEGIES.items():
        if wanted in (key.lower(), cls.label.lower()):
            return key
    available = ", ".join(_STRATEGIES.keys())
    raise ValueError(f"Unknown strategy: {name}. Available: {available}")


def create_strategy(name: str, **kwargs: Any) -> SearchStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name or label (e.g., "bfs", "A*")
        **kwargs: Additional arguments passed to strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy name not found
    """
    return _STRATEGIES[_resolve_name(name)](**kwargs)


def get_strategy_names() -> List[str]:
    """
    Get list of available strategy names.

    Returns:
        List of registered strategy names, in registration order
    """
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Get name, label and description for all registered strategies.

    Returns:
        List of dicts with 'name', 'label' and 'description' keys
    """
    return [
        {"name": cls.name, "label": cls.label, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """
    Get the default strategy name.

    Returns:
        Default strategy name ("astar" if available, else first registered)
    """
    if "astar" in _STRATEGIES:
        return "astar"
    if _STRATEGIES:
        return next(iter(_STRATEGIES.keys()))
    return ""

"""
Strategies Package - Concrete search strategy implementations.

Import this module to register all built-in strategies. Registration
order (DFS, BFS, A*, IDS) is the order used by comparison tables.
"""

from .dfs import DFSStrategy
from .bfs import BFSStrategy
from .astar import AStarStrategy
from .ids import IDSStrategy, DEFAULT_MAX_DEPTH, depth_limited_search

__all__ = [
    "DFSStrategy",
    "BFSStrategy",
    "AStarStrategy",
    "IDSStrategy",
    "DEFAULT_MAX_DEPTH",
    "depth_limited_search",
]

"""
Engine Package - Knight-and-keys search engine.

A knight on an 8x8 board must step on any one of three keys before it
may enter the door cell. Four interchangeable strategies (DFS, BFS, A*,
IDS) search the (cell, has_key) state space and return a uniform
result record; BFS provides the minimum-move baseline.

Public API:
    - Cell, Puzzle: Immutable board inputs
    - SearchState: Node of one search call
    - SolveResult, EnrichedResult, SolveStatus: Result records
    - SearchStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - solve(), benchmark(), compare(): Validated entry points

Usage:
    from knightquest.engine import Cell, solve

    result = solve("A*", Cell(0, 0), [Cell(2, 1), Cell(7, 7), Cell(7, 6)], Cell(2, 1))
    if result.path is None:
        print("no solution")
    else:
        print(result.moves, result.chosen_key_index, result.is_optimal)
"""

# Core data structures
from .board import (
    BOARD_SIZE,
    KEY_SLOTS,
    KNIGHT_MOVES,
    Cell,
    InvalidConfigurationError,
    Puzzle,
    in_bounds,
    is_goal,
    is_key_square,
)
from .state import SearchState, successors, reconstruct_path
from .context import SearchContext
from .result import EnrichedResult, SolveResult, SolveStatus, key_label
from .heuristics import knight_heuristic, manhattan
from .enrichment import chosen_key_index, enrich

# Strategy framework
from .base import SearchStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .runner import (
    DEFAULT_REPEATS,
    ComparisonReport,
    benchmark,
    compare,
    run_repeated,
    solve,
)

__all__ = [
    # Board
    "BOARD_SIZE",
    "KEY_SLOTS",
    "KNIGHT_MOVES",
    "Cell",
    "InvalidConfigurationError",
    "Puzzle",
    "in_bounds",
    "is_goal",
    "is_key_square",
    # State graph
    "SearchState",
    "successors",
    "reconstruct_path",
    "SearchContext",
    # Results
    "EnrichedResult",
    "SolveResult",
    "SolveStatus",
    "key_label",
    "knight_heuristic",
    "manhattan",
    "chosen_key_index",
    "enrich",
    # Strategy framework
    "SearchStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    # Runner
    "DEFAULT_REPEATS",
    "ComparisonReport",
    "benchmark",
    "compare",
    "run_repeated",
    "solve",
]

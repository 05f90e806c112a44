"""
DFS Strategy - Uninformed depth-first search over (cell, has_key) states.
"""

import time
from typing import Optional

from ..base import SearchStrategy
from ..board import is_goal
from ..context import SearchContext
from ..result import SolveResult
from ..state import SearchState, successors
from ..factory import register_strategy


@register_strategy
class DFSStrategy(SearchStrategy):
    """
    Recursive depth-first search.

    Follows KNIGHT_MOVES order and returns the first goal it reaches,
    which is not necessarily the shortest path. A signature is marked
    visited the moment it is generated, so each of the 128 signatures
    is entered at most once and the search always terminates.
    """
    name = "dfs"
    label = "DFS"
    description = "Depth-First Search - first path found, not guaranteed shortest"

    def search(self, context: SearchContext) -> SolveResult:
        """
        Run depth-first search from the puzzle start.

        Args:
            context: Search context with a validated puzzle

        Returns:
            SolveResult with the first path found
        """
        start_time = time.perf_counter()

        keys, door = context.keys, context.door
        visited = context.new_marker_table()
        start = context.initial_state()
        visited[start.signature] = True
        expanded = 0

        def visit(state: SearchState) -> Optional[SearchState]:
            nonlocal expanded
            expanded += 1
            if is_goal(state, door):
                return state

            for child in successors(state, keys):
                if visited[child.signature]:
                    continue
                visited[child.signature] = True
                found = visit(child)
                if found is not None:
                    return found
            return None

        goal = visit(start)

        return self._build_result(goal, expanded, start_time)

"""
BFS Strategy - Breadth-first search, the minimum-move baseline.
"""

import time
from collections import deque

from ..base import SearchStrategy
from ..board import is_goal
from ..context import SearchContext
from ..result import SolveResult
from ..state import successors
from ..factory import register_strategy


@register_strategy
class BFSStrategy(SearchStrategy):
    """
    FIFO breadth-first search.

    Every move costs one, so the first goal dequeued is reached in the
    minimum possible number of moves. Other strategies are judged
    "optimal" against this move count.
    """
    name = "bfs"
    label = "BFS"
    description = "Breadth-First Search - minimum moves, optimality baseline"

    def search(self, context: SearchContext) -> SolveResult:
        """
        Run breadth-first search from the puzzle start.

        Args:
            context: Search context with a validated puzzle

        Returns:
            SolveResult with a shortest path
        """
        start_time = time.perf_counter()

        visited = context.new_marker_table()
        start = context.initial_state()
        visited[start.signature] = True
        queue = deque([start])

        expanded = 0
        goal = None

        while queue:
            state = queue.popleft()
            expanded += 1
            if is_goal(state, context.door):
                goal = state
                break

            for child in successors(state, context.keys):
                if not visited[child.signature]:
                    visited[child.signature] = True
                    queue.append(child)

        return self._build_result(goal, expanded, start_time)

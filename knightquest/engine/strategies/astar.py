"""
A* Strategy - Best-first search ordered by f = g + h.
"""

import heapq
import itertools
import time

from ..base import SearchStrategy
from ..board import is_goal
from ..context import SearchContext
from ..heuristics import knight_heuristic
from ..result import SolveResult
from ..state import successors
from ..factory import register_strategy


@register_strategy
class AStarStrategy(SearchStrategy):
    """
    A* search with the knight/key heuristic.

    The open set is a binary heap keyed by (f, arrival order), so equal
    f-scores pop in insertion order. A signature is closed the first
    time it is popped; later copies of it are skipped. A successor is
    pushed only if its g improves on the best g recorded for its exact
    (cell, has_key) signature.

    The result length is compared against BFS by the caller rather than
    assumed optimal.
    """
    name = "astar"
    label = "A*"
    description = "A* Search - heuristic best-first (g + h)"

    def search(self, context: SearchContext) -> SolveResult:
        """
        Run A* from the puzzle start.

        Args:
            context: Search context with a validated puzzle

        Returns:
            SolveResult with the first goal popped from the open set
        """
        start_time = time.perf_counter()

        keys, door = context.keys, context.door
        closed = context.new_marker_table()
        g_score = context.new_cost_table()
        counter = itertools.count()

        start = context.initial_state()
        g_score[start.signature] = 0
        h = knight_heuristic(start.position, False, keys, door)
        open_heap = [(h, next(counter), start)]

        expanded = 0
        goal = None

        while open_heap:
            _f, _order, state = heapq.heappop(open_heap)
            if closed[state.signature]:
                continue
            closed[state.signature] = True
            expanded += 1

            if is_goal(state, door):
                goal = state
                break

            for child in successors(state, keys):
                tentative_g = state.depth + 1
                if tentative_g < g_score[child.signature]:
                    g_score[child.signature] = tentative_g
                    f = tentative_g + knight_heuristic(
                        child.position, child.has_key, keys, door
                    )
                    heapq.heappush(open_heap, (f, next(counter), child))

        return self._build_result(goal, expanded, start_time)

"""
IDS Strategy - Iterative deepening depth-first search with a depth ceiling.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..base import SearchStrategy
from ..board import is_goal
from ..context import SearchContext
from ..result import SolveResult, SolveStatus
from ..state import SearchState, successors
from ..factory import register_strategy

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 15


@dataclass
class DepthLimitedOutcome:
    """
    Result of one depth-limited pass.

    Attributes:
        goal: Goal state if one was reached within the limit
        nodes_expanded: States expanded in this pass
        cutoff: True if some branch stopped at the limit without a goal
    """
    goal: Optional[SearchState] = None
    nodes_expanded: int = 0
    cutoff: bool = False


def depth_limited_search(context: SearchContext, limit: int) -> DepthLimitedOutcome:
    """
    Depth-first search that never descends below `limit` moves.

    Uses a fresh shallowest-depth table for this pass only. A signature
    is re-entered only when reached at a strictly smaller depth than
    before, so a goal within the limit is never hidden behind an earlier,
    deeper visit of the same signature.

    Args:
        context: Search context with a validated puzzle
        limit: Maximum depth to expand to

    Returns:
        DepthLimitedOutcome for this pass
    """
    keys, door = context.keys, context.door
    shallowest: np.ndarray = context.new_cost_table()
    outcome = DepthLimitedOutcome()

    start = context.initial_state()
    shallowest[start.signature] = 0

    def visit(state: SearchState) -> Optional[SearchState]:
        outcome.nodes_expanded += 1
        if is_goal(state, door):
            return state
        if state.depth == limit:
            outcome.cutoff = True
            return None

        for child in successors(state, keys):
            if shallowest[child.signature] <= child.depth:
                continue
            shallowest[child.signature] = child.depth
            found = visit(child)
            if found is not None:
                return found
        return None

    outcome.goal = visit(start)
    return outcome


@register_strategy
class IDSStrategy(SearchStrategy):
    """
    Iterative deepening: depth-limited DFS for limits 0, 1, ..., max_depth.

    The first limit that reaches a goal gives a path with the BFS move
    count. If the minimum lies beyond max_depth the result is "no
    solution" with status DEPTH_LIMIT_EXCEEDED, even though a solution
    exists. A pass that finishes without any cutoff has exhausted the
    state space, reported as UNSOLVABLE.
    """
    name = "ids"
    label = "IDS"
    description = "Iterative Deepening DFS - minimum moves up to a depth ceiling"

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize iterative deepening.

        Args:
            max_depth: Deepest limit tried (inclusive)
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        self.max_depth = max_depth

    def search(self, context: SearchContext) -> SolveResult:
        """
        Run iterative deepening from the puzzle start.

        Args:
            context: Search context with a validated puzzle

        Returns:
            SolveResult; nodes_expanded sums every pass
        """
        start_time = time.perf_counter()

        total_expanded = 0
        status = SolveStatus.DEPTH_LIMIT_EXCEEDED

        for limit in range(self.max_depth + 1):
            outcome = depth_limited_search(context, limit)
            total_expanded += outcome.nodes_expanded

            if outcome.goal is not None:
                return self._build_result(outcome.goal, total_expanded, start_time)

            if not outcome.cutoff:
                status = SolveStatus.UNSOLVABLE
                break

        if status is SolveStatus.DEPTH_LIMIT_EXCEEDED:
            logger.info(f"IDS reached its depth ceiling ({self.max_depth}) without a goal")

        return self._build_result(None, total_expanded, start_time, status=status)

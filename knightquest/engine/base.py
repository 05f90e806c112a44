"""
Base Strategy Module - Abstract base class for search strategies.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Optional

from .context import SearchContext
from .result import SolveResult, SolveStatus
from .state import SearchState, reconstruct_path

logger = logging.getLogger(__name__)


class SearchStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses must implement the search() method and define
    name, label and description class attributes.

    Attributes:
        name: Short identifier for the strategy (registry key)
        label: Display name reported in results
        description: Human-readable description for listings
    """
    name: str = "base"
    label: str = "Base"
    description: str = "Base strategy"

    @abstractmethod
    def search(self, context: SearchContext) -> SolveResult:
        """
        Run one traversal for the given puzzle.

        All visited/closed/cost tables must come from the context so
        nothing survives between calls.

        Args:
            context: Search context with a validated puzzle

        Returns:
            SolveResult with path (or None), timing and expansion count
        """
        pass

    def _build_result(
        self,
        goal: Optional[SearchState],
        nodes_expanded: int,
        start_time: float,
        status: Optional[SolveStatus] = None
    ) -> SolveResult:
        """Build SolveResult from computation results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        if status is None:
            status = SolveStatus.SOLVED if goal is not None else SolveStatus.UNSOLVABLE
        path = reconstruct_path(goal) if goal is not None else None

        logger.debug(
            f"{self.label}: status={status.name} "
            f"moves={len(path) - 1 if path else None} "
            f"expanded={nodes_expanded} time={elapsed_ms:.3f}ms"
        )

        return SolveResult(
            algorithm=self.label,
            path=path,
            elapsed_ms=elapsed_ms,
            nodes_expanded=nodes_expanded,
            status=status,
        )

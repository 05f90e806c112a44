"""
Result Module - Uniform records returned by every search strategy.
"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional, Tuple

from .state import SearchState


class SolveStatus(Enum):
    """
    Outcome of a strategy run.

    States:
        SOLVED: A goal state was reached
        UNSOLVABLE: The whole reachable state space was exhausted
        DEPTH_LIMIT_EXCEEDED: The depth ceiling was hit with branches still
            cut off, so a deeper solution may exist
    """
    SOLVED = auto()
    UNSOLVABLE = auto()
    DEPTH_LIMIT_EXCEEDED = auto()


def key_label(index: Optional[int]) -> str:
    """Human label for a key slot: 0 -> "Key 1", None -> "none"."""
    return f"Key {index + 1}" if index is not None else "none"


@dataclass(frozen=True)
class SolveResult:
    """
    Result of one strategy run.

    Attributes:
        algorithm: Display name of the strategy ("DFS", "BFS", "A*", "IDS")
        path: States from start to goal, or None when no solution was found
        elapsed_ms: Wall-clock time in milliseconds
        nodes_expanded: Number of states expanded
        status: Why the run ended
    """
    algorithm: str
    path: Optional[Tuple[SearchState, ...]]
    elapsed_ms: float
    nodes_expanded: int
    status: SolveStatus

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def moves(self) -> Optional[int]:
        """Number of knight moves (path length minus the start state)."""
        if self.path is None:
            return None
        return len(self.path) - 1

    def with_elapsed(self, elapsed_ms: float) -> 'SolveResult':
        """Copy of this result with a different timing."""
        return replace(self, elapsed_ms=elapsed_ms)


@dataclass(frozen=True)
class EnrichedResult(SolveResult):
    """
    SolveResult plus key attribution and BFS optimality comparison.

    Attributes:
        chosen_key_index: Slot (0, 1, 2) of the key picked up, or None
        is_optimal: True if moves equals the BFS baseline move count
        optimal_moves: BFS baseline move count used for the comparison
    """
    chosen_key_index: Optional[int] = None
    is_optimal: bool = False
    optimal_moves: Optional[int] = None

    def summary(self) -> str:
        """One-line narrative feedback for this result."""
        if self.path is None:
            if self.status is SolveStatus.DEPTH_LIMIT_EXCEEDED:
                return f"{self.algorithm}: no solution found within the depth limit."
            return f"{self.algorithm}: no solution found."

        text = (
            f"{self.algorithm} chose {key_label(self.chosen_key_index)}, "
            f"found a path of {self.moves} moves in {self.elapsed_ms:.3f} ms "
            f"(expanded {self.nodes_expanded} nodes)."
        )
        if self.is_optimal:
            text += " This matches the optimal number of moves."
        return text

"""
Enrichment Module - Key attribution and optimality against the BFS baseline.
"""

from typing import Optional, Sequence

from .board import Cell
from .result import EnrichedResult, SolveResult
from .state import SearchState


def chosen_key_index(path: Optional[Sequence[SearchState]],
                     keys: Sequence[Optional[Cell]]) -> Optional[int]:
    """
    Find which key slot the path picked up.

    Scans consecutive pairs for the first step where has_key flips from
    False to True and matches that cell against the key slots.

    Args:
        path: Solved path, or None
        keys: Key cells by slot

    Returns:
        Slot index (0, 1, 2), or None if the path is empty or never flips
    """
    if not path:
        return None
    for prev, cur in zip(path, path[1:]):
        if not prev.has_key and cur.has_key:
            for index, key in enumerate(keys):
                if key is not None and key == cur.position:
                    return index
            return None
    return None


def enrich(result: SolveResult, keys: Sequence[Optional[Cell]],
           optimal_moves: Optional[int]) -> EnrichedResult:
    """
    Attach chosen key and optimality to a strategy result.

    Args:
        result: Raw strategy result
        keys: Key cells by slot
        optimal_moves: BFS baseline move count (None if BFS found nothing)

    Returns:
        EnrichedResult; is_optimal is False whenever either side has no path
    """
    moves = result.moves
    is_optimal = optimal_moves is not None and moves is not None and moves == optimal_moves

    return EnrichedResult(
        algorithm=result.algorithm,
        path=result.path,
        elapsed_ms=result.elapsed_ms,
        nodes_expanded=result.nodes_expanded,
        status=result.status,
        chosen_key_index=chosen_key_index(result.path, keys),
        is_optimal=is_optimal,
        optimal_moves=optimal_moves,
    )

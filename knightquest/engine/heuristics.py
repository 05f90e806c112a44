"""
Heuristics Module - Move-count estimates for A*.

A knight move changes the Manhattan distance by at most 3, so
ceil(manhattan / 3) never exceeds the true number of moves. Routing the
estimate through a key keeps that bound because every real solution
passes through some key.
"""

import math
from typing import Optional, Sequence

from .board import Cell


def manhattan(a: Cell, b: Cell) -> int:
    return a.manhattan(b)


def knight_heuristic(cell: Cell, has_key: bool,
                     keys: Sequence[Optional[Cell]], door: Cell) -> float:
    """
    Estimate the remaining moves from cell to the goal.

    Args:
        cell: Current knight cell
        has_key: Whether a key is already held
        keys: Key cells (unplaced slots are skipped)
        door: Door cell

    Returns:
        ceil(manhattan(cell, door) / 3) with a key; otherwise the best
        ceil((manhattan(cell, key) + manhattan(key, door)) / 3) over keys.
        Infinity if no key is placed.
    """
    if has_key:
        return math.ceil(manhattan(cell, door) / 3)

    best = math.inf
    for key in keys:
        if key is None:
            continue
        estimate = math.ceil((manhattan(cell, key) + manhattan(key, door)) / 3)
        if estimate < best:
            best = estimate
    return best

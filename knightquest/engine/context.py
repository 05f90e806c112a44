"""
Search Context Module - Per-call inputs and scratch tables for strategies.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .board import BOARD_SIZE, Cell, Puzzle
from .state import SearchState


# (row, col, has_key) -> 8 x 8 x 2 = 128 signatures
TABLE_SHAPE = (BOARD_SIZE, BOARD_SIZE, 2)


@dataclass(frozen=True)
class SearchContext:
    """
    Inputs for a single strategy run.

    Every table handed out by this context is freshly allocated, so
    repeated or concurrent runs never share visited/closed/cost data.

    Attributes:
        puzzle: Validated puzzle configuration
    """
    puzzle: Puzzle

    @classmethod
    def from_positions(cls, start: Cell, keys: Tuple[Optional[Cell], ...],
                       door: Cell) -> 'SearchContext':
        return cls(puzzle=Puzzle.create(start, keys, door))

    @property
    def start(self) -> Cell:
        return self.puzzle.start

    @property
    def keys(self) -> Tuple[Optional[Cell], ...]:
        return self.puzzle.keys

    @property
    def door(self) -> Cell:
        return self.puzzle.door

    def initial_state(self) -> SearchState:
        return SearchState.initial(self.puzzle.start)

    def new_marker_table(self) -> np.ndarray:
        """Boolean visited/closed table, all False."""
        return np.zeros(TABLE_SHAPE, dtype=bool)

    def new_cost_table(self, fill: float = np.inf) -> np.ndarray:
        """Float table for g-scores or shallowest depths, filled with `fill`."""
        return np.full(TABLE_SHAPE, fill, dtype=float)

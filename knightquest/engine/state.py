"""
State Module - Augmented search state (cell x key flag) and path reconstruction.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from .board import Cell, KNIGHT_MOVES, in_bounds, is_key_square


Signature = Tuple[int, int, int]


@dataclass(frozen=True)
class SearchState:
    """
    One node of a single search call.

    States are created per solve call and linked to their parent so the
    path can be rebuilt once a goal is found. They are never shared
    between calls or strategies.

    Attributes:
        position: Knight cell
        has_key: True once any key has been stepped on (never reverts)
        depth: Moves from the start state
        parent: Previous state on the path, None for the start
    """
    position: Cell
    has_key: bool = False
    depth: int = 0
    parent: Optional['SearchState'] = field(default=None, repr=False, compare=False)

    @classmethod
    def initial(cls, start: Cell) -> 'SearchState':
        """Start state: no key, depth 0, no parent."""
        return cls(position=start)

    @property
    def row(self) -> int:
        return self.position.row

    @property
    def col(self) -> int:
        return self.position.col

    @property
    def key_index(self) -> int:
        """0 or 1, the key-flag axis of the visited tables."""
        return 1 if self.has_key else 0

    @property
    def signature(self) -> Signature:
        """(row, col, has_key) triple used for visited/closed tracking."""
        return (self.position.row, self.position.col, self.key_index)

    def child(self, position: Cell, keys: Sequence[Optional[Cell]]) -> 'SearchState':
        """State reached by moving to position; picks up a key if one is there."""
        has_key = self.has_key or is_key_square(position.row, position.col, keys)
        return SearchState(
            position=position,
            has_key=has_key,
            depth=self.depth + 1,
            parent=self,
        )


def successors(state: SearchState,
               keys: Sequence[Optional[Cell]]) -> Iterator[SearchState]:
    """
    Yield legal successor states in KNIGHT_MOVES order.

    Args:
        state: State to expand
        keys: Key cells (any key sets the flag)

    Yields:
        Child states for every in-bounds knight move
    """
    for dr, dc in KNIGHT_MOVES:
        nr = state.position.row + dr
        nc = state.position.col + dc
        if not in_bounds(nr, nc):
            continue
        yield state.child(Cell(nr, nc), keys)


def reconstruct_path(goal: SearchState) -> Tuple[SearchState, ...]:
    """Walk parent links from goal back to the start and reverse."""
    path: List[SearchState] = []
    current: Optional[SearchState] = goal
    while current is not None:
        path.append(current)
        current = current.parent
    path.reverse()
    return tuple(path)

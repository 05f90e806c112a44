"""
Board Module - Grid bounds, knight displacements and puzzle configuration.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .state import SearchState


BOARD_SIZE = 8
KEY_SLOTS = 3

# Successor order matters: DFS and IDS return the first goal found in this order.
# Descending (dr, dc), so a knight in the top-left corner tries (2, 1) first.
KNIGHT_MOVES: Tuple[Tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
    (-2, 1),
    (-2, -1),
)


class InvalidConfigurationError(ValueError):
    """Raised when the knight, a key or the door is missing or off the board."""


@dataclass(frozen=True)
class Cell:
    """
    Immutable board coordinate.

    Attributes:
        row: Row index (0-7)
        col: Column index (0-7)
    """
    row: int
    col: int

    @classmethod
    def parse(cls, text: str) -> 'Cell':
        """
        Parse a cell from "row,col" or "row col" text.

        Args:
            text: Coordinate text, e.g. "3,4"

        Returns:
            Cell instance

        Raises:
            InvalidConfigurationError: If the text is not two integers in [0, 7]
        """
        parts = text.replace(",", " ").split()
        if len(parts) != 2:
            raise InvalidConfigurationError(
                f"Expected 'row,col' but got {text!r}"
            )
        try:
            row, col = int(parts[0]), int(parts[1])
        except ValueError:
            raise InvalidConfigurationError(
                f"Row/col must be integers between 0 and {BOARD_SIZE - 1}: {text!r}"
            ) from None
        if not in_bounds(row, col):
            raise InvalidConfigurationError(
                f"Row/col must be integers between 0 and {BOARD_SIZE - 1}: {text!r}"
            )
        return cls(row, col)

    def offset(self, dr: int, dc: int) -> 'Cell':
        """Cell displaced by (dr, dc). May be off the board."""
        return Cell(self.row + dr, self.col + dc)

    def in_bounds(self) -> bool:
        return in_bounds(self.row, self.col)

    def manhattan(self, other: 'Cell') -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


def in_bounds(row: int, col: int) -> bool:
    """Check that (row, col) lies on the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_key_square(row: int, col: int, keys: Sequence[Optional[Cell]]) -> bool:
    """
    Check whether (row, col) holds any key.

    Unplaced key slots (None) are ignored, so this also works on a
    partially filled key set.
    """
    return any(k is not None and k.row == row and k.col == col for k in keys)


def is_goal(state: 'SearchState', door: Cell) -> bool:
    """Goal test: the knight holds a key and stands on the door."""
    return state.has_key and state.position == door


@dataclass(frozen=True)
class Puzzle:
    """
    Knight, key and door placement for one solve call.

    Slots may be None while a configuration is being set up; the
    engine only runs on puzzles that pass validate().

    Attributes:
        start: Knight starting cell
        keys: Exactly KEY_SLOTS optional key cells
        door: Exit cell, the goal once a key is held
    """
    start: Optional[Cell]
    keys: Tuple[Optional[Cell], ...]
    door: Optional[Cell]

    @classmethod
    def create(cls, start: Optional[Cell], keys: Sequence[Optional[Cell]],
               door: Optional[Cell]) -> 'Puzzle':
        """
        Create a Puzzle, padding or rejecting the key list to KEY_SLOTS.

        Raises:
            InvalidConfigurationError: If more than KEY_SLOTS keys are given
        """
        keys = tuple(keys)
        if len(keys) > KEY_SLOTS:
            raise InvalidConfigurationError(
                f"At most {KEY_SLOTS} keys can be placed, got {len(keys)}"
            )
        keys = keys + (None,) * (KEY_SLOTS - len(keys))
        return cls(start=start, keys=keys, door=door)

    def missing_pieces(self) -> Tuple[str, ...]:
        """Names of unplaced pieces, e.g. ("key 2", "door")."""
        missing = []
        if self.start is None:
            missing.append("knight")
        for i, key in enumerate(self.keys):
            if key is None:
                missing.append(f"key {i + 1}")
        if self.door is None:
            missing.append("door")
        return tuple(missing)

    @property
    def is_complete(self) -> bool:
        """True if knight, all keys and door are placed."""
        return len(self.keys) == KEY_SLOTS and not self.missing_pieces()

    def validate(self) -> 'Puzzle':
        """
        Check the configuration before any search begins.

        Returns:
            self, for chaining

        Raises:
            InvalidConfigurationError: If a piece is missing or off the board
        """
        if len(self.keys) != KEY_SLOTS:
            raise InvalidConfigurationError(
                f"Exactly {KEY_SLOTS} key slots required, got {len(self.keys)}"
            )
        missing = self.missing_pieces()
        if missing:
            raise InvalidConfigurationError(
                f"Missing placement: {', '.join(missing)}"
            )
        for label, cell in self.labelled_cells():
            if not cell.in_bounds():
                raise InvalidConfigurationError(f"{label} {cell} is off the board")
        return self

    def labelled_cells(self) -> Tuple[Tuple[str, Cell], ...]:
        """(label, cell) pairs for every placed piece."""
        pairs = []
        if self.start is not None:
            pairs.append(("knight", self.start))
        for i, key in enumerate(self.keys):
            if key is not None:
                pairs.append((f"key {i + 1}", key))
        if self.door is not None:
            pairs.append(("door", self.door))
        return tuple(pairs)

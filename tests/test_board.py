"""
Test script for the board model and state graph

Covers:
1. Knight displacement vectors and bounds
2. Key/goal predicates
3. Cell parsing and Puzzle validation
4. Successor generation and path reconstruction
5. Per-call search tables

Usage:
    python tests/test_board.py
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from knightquest.engine import (
    BOARD_SIZE,
    KNIGHT_MOVES,
    Cell,
    InvalidConfigurationError,
    Puzzle,
    SearchContext,
    SearchState,
    in_bounds,
    is_goal,
    is_key_square,
    reconstruct_path,
    successors,
)


KEYS = (Cell(2, 1), Cell(7, 7), Cell(7, 6))


def test_knight_moves():
    """The eight (+-1,+-2)/(+-2,+-1) vectors, each exactly once."""
    print("\n" + "="*60)
    print("TEST: Knight Moves")
    print("="*60)

    assert len(KNIGHT_MOVES) == 8
    assert len(set(KNIGHT_MOVES)) == 8
    for dr, dc in KNIGHT_MOVES:
        assert {abs(dr), abs(dc)} == {1, 2}

    print(f"  Move order: {KNIGHT_MOVES}")
    print("  [PASS] Knight move tests")


def test_in_bounds():
    assert in_bounds(0, 0)
    assert in_bounds(7, 7)
    assert in_bounds(3, 5)
    assert not in_bounds(-1, 0)
    assert not in_bounds(0, -1)
    assert not in_bounds(8, 0)
    assert not in_bounds(0, BOARD_SIZE)


def test_is_key_square_partial_keys():
    """Unplaced slots are ignored."""
    keys = (Cell(2, 1), None, Cell(7, 6))
    assert is_key_square(2, 1, keys)
    assert is_key_square(7, 6, keys)
    assert not is_key_square(7, 7, keys)
    assert not is_key_square(0, 0, (None, None, None))


def test_is_goal():
    door = Cell(2, 1)
    assert is_goal(SearchState(Cell(2, 1), has_key=True), door)
    assert not is_goal(SearchState(Cell(2, 1), has_key=False), door)
    assert not is_goal(SearchState(Cell(2, 2), has_key=True), door)


def test_cell_parse():
    """Coordinate text accepted by the command line."""
    print("\n" + "="*60)
    print("TEST: Cell Parsing")
    print("="*60)

    assert Cell.parse("3,4") == Cell(3, 4)
    assert Cell.parse(" 0 7 ") == Cell(0, 7)
    assert Cell.parse("7, 0") == Cell(7, 0)

    for bad in ("8,0", "-1,2", "a,b", "3", "1,2,3", ""):
        with pytest.raises(InvalidConfigurationError):
            Cell.parse(bad)
        print(f"  Rejected: {bad!r}")

    assert str(Cell(3, 4)) == "(3,4)"
    print("  [PASS] Cell parsing tests")


def test_puzzle_validation():
    """Missing or off-board pieces are rejected before any search."""
    print("\n" + "="*60)
    print("TEST: Puzzle Validation")
    print("="*60)

    complete = Puzzle.create(Cell(0, 0), KEYS, Cell(2, 1))
    assert complete.is_complete
    assert complete.validate() is complete

    partial = Puzzle.create(None, [Cell(2, 1), None], None)
    assert partial.keys == (Cell(2, 1), None, None)
    assert partial.missing_pieces() == ("knight", "key 2", "key 3", "door")
    assert not partial.is_complete
    with pytest.raises(InvalidConfigurationError) as excinfo:
        partial.validate()
    print(f"  Missing pieces: {excinfo.value}")
    assert "key 2" in str(excinfo.value)

    off_board = Puzzle.create(Cell(0, 0), KEYS, Cell(8, 8))
    with pytest.raises(InvalidConfigurationError):
        off_board.validate()

    with pytest.raises(InvalidConfigurationError):
        Puzzle.create(Cell(0, 0), list(KEYS) + [Cell(1, 1)], Cell(2, 1))

    # InvalidConfigurationError is a ValueError for generic callers
    assert issubclass(InvalidConfigurationError, ValueError)
    print("  [PASS] Puzzle validation tests")


def test_successors_order_and_key_flag():
    """Successors follow KNIGHT_MOVES order and pick up keys on arrival."""
    print("\n" + "="*60)
    print("TEST: Successors")
    print("="*60)

    start = SearchState.initial(Cell(0, 0))
    children = list(successors(start, KEYS))
    print(f"  From (0,0): {[str(c.position) for c in children]}")

    assert [c.position for c in children] == [Cell(2, 1), Cell(1, 2)]
    assert children[0].has_key is True      # (2,1) is a key
    assert children[1].has_key is False
    assert all(c.depth == 1 for c in children)
    assert all(c.parent is start for c in children)

    center = SearchState(Cell(4, 4), has_key=True, depth=3)
    center_children = list(successors(center, KEYS))
    assert len(center_children) == 8
    expected = [Cell(4 + dr, 4 + dc) for dr, dc in KNIGHT_MOVES]
    assert [c.position for c in center_children] == expected
    # Key flag is absorbing
    assert all(c.has_key for c in center_children)
    assert all(c.depth == 4 for c in center_children)

    print("  [PASS] Successor tests")


def test_signature():
    assert SearchState(Cell(3, 5)).signature == (3, 5, 0)
    assert SearchState(Cell(3, 5), has_key=True).signature == (3, 5, 1)


def test_reconstruct_path():
    start = SearchState.initial(Cell(0, 0))
    a = start.child(Cell(1, 2), KEYS)
    b = a.child(Cell(3, 3), KEYS)
    c = b.child(Cell(2, 1), KEYS)

    path = reconstruct_path(c)
    assert [s.position for s in path] == [Cell(0, 0), Cell(1, 2), Cell(3, 3), Cell(2, 1)]
    assert [s.depth for s in path] == [0, 1, 2, 3]
    assert [s.has_key for s in path] == [False, False, False, True]
    assert reconstruct_path(start) == (start,)


def test_search_context_tables_are_fresh():
    """Every table is a new 8x8x2 array."""
    context = SearchContext.from_positions(Cell(0, 0), KEYS, Cell(2, 1))

    visited = context.new_marker_table()
    assert visited.shape == (BOARD_SIZE, BOARD_SIZE, 2)
    assert visited.dtype == bool
    assert not visited.any()

    visited[0, 0, 0] = True
    assert not context.new_marker_table().any()

    costs = context.new_cost_table()
    assert np.isinf(costs).all()
    assert (context.new_cost_table(0) == 0).all()

    start = context.initial_state()
    assert start.position == Cell(0, 0)
    assert start.has_key is False
    assert start.depth == 0
    assert start.parent is None


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# BOARD MODEL TESTS")
    print("#"*60)

    tests = [
        test_knight_moves,
        test_in_bounds,
        test_is_key_square_partial_keys,
        test_is_goal,
        test_cell_parse,
        test_puzzle_validation,
        test_successors_order_and_key_flag,
        test_signature,
        test_reconstruct_path,
        test_search_context_tables_are_fresh,
    ]
    for test in tests:
        test()

    print("\nAll tests PASSED!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

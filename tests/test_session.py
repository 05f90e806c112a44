"""
Test script for the headless session, trace text and presets

Covers:
1. Incomplete placements turned into feedback
2. Single runs with feedback and trace
3. Presets and random configurations
4. Comparison runs through the session

Usage:
    python tests/test_session.py
"""

import random
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from knightquest.engine import Cell, InvalidConfigurationError, SolveStatus
from knightquest.presets import get_preset, list_presets, random_puzzle
from knightquest.session import INCOMPLETE_MESSAGE, Piece, SearchSession, build_trace


def _scenario_session(**kwargs) -> SearchSession:
    """Knight (0,0), key 1 and door both on (2,1)."""
    session = SearchSession(**kwargs)
    session.place(Piece.KNIGHT, Cell(0, 0))
    session.place(Piece.KEY1, Cell(2, 1))
    session.place(Piece.KEY2, Cell(7, 7))
    session.place(Piece.KEY3, Cell(7, 6))
    session.place(Piece.DOOR, Cell(2, 1))
    return session


def test_piece_from_text():
    assert Piece.from_text("knight") is Piece.KNIGHT
    assert Piece.from_text("Key 2") is Piece.KEY2
    assert Piece.from_text("key3") is Piece.KEY3
    assert Piece.from_text(" DOOR ") is Piece.DOOR
    assert Piece.KEY1.key_slot == 0
    assert Piece.DOOR.key_slot is None
    with pytest.raises(ValueError):
        Piece.from_text("bishop")


def test_incomplete_placement_feedback():
    """Runs on an incomplete board return None and explain why."""
    print("\n" + "="*60)
    print("TEST: Incomplete Placement")
    print("="*60)

    session = SearchSession()
    session.place(Piece.KNIGHT, Cell(0, 0))
    session.place(Piece.KEY1, Cell(2, 1))
    session.place(Piece.DOOR, Cell(2, 1))

    assert session.run("BFS") is None
    print(f"  Feedback: {session.feedback}")
    assert session.feedback == INCOMPLETE_MESSAGE
    assert session.result is None
    assert session.trace == ""

    assert session.run_comparison(repeats=1) is None
    assert session.feedback == INCOMPLETE_MESSAGE
    assert session.comparison is None

    print("  [PASS] Incomplete placement tests")


def test_place_off_board_raises():
    session = SearchSession()
    with pytest.raises(InvalidConfigurationError):
        session.place(Piece.DOOR, Cell(8, 3))
    assert session.door is None


def test_run_with_trace():
    """A single BFS run fills result, feedback and trace."""
    print("\n" + "="*60)
    print("TEST: Single Run")
    print("="*60)

    session = _scenario_session()
    result = session.run("BFS")

    assert result is not None
    assert result.moves == 1
    assert result.chosen_key_index == 0
    assert result.is_optimal
    assert session.optimal_moves == 1
    assert session.feedback == result.summary()
    assert session.feedback.startswith("BFS chose Key 1, found a path of 1 moves")

    print(session.trace)
    lines = session.trace.splitlines()
    assert lines[0] == "--------Using BFS---------"
    assert "Initial state: knight=(0,0), hasKey=false" in lines
    assert "Keys: K1@(2,1), K2@(7,7), K3@(7,6)" in lines
    assert "Door: (2,1)" in lines
    assert "Chosen key: Key 1" in lines
    assert "Move 1: knight -> (2,1)" in lines
    assert "  -> Picked up key at (2,1)" in lines
    assert "  -> Reached door!" in lines
    assert lines[-1].startswith("BFS took 1 moves, ")
    assert lines[-1].endswith(" nodes expanded.")

    print("  [PASS] Single run tests")


def test_run_benchmarked_and_capped_ids():
    session = _scenario_session(ids_max_depth=0)
    result = session.run("IDS")
    assert result.path is None
    assert result.status is SolveStatus.DEPTH_LIMIT_EXCEEDED
    assert session.feedback == "IDS: no solution found within the depth limit."
    assert session.trace == "IDS did not find a solution.\n"

    session.ids_max_depth = 15
    result = session.run("ids", repeats=3)
    assert result.moves == 1
    assert result.is_optimal


def test_placement_change_clears_results():
    session = _scenario_session()
    session.run("DFS")
    assert session.result is not None

    session.place(Piece.DOOR, Cell(0, 1))
    assert session.result is None
    assert session.trace == ""
    assert session.optimal_moves is None


def test_build_trace_marks_key_before_door():
    """Knight passes a key on the way; the door is a separate cell."""
    session = SearchSession()
    session.place(Piece.KNIGHT, Cell(0, 0))
    session.place(Piece.KEY1, Cell(1, 2))
    session.place(Piece.KEY2, Cell(7, 7))
    session.place(Piece.KEY3, Cell(7, 6))
    session.place(Piece.DOOR, Cell(3, 3))
    result = session.run("BFS")

    trace = build_trace(result, session.puzzle)
    lines = trace.splitlines()
    pickup = lines.index("  -> Picked up key at (1,2)")
    door = lines.index("  -> Reached door!")
    assert pickup < door
    assert lines.count("  -> Reached door!") == 1
    assert f"Move {result.moves}: knight -> (3,3)" in lines


def test_presets():
    """Four complete presets, each solvable by BFS."""
    print("\n" + "="*60)
    print("TEST: Presets")
    print("="*60)

    presets = list_presets()
    assert [p.id for p in presets] == ["near-key", "near-door-key", "tricky-choice", "spread-out"]

    session = SearchSession()
    for preset in presets:
        assert preset.puzzle.is_complete
        session.apply_preset(preset)
        assert session.puzzle == preset.puzzle
        assert session.feedback == f"{preset.name} loaded. Choose an algorithm to run."

        result = session.run("BFS")
        print(f"  {preset.id}: {result.moves} moves via {session.trace.splitlines()[4]}")
        assert result.found

    assert get_preset("tricky-choice").puzzle.start == Cell(3, 3)
    with pytest.raises(ValueError):
        get_preset("no-such-preset")

    print("  [PASS] Preset tests")


def test_random_configuration():
    puzzle = random_puzzle(random.Random(7))
    assert puzzle == random_puzzle(random.Random(7))
    assert puzzle.is_complete
    cells = [cell for _, cell in puzzle.labelled_cells()]
    assert len(cells) == 5
    assert len(set(cells)) == 5
    assert all(cell.in_bounds() for cell in cells)

    session = SearchSession()
    session.randomize(random.Random(7))
    assert session.puzzle == puzzle
    assert session.feedback == "Random configuration generated. Choose an algorithm to run."


def test_run_comparison():
    """Comparison through the session uses its repeats and IDS ceiling."""
    print("\n" + "="*60)
    print("TEST: Session Comparison")
    print("="*60)

    session = _scenario_session(repeats=2)
    report = session.run_comparison()

    assert report is session.comparison
    assert report.repeats == 2
    assert [r.algorithm for r in report.results] == ["DFS", "BFS", "A*", "IDS"]
    assert all(r.moves == 1 for r in report.results)
    assert all(r.is_optimal for r in report.results)
    assert session.optimal_moves == 1
    assert session.feedback == report.summary()
    print(f"  Feedback: {session.feedback}")

    print("  [PASS] Session comparison tests")


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# SESSION TESTS")
    print("#"*60)

    tests = [
        test_piece_from_text,
        test_incomplete_placement_feedback,
        test_place_off_board_raises,
        test_run_with_trace,
        test_run_benchmarked_and_capped_ids,
        test_placement_change_clears_results,
        test_build_trace_marks_key_before_door,
        test_presets,
        test_random_configuration,
        test_run_comparison,
    ]
    for test in tests:
        test()

    print("\nAll tests PASSED!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

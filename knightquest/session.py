"""
Session Module - Headless placement and run orchestration.

This module provides the SearchSession which holds the piece placement
a front end builds up, runs strategies on request, and produces the
feedback sentence and step-by-step trace a display shows.

Incomplete configurations never raise out of the session: they are
turned into a user-facing feedback message instead.

For the core search logic, see the knightquest.engine package.
"""

from enum import Enum
from typing import List, Optional
import logging
import random

from knightquest.engine import (
    KEY_SLOTS,
    Cell,
    ComparisonReport,
    EnrichedResult,
    InvalidConfigurationError,
    Puzzle,
    benchmark,
    compare,
    key_label,
    solve,
)
from knightquest.engine.runner import DEFAULT_REPEATS
from knightquest.engine.strategies import DEFAULT_MAX_DEPTH
from knightquest.presets import Preset, random_puzzle

logger = logging.getLogger(__name__)


__all__ = [
    "Piece",
    "SearchSession",
    "build_trace",
    "INCOMPLETE_MESSAGE",
]

INCOMPLETE_MESSAGE = "You must place Knight, all 3 Keys, and Door."


class Piece(Enum):
    """
    Placeable pieces.

    Values are the labels shown to the user.
    """
    KNIGHT = "Knight"
    KEY1 = "Key 1"
    KEY2 = "Key 2"
    KEY3 = "Key 3"
    DOOR = "Door"

    @classmethod
    def from_text(cls, text: str) -> 'Piece':
        """Accept "knight", "key2", "Key 2", "door", ..."""
        wanted = text.strip().lower().replace(" ", "")
        for piece in cls:
            if wanted in (piece.name.lower(), piece.value.lower().replace(" ", "")):
                return piece
        raise ValueError(f"Unknown piece: {text}")

    @property
    def key_slot(self) -> Optional[int]:
        return {Piece.KEY1: 0, Piece.KEY2: 1, Piece.KEY3: 2}.get(self)


def build_trace(result: EnrichedResult, puzzle: Puzzle) -> str:
    """
    Step-by-step narration of a solved path.

    Args:
        result: Enriched result with a path
        puzzle: Configuration the result was computed for

    Returns:
        Multi-line trace text, or a one-line note if there is no path
    """
    if result.path is None:
        return f"{result.algorithm} did not find a solution.\n"

    path = result.path
    start = path[0]
    door = puzzle.door
    lines: List[str] = []

    lines.append(f"--------Using {result.algorithm}---------")
    lines.append(f"Initial state: knight={start.position}, hasKey={str(start.has_key).lower()}")
    lines.append("Keys: " + ", ".join(
        f"K{i + 1}@{k}" if k is not None else f"K{i + 1}@-"
        for i, k in enumerate(puzzle.keys)
    ))
    lines.append(f"Door: {door}")
    lines.append(f"Chosen key: {key_label(result.chosen_key_index)}")
    lines.append("")

    for i in range(1, len(path)):
        prev, cur = path[i - 1], path[i]
        lines.append(f"Move {i}: knight -> {cur.position}")
        if not prev.has_key and cur.has_key:
            lines.append(f"  -> Picked up key at {cur.position}")
        if cur.has_key and cur.position == door:
            lines.append("  -> Reached door!")

    lines.append(
        f"{result.algorithm} took {result.moves} moves, {result.elapsed_ms:.3f} ms, "
        f"{result.nodes_expanded} nodes expanded."
    )
    return "\n".join(lines)


class SearchSession:
    """
    Placement state plus the latest run, for one front end.

    Holds a knight, three key slots and a door. Any placement change
    clears the previous result, mirroring how a display resets its
    playback when the board is edited.
    """

    def __init__(self, ids_max_depth: int = DEFAULT_MAX_DEPTH,
                 repeats: int = DEFAULT_REPEATS):
        """
        Initialize an empty session.

        Args:
            ids_max_depth: Depth ceiling passed to IDS runs
            repeats: Runs averaged by run_comparison()
        """
        self.ids_max_depth = ids_max_depth
        self.repeats = repeats

        self.knight: Optional[Cell] = None
        self.keys: List[Optional[Cell]] = [None] * KEY_SLOTS
        self.door: Optional[Cell] = None

        self.result: Optional[EnrichedResult] = None
        self.comparison: Optional[ComparisonReport] = None
        self.trace: str = ""
        self.feedback: str = "Place knight, keys, and door, then run an algorithm."

    @property
    def puzzle(self) -> Puzzle:
        return Puzzle.create(self.knight, self.keys, self.door)

    @property
    def optimal_moves(self) -> Optional[int]:
        """BFS move count from the last run or comparison."""
        if self.comparison is not None:
            return self.comparison.optimal_moves
        if self.result is not None:
            return self.result.optimal_moves
        return None

    def _reset_results(self) -> None:
        self.result = None
        self.comparison = None
        self.trace = ""

    def place(self, piece: Piece, cell: Cell) -> None:
        """
        Put a piece on a cell.

        Raises:
            InvalidConfigurationError: If the cell is off the board
        """
        if not cell.in_bounds():
            raise InvalidConfigurationError(f"{piece.value} {cell} is off the board")

        self._reset_results()
        if piece is Piece.KNIGHT:
            self.knight = cell
        elif piece is Piece.DOOR:
            self.door = cell
        else:
            self.keys[piece.key_slot] = cell
        logger.debug(f"Placed {piece.value} at {cell}")

    def load(self, puzzle: Puzzle, message: str) -> None:
        self._reset_results()
        self.knight = puzzle.start
        self.keys = list(puzzle.keys)
        self.door = puzzle.door
        self.feedback = message

    def apply_preset(self, preset: Preset) -> None:
        self.load(preset.puzzle, f"{preset.name} loaded. Choose an algorithm to run.")

    def randomize(self, rng: Optional[random.Random] = None) -> None:
        self.load(
            random_puzzle(rng),
            "Random configuration generated. Choose an algorithm to run.",
        )

    def _options(self, algorithm: str) -> dict:
        if algorithm.strip().lower() == "ids":
            return {"max_depth": self.ids_max_depth}
        return {}

    def run(self, algorithm: str, repeats: Optional[int] = None) -> Optional[EnrichedResult]:
        """
        Run one strategy on the current placement.

        Args:
            algorithm: Strategy name or label ("DFS", "A*", ...)
            repeats: If given, benchmark with this many runs instead of one

        Returns:
            EnrichedResult, or None if the placement is incomplete
        """
        self._reset_results()
        puzzle = self.puzzle
        try:
            puzzle.validate()
        except InvalidConfigurationError as e:
            logger.warning(f"Run rejected: {e}")
            self.feedback = INCOMPLETE_MESSAGE
            return None

        options = self._options(algorithm)
        if repeats is None:
            result = solve(algorithm, puzzle.start, puzzle.keys, puzzle.door, **options)
        else:
            result = benchmark(algorithm, puzzle.start, puzzle.keys, puzzle.door,
                               repeats=repeats, **options)

        self.result = result
        self.feedback = result.summary()
        self.trace = build_trace(result, puzzle)
        return result

    def run_comparison(self, repeats: Optional[int] = None) -> Optional[ComparisonReport]:
        """
        Benchmark every strategy on the current placement.

        Returns:
            ComparisonReport, or None if the placement is incomplete
        """
        self._reset_results()
        puzzle = self.puzzle
        try:
            puzzle.validate()
        except InvalidConfigurationError as e:
            logger.warning(f"Comparison rejected: {e}")
            self.feedback = INCOMPLETE_MESSAGE
            return None

        report = compare(
            puzzle.start, puzzle.keys, puzzle.door,
            repeats=self.repeats if repeats is None else repeats,
            options={"ids": {"max_depth": self.ids_max_depth}},
        )
        self.comparison = report
        self.feedback = report.summary()
        return report

"""
Runner Module - Uniform solve/benchmark/compare entry points.

Every call validates the configuration first, then runs the BFS
baseline alongside the requested strategy so the result can be
marked optimal or not.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np

from .base import SearchStrategy
from .board import Cell, Puzzle
from .context import SearchContext
from .enrichment import enrich
from .factory import create_strategy, get_strategy_names
from .result import EnrichedResult, SolveResult, key_label

logger = logging.getLogger(__name__)

DEFAULT_REPEATS = 40
BASELINE_STRATEGY = "bfs"

StrategyLike = Union[str, SearchStrategy]


def _as_strategy(strategy: StrategyLike, **kwargs: Any) -> SearchStrategy:
    if isinstance(strategy, SearchStrategy):
        if kwargs:
            raise ValueError("Strategy options can only be given with a strategy name")
        return strategy
    return create_strategy(strategy, **kwargs)


def _prepare(start: Optional[Cell], keys: Sequence[Optional[Cell]],
             door: Optional[Cell]) -> SearchContext:
    """Validate inputs and build the per-call search context."""
    puzzle = Puzzle.create(start, keys, door).validate()
    return SearchContext(puzzle=puzzle)


def run_repeated(strategy: SearchStrategy, context: SearchContext,
                 repeats: int = DEFAULT_REPEATS) -> SolveResult:
    """
    Run a strategy `repeats` times on identical inputs.

    Args:
        strategy: Strategy instance
        context: Search context
        repeats: Number of runs (>= 1)

    Returns:
        The last run's result with elapsed_ms replaced by the mean
        over all runs; path and nodes_expanded are untouched

    Raises:
        ValueError: If repeats < 1
    """
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")

    timings: List[float] = []
    last: Optional[SolveResult] = None
    for _ in range(repeats):
        last = strategy.search(context)
        timings.append(last.elapsed_ms)

    mean_ms = float(np.mean(timings))
    logger.debug(f"{strategy.label}: {repeats} runs, mean {mean_ms:.4f} ms")
    return last.with_elapsed(mean_ms)


def solve(strategy: StrategyLike, start: Optional[Cell],
          keys: Sequence[Optional[Cell]], door: Optional[Cell],
          **strategy_kwargs: Any) -> EnrichedResult:
    """
    Solve one configuration with one strategy.

    Args:
        strategy: Strategy name/label ("bfs", "A*") or instance
        start: Knight cell
        keys: Three key cells
        door: Door cell
        **strategy_kwargs: Constructor options (e.g. max_depth for IDS)

    Returns:
        EnrichedResult with chosen key and optimality

    Raises:
        InvalidConfigurationError: If a piece is missing or off the board
        ValueError: If the strategy name is unknown
    """
    context = _prepare(start, keys, door)
    runner = _as_strategy(strategy, **strategy_kwargs)

    baseline = create_strategy(BASELINE_STRATEGY).search(context)
    logger.info(f"BFS baseline: {baseline.moves} moves")

    result = baseline if runner.name == BASELINE_STRATEGY else runner.search(context)
    return enrich(result, context.keys, baseline.moves)


def benchmark(strategy: StrategyLike, start: Optional[Cell],
              keys: Sequence[Optional[Cell]], door: Optional[Cell],
              repeats: int = DEFAULT_REPEATS,
              **strategy_kwargs: Any) -> EnrichedResult:
    """
    Like solve(), but with timing averaged over `repeats` runs.

    Raises:
        InvalidConfigurationError: If a piece is missing or off the board
        ValueError: If repeats < 1 or the strategy name is unknown
    """
    context = _prepare(start, keys, door)
    runner = _as_strategy(strategy, **strategy_kwargs)

    baseline = run_repeated(create_strategy(BASELINE_STRATEGY), context, repeats)
    if runner.name == BASELINE_STRATEGY:
        result = baseline
    else:
        result = run_repeated(runner, context, repeats)

    logger.info(
        f"Benchmark {runner.label}: {result.moves} moves, "
        f"{result.elapsed_ms:.4f} ms avg over {repeats} runs"
    )
    return enrich(result, context.keys, baseline.moves)


@dataclass
class ComparisonReport:
    """
    Benchmarked results of every strategy on one configuration.

    Attributes:
        results: One EnrichedResult per strategy, in registry order
        optimal_moves: BFS baseline move count
        repeats: Runs averaged per strategy
    """
    results: List[EnrichedResult] = field(default_factory=list)
    optimal_moves: Optional[int] = None
    repeats: int = DEFAULT_REPEATS

    @property
    def fastest(self) -> Optional[EnrichedResult]:
        """Solved result with the lowest mean time, or None."""
        solved = [r for r in self.results if r.found]
        if not solved:
            return None
        return min(solved, key=lambda r: r.elapsed_ms)

    def get(self, algorithm: str) -> Optional[EnrichedResult]:
        """Result for a display label such as "A*"."""
        for result in self.results:
            if result.algorithm == algorithm:
                return result
        return None

    def summary(self) -> str:
        """Comparison feedback sentence."""
        best = self.fastest
        if best is None:
            return "No algorithm found a solution for this configuration."
        return (
            f"Comparison: fastest here is {best.algorithm} "
            f"(chose {key_label(best.chosen_key_index)}, "
            f"{best.elapsed_ms:.3f} ms, {best.moves} moves)."
        )

    def to_rows(self) -> List[Dict[str, Any]]:
        """Plain dict rows for tabular display."""
        return [
            {
                "algorithm": r.algorithm,
                "moves": r.moves,
                "time_ms": r.elapsed_ms,
                "nodes_expanded": r.nodes_expanded,
                "chosen_key": key_label(r.chosen_key_index),
                "optimal": r.is_optimal,
                "status": r.status.name,
            }
            for r in self.results
        ]


def compare(start: Optional[Cell], keys: Sequence[Optional[Cell]],
            door: Optional[Cell], repeats: int = DEFAULT_REPEATS,
            options: Optional[Dict[str, Dict[str, Any]]] = None) -> ComparisonReport:
    """
    Benchmark every registered strategy against one BFS baseline.

    Args:
        start: Knight cell
        keys: Three key cells
        door: Door cell
        repeats: Runs averaged per strategy
        options: Per-strategy constructor options, e.g. {"ids": {"max_depth": 10}}

    Returns:
        ComparisonReport in registry order (DFS, BFS, A*, IDS)

    Raises:
        InvalidConfigurationError: If a piece is missing or off the board
    """
    context = _prepare(start, keys, door)
    options = options or {}

    baseline = run_repeated(create_strategy(BASELINE_STRATEGY), context, repeats)
    optimal = baseline.moves

    report = ComparisonReport(optimal_moves=optimal, repeats=repeats)
    for name in get_strategy_names():
        if name == BASELINE_STRATEGY:
            raw = baseline
        else:
            raw = run_repeated(create_strategy(name, **options.get(name, {})), context, repeats)
        report.results.append(enrich(raw, context.keys, optimal))

    logger.info(report.summary())
    return report


__all__ = [
    "DEFAULT_REPEATS",
    "ComparisonReport",
    "benchmark",
    "compare",
    "run_repeated",
    "solve",
]

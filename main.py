"""
Knight Quest - Entry Point

Command-line front end for the knight-and-keys search engine.

Example:
    python main.py solve --knight 0,0 --keys 2,1 7,7 7,6 --door 2,1
    python main.py solve --knight 3,3 --keys 4,5 6,1 1,6 --door 7,0 -a IDS --trace
    python main.py compare --knight 0,0 --keys 7,7 7,6 7,5 --door 0,1 --repeats 100
    python main.py preset tricky-choice --compare
    python main.py random --seed 7
"""

import sys
import logging
import argparse
import random
from typing import List, Optional

import psutil

from knightquest.engine import (
    KEY_SLOTS,
    Cell,
    ComparisonReport,
    InvalidConfigurationError,
    get_default_strategy_name,
    get_strategy_info,
)
from knightquest.presets import get_preset, list_presets
from knightquest.session import Piece, SearchSession
from knightquest.settings import load_settings, save_settings

logger = logging.getLogger(__name__)

EXIT_INVALID_CONFIGURATION = 2


def setup_logging(debug: bool) -> None:
    """Configure logging - output to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("knightquest.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def _format_bytes(n_bytes: int) -> str:
    """Human-readable bytes in KB/MB with 2 decimals."""
    if n_bytes < 1024:
        return f"{n_bytes} B"
    kb = n_bytes / 1024.0
    if kb < 1024:
        return f"{kb:.2f} KB"
    return f"{kb / 1024.0:.2f} MB"


def print_comparison(report: ComparisonReport) -> None:
    """Print the comparison table followed by the summary sentence."""
    header = f"{'Algorithm':<10}{'Moves':>6}{'Time (ms)':>12}{'Expanded':>10}  {'Key':<7}{'Optimal':<8}"
    print(header)
    print("-" * len(header))
    for row in report.to_rows():
        moves = "-" if row["moves"] is None else str(row["moves"])
        optimal = "yes" if row["optimal"] else "no"
        print(
            f"{row['algorithm']:<10}{moves:>6}{row['time_ms']:>12.4f}"
            f"{row['nodes_expanded']:>10}  {row['chosen_key']:<7}{optimal:<8}"
        )
    print()
    print(f"Optimal moves (BFS): {report.optimal_moves}")
    print(f"Averaged over {report.repeats} runs per algorithm")
    print(f"Process memory (RSS): {_format_bytes(psutil.Process().memory_info().rss)}")
    print(report.summary())


def _place_from_args(session: SearchSession, args: argparse.Namespace) -> None:
    """Fill the session from --knight/--keys/--door."""
    if args.knight:
        session.place(Piece.KNIGHT, Cell.parse(args.knight))
    keys: List[str] = args.keys or []
    if len(keys) > KEY_SLOTS:
        raise InvalidConfigurationError(f"At most {KEY_SLOTS} keys can be placed, got {len(keys)}")
    for piece, text in zip((Piece.KEY1, Piece.KEY2, Piece.KEY3), keys):
        session.place(piece, Cell.parse(text))
    if args.door:
        session.place(Piece.DOOR, Cell.parse(args.door))


def _run(session: SearchSession, args: argparse.Namespace) -> int:
    """Run a single algorithm or the comparison on the loaded placement."""
    if getattr(args, "compare", False):
        report = session.run_comparison(args.repeats)
        if report is None:
            print(session.feedback, file=sys.stderr)
            return EXIT_INVALID_CONFIGURATION
        print_comparison(report)
        return 0

    result = session.run(args.algorithm, repeats=args.repeats)
    if result is None:
        print(session.feedback, file=sys.stderr)
        return EXIT_INVALID_CONFIGURATION
    if args.trace:
        print(session.trace)
        print()
    print(session.feedback)
    return 0


def cmd_solve(session: SearchSession, args: argparse.Namespace) -> int:
    _place_from_args(session, args)
    return _run(session, args)


def cmd_compare(session: SearchSession, args: argparse.Namespace) -> int:
    _place_from_args(session, args)
    args.compare = True
    return _run(session, args)


def cmd_preset(session: SearchSession, args: argparse.Namespace) -> int:
    session.apply_preset(get_preset(args.preset_id))
    print(session.feedback)
    return _run(session, args)


def cmd_random(session: SearchSession, args: argparse.Namespace) -> int:
    session.randomize(random.Random(args.seed))
    puzzle = session.puzzle
    print(session.feedback)
    print(f"Knight {puzzle.start}, keys {', '.join(str(k) for k in puzzle.keys)}, door {puzzle.door}")
    return _run(session, args)


def cmd_list(session: SearchSession, args: argparse.Namespace) -> int:
    print("Presets:")
    for preset in list_presets():
        print(f"  {preset.id:<15} {preset.name}")
    print("Algorithms:")
    for info in get_strategy_info():
        print(f"  {info['label']:<15} {info['description']}")
    return 0


def parse_args(argv: Optional[List[str]] = None, settings: Optional[dict] = None) -> argparse.Namespace:
    """Parse command line arguments, using saved settings as defaults."""
    settings = settings or {}

    run_options = argparse.ArgumentParser(add_help=False)
    run_options.add_argument(
        "--algorithm", "-a",
        default=settings.get("strategy_name") or get_default_strategy_name(),
        help="Algorithm to run: DFS, BFS, A*, IDS (default: saved setting)"
    )
    run_options.add_argument(
        "--repeats", "-r",
        type=int,
        default=None,
        help="Benchmark over this many runs and report the mean time"
    )
    run_options.add_argument(
        "--max-depth",
        type=int,
        default=settings.get("ids_max_depth", 15),
        help="IDS depth ceiling (default: saved setting)"
    )
    run_options.add_argument(
        "--trace", "-t",
        action="store_true",
        help="Print the step-by-step trace"
    )
    run_options.add_argument(
        "--compare", "-c",
        action="store_true",
        help="Benchmark all algorithms instead of running one"
    )

    placement = argparse.ArgumentParser(add_help=False)
    placement.add_argument("--knight", "-k", help="Knight cell as row,col")
    placement.add_argument("--keys", nargs="+", metavar="ROW,COL", help="Up to three key cells")
    placement.add_argument("--door", "-d", help="Door cell as row,col")

    parser = argparse.ArgumentParser(
        description="Knight Quest - knight-and-keys search lab (DFS, BFS, A*, IDS)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Save --algorithm and --max-depth as the new defaults"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("solve", parents=[run_options, placement], help="Run one algorithm")
    p.set_defaults(handler=cmd_solve)

    p = sub.add_parser("compare", parents=[run_options, placement], help="Compare all algorithms")
    p.set_defaults(handler=cmd_compare)

    p = sub.add_parser("preset", parents=[run_options], help="Load a preset scenario")
    p.add_argument("preset_id", help="Preset id (see 'list')")
    p.set_defaults(handler=cmd_preset)

    p = sub.add_parser("random", parents=[run_options], help="Random configuration")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.set_defaults(handler=cmd_random)

    p = sub.add_parser("list", help="List presets and algorithms")
    p.set_defaults(handler=cmd_list)

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, configure logging and dispatch the command."""
    settings = load_settings()
    args = parse_args(argv, settings)

    setup_logging(args.debug or settings.get("debug_enabled", False))

    max_depth = getattr(args, "max_depth", settings["ids_max_depth"])
    repeats = settings.get("benchmark_repeats", 40)
    session = SearchSession(ids_max_depth=max_depth, repeats=repeats)

    if args.save and hasattr(args, "algorithm"):
        settings["strategy_name"] = args.algorithm
        settings["ids_max_depth"] = max_depth
        save_settings(settings)

    try:
        return args.handler(session, args)
    except InvalidConfigurationError as e:
        logger.warning(f"Invalid configuration: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_CONFIGURATION
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

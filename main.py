"""CLI entrypoint for the Bug Lab maze search."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from buglab.core.constants import DEFAULT_HEIGHT, DEFAULT_STEP_LIMIT_FACTOR, DEFAULT_WIDTH, SearchAlgorithm
from buglab.core.exceptions import BuglabError
from buglab.engine.context import SearchConfig
from buglab.engine.record_store import RecordStore
from buglab.engine.search import MazeSearch
from buglab.engine.simulator import BugSimulator
from buglab.io.maze_format import read_maze
from buglab.utils.logger import configure_logging, get_logger
from buglab.utils.pretty import pretty_print_layout, print_search_summary


LOGGER = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search for maze layouts that make the bug walk as long as possible",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Grid width in cells")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Grid height in cells")
    parser.add_argument(
        "--algorithm",
        type=str,
        choices=[algo.value for algo in SearchAlgorithm],
        default=SearchAlgorithm.GREEDY_BACKTRACK.value,
        help="Search strategy",
    )
    parser.add_argument(
        "--deep-jump-depth",
        type=int,
        default=2,
        help="Walls added at once when greedy search hits a dead end (1 disables jumps)",
    )
    parser.add_argument(
        "--accept-worse-probability",
        type=float,
        default=0.02,
        help="Chance of a random unscored wall per hill-climb round",
    )
    parser.add_argument(
        "--no-randomize",
        action="store_true",
        help="Keep row-major cell order instead of shuffling candidates",
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed for reproducibility")
    parser.add_argument(
        "--step-limit-factor",
        type=int,
        default=DEFAULT_STEP_LIMIT_FACTOR,
        help="Walk step budget per cell before a layout is judged divergent",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("maze_outputs"),
        help="Directory receiving record layouts and the records log",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Stop after this many search steps (hill climbing never stops otherwise)",
    )
    parser.add_argument(
        "--score-file",
        type=Path,
        metavar="FILE",
        help="Score a saved maze file and exit",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--search-log-level",
        type=str,
        default=None,
        help="Separate level for per-state search progress (e.g. DEBUG)",
    )
    return parser


def score_file(path: Path, step_limit_factor: int) -> int:
    layout = read_maze(path)
    score = BugSimulator(step_limit_factor).calculate_score(layout)
    pretty_print_layout(layout, score=score, label=str(path))
    return score


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    search_level = None
    if args.search_log_level:
        search_level = getattr(logging, args.search_log_level.upper(), logging.DEBUG)
    configure_logging(level, search_level=search_level)

    if args.max_steps is not None and args.max_steps < 0:
        parser.error("--max-steps must be >= 0")

    try:
        if args.score_file:
            score_file(args.score_file, args.step_limit_factor)
            return 0

        config = SearchConfig(
            width=args.width,
            height=args.height,
            algorithm=SearchAlgorithm(args.algorithm),
            deep_jump_depth=args.deep_jump_depth,
            accept_worse_probability=args.accept_worse_probability,
            randomize_cell_order=not args.no_randomize,
            seed=args.seed,
            step_limit_factor=args.step_limit_factor,
            output_dir=args.output_dir,
        )
        search = MazeSearch(config, sink=RecordStore(config.output_dir))
        result = search.run(max_steps=args.max_steps)
    except (BuglabError, OSError) as exc:
        LOGGER.error("An error occurred: %s", exc)
        return 1
    except Exception as exc:
        LOGGER.exception("An error occurred: %s", exc)
        return 1

    print_search_summary(result)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

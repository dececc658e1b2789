"""
Command-line interface for the sorting machine demos
"""

import argparse
import logging
from typing import Optional

from .benchmark import benchmark, format_benchmark
from .Config import *
from .demo import run_demos

logger = logging.getLogger(__name__)


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"{value} is not a non-negative integer")
    return number


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Bubble sort and insertion sort demonstrations")

    parser.add_argument(
        "command",
        nargs="?",
        choices=["demo", "benchmark"],
        default="demo",
        help="Run the sorting demos or the strategy benchmark",
    )

    parser.add_argument("--untimed", action="store_true", help="Do not report how long each demo sort took")

    parser.add_argument("--seed", type=int, default=None, help="Seed for the random vectors")

    parser.add_argument(
        "--lengths",
        type=non_negative_int,
        nargs="+",
        default=list(BENCHMARK_LENGTHS),
        help="Vector lengths to benchmark",
    )

    parser.add_argument("--repeats", type=non_negative_int, default=1, help="Vectors generated per benchmark length")

    parser.add_argument(
        "--log-level",
        "-l",
        help="Logging level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=LOG_LEVEL,
    )

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, args.log_level))

    if args.command == "benchmark":
        logger.info(f"Benchmarking lengths {args.lengths} with {args.repeats} repeat(s)")
        print(format_benchmark(benchmark(args.lengths, repeats=args.repeats, seed=args.seed)))
    else:
        run_demos(timed=not args.untimed, seed=args.seed)
    return 0

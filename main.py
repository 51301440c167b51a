"""
Command line front end for index-range windowing:
- Print the ranges for a collection length (plain or JSON)
- Count ranges without iterating
- Benchmark partitioning over growing collection sizes
"""

from argparse import ArgumentParser, Namespace
from typing import List, Optional, Sequence
import json
import logging
import sys
import time

from core.idx_range import IdxRange
from core.settings import WindowSettings
from windowing.ranges import partition, produce_ranges, window_count

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
LOGGER = logging.getLogger(__name__)

BENCHMARK_PARTITION_SIZE = 17
BENCHMARK_LENGTHS = [17 * 10**k + 11 for k in range(1, 6)]
BENCHMARK_REPEATS = 10


def format_ranges(ranges: Sequence[IdxRange], as_json: bool = False) -> str:
    """Render ranges one per line as `low high`, or as a JSON list."""
    if as_json:
        return json.dumps([rng.as_dict() for rng in ranges])
    return "\n".join(f"{rng.low} {rng.high}" for rng in ranges)


def time_partition(length: int, size: int, repeats: int = BENCHMARK_REPEATS) -> float:
    """Drain `partition(length, size)` `repeats` times, return average ms."""
    times = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        for _ in partition(length, size):
            pass
        times.append((time.perf_counter() - t0) * 1000)
    return sum(times) / len(times)


def run_benchmark(size: int = BENCHMARK_PARTITION_SIZE) -> List[str]:
    """Time partitioning for each benchmark length and return report lines."""
    lines = []
    for length in BENCHMARK_LENGTHS:
        avg_ms = time_partition(length, size, repeats=BENCHMARK_REPEATS)
        count = window_count(length, size, size)
        lines.append(f"{length:>10d} len  {count:>8d} ranges  {avg_ms:10.3f} ms")
        LOGGER.debug("Benchmarked length=%d: %.3f ms", length, avg_ms)
    return lines


def build_parser(settings: WindowSettings) -> ArgumentParser:
    parser = ArgumentParser(
        description="Print the index ranges that window a collection of a given length."
    )
    parser.add_argument(
        "length",
        type=int,
        nargs="?",
        help="Length of the collection to window",
    )
    parser.add_argument(
        "-s", "--size",
        type=int,
        default=settings.size,
        help="Window size (default: %(default)s, env WINDOW_SIZE)",
    )
    parser.add_argument(
        "--step",
        type=int,
        default=settings.step,
        help="Distance between window starts (default: window size, env WINDOW_STEP)",
    )
    parser.add_argument(
        "--json",
        help="Print ranges as a JSON list",
        action="store_true",
    )
    parser.add_argument(
        "--count",
        help="Only print the number of ranges",
        action="store_true",
    )
    parser.add_argument(
        "--benchmark",
        help="Time partitioning over growing collection lengths",
        action="store_true",
    )
    parser.add_argument(
        "-v", "--verbose",
        help="Show debug logs",
        action="store_true",
    )
    return parser


def run(args: Namespace) -> str:
    """Execute the parsed command and return its output."""
    if args.benchmark:
        return "\n".join(run_benchmark(args.size))

    step = args.size if args.step is None else args.step
    if args.count:
        return str(window_count(args.length, args.size, step))

    ranges = list(produce_ranges(args.length, args.size, step))
    LOGGER.debug("Produced %d ranges", len(ranges))
    return format_ranges(ranges, as_json=args.json)


def main(argv: Optional[Sequence[str]] = None) -> None:
    try:
        settings = WindowSettings.from_env()
    except ValueError as e:
        LOGGER.error("Invalid configuration: %s", e)
        sys.exit(1)

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.length is None and not args.benchmark:
        parser.error("length is required unless --benchmark is given")

    try:
        output = run(args)
    except ValueError as e:
        LOGGER.error(str(e))
        sys.exit(1)

    if output:
        print(output)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Compare search algorithms on a set of word-ladder problems.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --algorithms dijkstra astar
    python scripts/benchmark.py --problems data/benchmark_problems.json --seed 42
    python scripts/benchmark.py --output results/benchmark.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

logging.basicConfig(level=logging.WARNING)  # Quiet mode

from pathfinder.benchmark import load_problems, run_benchmark  # noqa: E402
from pathfinder.config import (  # noqa: E402
    BENCHMARK_RANDOM_WALK_MAX_STEPS,
    DEFAULT_DICTIONARY_PATH,
    DEFAULT_PROBLEMS_PATH,
    RANDOM_SEED,
)
from pathfinder.graph import WordLadder  # noqa: E402
from pathfinder.search import Algorithm  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Compare search algorithms")
    parser.add_argument("--dictionary", type=Path, default=DEFAULT_DICTIONARY_PATH)
    parser.add_argument("--problems", type=Path, default=DEFAULT_PROBLEMS_PATH)
    parser.add_argument(
        "--algorithms",
        nargs="+",
        default=[a.value for a in Algorithm],
        choices=[a.value for a in Algorithm],
    )
    parser.add_argument("--seed", type=int, default=RANDOM_SEED)
    parser.add_argument(
        "--max-steps",
        type=int,
        default=BENCHMARK_RANDOM_WALK_MAX_STEPS,
        help=f"Random walk step bound (default: {BENCHMARK_RANDOM_WALK_MAX_STEPS})",
    )
    parser.add_argument("--output", type=Path, help="Write per-run results as JSON")
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    try:
        ladder = WordLadder.from_file(args.dictionary)
        problems = load_problems(args.problems)
    except (OSError, json.JSONDecodeError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("=" * 70)
    print("Pathfinder - Algorithm Comparison")
    print("=" * 70)
    print(f"\nTesting {len(args.algorithms)} algorithms on {len(problems)} problems")
    print(f"Graph: {ladder!r}\n")

    summaries = run_benchmark(
        ladder,
        problems,
        algorithms=args.algorithms,
        seed=args.seed,
        max_random_steps=args.max_steps,
    )

    for i, problem in enumerate(problems):
        print(f"[{i + 1}/{len(problems)}] {problem.start} -> {problem.goal}")
        for summary in summaries:
            result = summary.results[i]
            status = "FOUND" if result.success else "NONE"
            print(
                f"  {summary.algorithm:10} : {status:5} cost {result.cost:6.1f}, "
                f"{result.visited_nodes:5} visited ({result.elapsed_time * 1000:.1f}ms)"
            )

    print("\n" + "=" * 70)
    print("SUMMARY")
    print("=" * 70)
    for s in summaries:
        print(
            f"  {s.algorithm:10} : {s.successes}/{s.runs} found, "
            f"avg cost {s.mean_cost:.1f}, "
            f"avg visited {s.mean_visited_nodes:.1f} (median {s.median_visited_nodes:.0f})"
        )

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            s.algorithm: [r.to_dict() for r in s.results] for s in summaries
        }
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        print(f"\nResults saved to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

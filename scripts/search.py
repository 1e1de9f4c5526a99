#!/usr/bin/env python3
"""
Pathfinder CLI - Find a word ladder between two words.

Usage:
    python scripts/search.py --start cold --goal warm
    python scripts/search.py --start head --goal tail --algorithm dijkstra
    python scripts/search.py --start stone --goal shape --algorithm random --seed 7 --max-steps 500
    python scripts/search.py --dictionary /usr/share/dict/words --describe

Algorithms:
    random   - Random walk (non-optimal baseline, may not terminate without --max-steps)
    dijkstra - Uniform-cost search
    astar    - A* guided by the Hamming distance to the goal (default)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathfinder.config import (  # noqa: E402
    DEFAULT_ALGORITHM,
    DEFAULT_DICTIONARY_PATH,
    LOG_LEVEL,
    RANDOM_SEED,
    RANDOM_WALK_MAX_STEPS,
)
from pathfinder.graph import WordLadder  # noqa: E402
from pathfinder.search import Algorithm, PathFinder  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a word ladder between two words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--dictionary",
        type=Path,
        default=DEFAULT_DICTIONARY_PATH,
        help=f"Word list, one word per line (default: {DEFAULT_DICTIONARY_PATH})",
    )
    parser.add_argument(
        "--start",
        type=str,
        help="Starting word",
    )
    parser.add_argument(
        "--goal",
        type=str,
        help="Word to reach",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=[a.value for a in Algorithm],
        help=f"Search algorithm (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_SEED,
        help="Random seed for the random walk",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=RANDOM_WALK_MAX_STEPS,
        help="Give up a random walk after this many steps (default: unbounded)",
    )
    parser.add_argument(
        "--describe",
        action="store_true",
        help="Print a summary of the dictionary graph",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    if not args.describe and (args.start is None or args.goal is None):
        parser.error("--start and --goal are required unless --describe is given")
    return args


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        ladder = WordLadder.from_file(args.dictionary)
    except OSError as e:
        print(f"Error: cannot read dictionary: {e}", file=sys.stderr)
        return 2

    if args.describe:
        print(ladder)
        if args.start is None or args.goal is None:
            return 0
        print()

    start = args.start.lower()
    goal = args.goal.lower()
    missing = [word for word in (start, goal) if word not in ladder]
    if missing:
        print(f"Error: not in dictionary: {', '.join(missing)}", file=sys.stderr)
        return 2

    finder = PathFinder(ladder, seed=args.seed, max_random_steps=args.max_steps)
    try:
        result = finder.search(args.algorithm, start, goal)
    except KeyboardInterrupt:
        print("\n\nSearch interrupted by user")
        return 130  # Standard exit code for Ctrl+C

    print(result)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())

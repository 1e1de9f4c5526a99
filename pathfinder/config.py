"""
Configuration constants for the Pathfinder project.

All paths, defaults, and tunable parameters are defined here.
Values can be overridden through environment variables or a `.env` file
in the project root.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathfinder/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

logger = logging.getLogger(__name__)


def optional_int_env(name: str) -> int | None:
    """
    Read an integer from the environment.

    Returns None if the variable is unset, empty, or not an integer
    (a warning names the bad value).
    """
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: expected an integer")
        return None


# Data directory (contains dictionaries and benchmark problems)
DATA_DIR = PROJECT_ROOT / "data"

# Word list used by the word-ladder graph (one word per line)
DEFAULT_DICTIONARY_PATH = DATA_DIR / "words.txt"

# Start/goal pairs for scripts/benchmark.py
DEFAULT_PROBLEMS_PATH = DATA_DIR / "benchmark_problems.json"

# =============================================================================
# Search Configuration
# =============================================================================

# Algorithm used when none is given on the command line
DEFAULT_ALGORITHM = "astar"

# Cost reported by a failed search
FAILURE_COST = -1.0

# Maximum edges a random walk may follow before giving up.
# None keeps the walk unbounded (it only stops at the goal or a dead end).
RANDOM_WALK_MAX_STEPS = optional_int_env("PATHFINDER_RANDOM_WALK_MAX_STEPS")

# Seed for the random walk (None = nondeterministic)
RANDOM_SEED = optional_int_env("PATHFINDER_SEED")

# =============================================================================
# Benchmark Configuration
# =============================================================================

# Step bound for random walks in benchmarks (unbounded walks may never end
# on cyclic graphs without dead ends)
BENCHMARK_RANDOM_WALK_MAX_STEPS = 1000

# =============================================================================
# Word Ladder Configuration
# =============================================================================

# Lines starting with this prefix are ignored in dictionary files
DICTIONARY_COMMENT_PREFIX = "#"

# Word length used for the examples in WordLadder.describe()
DESCRIBE_WORD_LENGTH = 5

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "dictionary": DEFAULT_DICTIONARY_PATH.exists(),
        "benchmark_problems": DEFAULT_PROBLEMS_PATH.exists(),
    }


def get_missing_data_files() -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files()
    return [name for name, exists in status.items() if not exists]

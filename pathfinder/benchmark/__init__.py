"""
Benchmark module.

Provides infrastructure for comparing search algorithms:
- Problem: Defines a benchmark problem
- AlgorithmSummary: Aggregate statistics per algorithm
- run_benchmark: Runs algorithms on problem sets
- load_problems: Reads problems from JSON
"""

from pathfinder.benchmark.runner import (
    AlgorithmSummary,
    Problem,
    load_problems,
    run_benchmark,
)

__all__ = [
    "AlgorithmSummary",
    "Problem",
    "load_problems",
    "run_benchmark",
]

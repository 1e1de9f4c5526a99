"""
Benchmark runner comparing search algorithms on a set of problems.

Usage:
    problems = load_problems("data/benchmark_problems.json")
    for summary in run_benchmark(ladder, problems):
        print(summary.algorithm, summary.success_rate)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from pathfinder.config import BENCHMARK_RANDOM_WALK_MAX_STEPS
from pathfinder.graph.base import DirectedGraph
from pathfinder.search import Algorithm, PathFinder, SearchResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Problem:
    """A start/goal pair."""

    start: Hashable
    goal: Hashable


@dataclass
class AlgorithmSummary:
    """
    Aggregate statistics for one algorithm over a problem set.

    Attributes:
        algorithm: Algorithm name
        runs: Number of problems attempted
        successes: Number of problems solved
        success_rate: successes / runs
        mean_cost: Mean path cost over solved problems (nan if none)
        mean_visited_nodes: Mean visited nodes over all runs
        median_visited_nodes: Median visited nodes over all runs
        mean_elapsed_time: Mean seconds per run
        results: Individual results, in problem order
    """

    algorithm: str
    runs: int
    successes: int
    success_rate: float
    mean_cost: float
    mean_visited_nodes: float
    median_visited_nodes: float
    mean_elapsed_time: float
    results: list[SearchResult]

    @classmethod
    def from_results(cls, algorithm: str, results: list[SearchResult]) -> AlgorithmSummary:
        """Compute summary statistics from individual results."""
        visited = np.array([r.visited_nodes for r in results], dtype=float)
        elapsed = np.array([r.elapsed_time for r in results], dtype=float)
        costs = np.array([r.cost for r in results if r.success], dtype=float)
        successes = len(costs)

        return cls(
            algorithm=algorithm,
            runs=len(results),
            successes=successes,
            success_rate=successes / len(results) if results else 0.0,
            mean_cost=float(costs.mean()) if successes else float("nan"),
            mean_visited_nodes=float(visited.mean()) if results else 0.0,
            median_visited_nodes=float(np.median(visited)) if results else 0.0,
            mean_elapsed_time=float(elapsed.mean()) if results else 0.0,
            results=results,
        )


def load_problems(path: Path | str) -> list[Problem]:
    """
    Load benchmark problems from a JSON file.

    Expected format: {"problems": [{"start": ..., "goal": ...}, ...]}
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return [Problem(p["start"], p["goal"]) for p in data["problems"]]


def run_benchmark(
    graph: DirectedGraph,
    problems: Sequence[Problem],
    algorithms: Iterable[str | Algorithm] = tuple(Algorithm),
    seed: int | None = None,
    max_random_steps: int | None = BENCHMARK_RANDOM_WALK_MAX_STEPS,
) -> list[AlgorithmSummary]:
    """
    Run every algorithm on every problem.

    Args:
        graph: Graph to search
        problems: Start/goal pairs
        algorithms: Algorithms to compare (default: all)
        seed: Random seed for the random walk
        max_random_steps: Step bound for the random walk (None = unbounded)

    Returns:
        One summary per algorithm, in the order given

    Raises:
        ValueError: If an algorithm name is unknown
    """
    resolved = [Algorithm.from_name(a) for a in algorithms]
    finder = PathFinder(graph, seed=seed, max_random_steps=max_random_steps)

    summaries = []
    for algorithm in resolved:
        logger.info(f"Benchmarking {algorithm.value} on {len(problems)} problems")
        results = [finder.search(algorithm, p.start, p.goal) for p in problems]
        summaries.append(AlgorithmSummary.from_results(algorithm.value, results))

    return summaries

"""
Search engine that dispatches to one of the search algorithms by name.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Any, Generic

from pathfinder.config import RANDOM_WALK_MAX_STEPS
from pathfinder.graph.base import DirectedGraph, V
from pathfinder.search.algorithms import SEARCH_FUNCTIONS, Algorithm
from pathfinder.search.result import SearchResult

logger = logging.getLogger(__name__)


class PathFinder(Generic[V]):
    """
    Runs searches over a graph.

    Each call to search() allocates its own distance maps and frontier, so
    one PathFinder can be reused for any number of searches. The random
    generator used by the random walk is the only state kept between calls.
    """

    def __init__(
        self,
        graph: DirectedGraph[V],
        *,
        seed: int | None = None,
        max_random_steps: int | None = RANDOM_WALK_MAX_STEPS,
    ) -> None:
        """
        Initialize the engine.

        Args:
            graph: Graph to search
            seed: Random seed for reproducible random walks
            max_random_steps: Step bound for random walks (None = unbounded)
        """
        self.graph = graph
        self._rng = random.Random(seed)
        self._options: dict[Algorithm, dict[str, Any]] = {
            Algorithm.RANDOM: {"rng": self._rng, "max_steps": max_random_steps},
        }

    def search(self, algorithm: str | Algorithm, start: V, goal: V) -> SearchResult[V]:
        """
        Search for a path from `start` to `goal`.

        Args:
            algorithm: "random", "dijkstra", "astar" or an Algorithm member
            start: Starting vertex
            goal: Vertex to reach

        Returns:
            SearchResult; check `success`, a missing path is not an error

        Raises:
            ValueError: If the algorithm name is unknown
        """
        algorithm = Algorithm.from_name(algorithm)
        logger.info(f"Searching {start} -> {goal} with {algorithm.value}")

        search_fn = SEARCH_FUNCTIONS[algorithm]
        options = self._options.get(algorithm, {})

        started_at = time.perf_counter()
        result = search_fn(self.graph, start, goal, started_at=started_at, **options)

        if result.success:
            logger.info(
                f"Found path ({result.steps} steps, cost {result.cost}) "
                f"after visiting {result.visited_nodes} nodes"
            )
        else:
            logger.info(
                f"No path from {start} to {goal} "
                f"after visiting {result.visited_nodes} nodes"
            )
        return result

    def __repr__(self) -> str:
        return f"PathFinder(graph={self.graph!r})"

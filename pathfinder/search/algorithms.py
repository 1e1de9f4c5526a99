"""
Search algorithms.

Each algorithm is a plain function (graph, start, goal) -> SearchResult:
- random_walk: Follows a uniformly random outgoing edge until it hits the goal
  or a dead end. Non-optimal baseline.
- dijkstra: Uniform-cost search. Optimal for non-negative weights.
- astar: Best-first search ordered by distance + graph.guess_cost().
  Optimal when the heuristic is admissible.

Dijkstra and A* push a vertex again every time its distance improves instead
of decreasing its key. Stale heap entries are skipped when popped because the
vertex is already finalized.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import random
import time
from collections.abc import Callable
from enum import Enum

from pathfinder.graph.base import DirectedEdge, DirectedGraph, V
from pathfinder.search.result import SearchResult

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    """Search strategies supported by PathFinder."""

    RANDOM = "random"
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"

    @classmethod
    def from_name(cls, name: str | Algorithm) -> Algorithm:
        """
        Resolve an algorithm by name.

        Raises:
            ValueError: If the name is unknown
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            available = ", ".join(a.value for a in cls)
            raise ValueError(
                f"Unknown search algorithm '{name}'. Available: {available}"
            ) from None


# =============================================================================
# Random walk
# =============================================================================

def random_walk(
    graph: DirectedGraph[V],
    start: V,
    goal: V,
    *,
    started_at: float | None = None,
    rng: random.Random | None = None,
    max_steps: int | None = None,
) -> SearchResult[V]:
    """
    Walk the graph by picking a random outgoing edge at every step.

    There is no cycle detection, so without `max_steps` the walk only ends at
    the goal or at a vertex without outgoing edges.

    Args:
        graph: Graph to search
        start: Starting vertex
        goal: Vertex to reach
        started_at: Dispatch timestamp (time.perf_counter()), defaults to now
        rng: Random generator, for reproducible walks
        max_steps: Give up after following this many edges (None = unbounded)
    """
    if started_at is None:
        started_at = time.perf_counter()
    if rng is None:
        rng = random.Random()

    visited_nodes = 0
    cost = 0.0
    current = start
    path = [current]

    while True:
        visited_nodes += 1
        if current == goal:
            return SearchResult.found(start, current, cost, path, visited_nodes, started_at)

        if max_steps is not None and len(path) - 1 >= max_steps:
            logger.warning(f"Random walk from {start} gave up after {max_steps} steps")
            break

        neighbours = graph.outgoing_edges(current)
        if not neighbours:
            logger.debug(f"Random walk hit a dead end at {current}")
            break

        edge = rng.choice(neighbours)
        cost += edge.weight
        current = edge.target
        path.append(current)
        logger.debug(f"Step {len(path) - 1}: {edge.source} -> {current}")

    return SearchResult.not_found(start, visited_nodes, started_at)


# =============================================================================
# Dijkstra / A*
# =============================================================================

def _reconstruct_path(
    edge_to: dict[V, DirectedEdge[V]],
    start: V,
    goal: V,
) -> tuple[list[V], float]:
    """Follow edge_to back from goal to start. Returns (path, cost)."""
    path = [goal]
    cost = 0.0
    current = goal
    while current != start:
        edge = edge_to[current]
        cost += edge.weight
        current = edge.source
        path.append(current)
    path.reverse()
    return path, cost


def _best_first(
    graph: DirectedGraph[V],
    start: V,
    goal: V,
    heuristic: Callable[[V], float],
    started_at: float,
) -> SearchResult[V]:
    """Shared loop for Dijkstra and A*; frontier priority is dist + heuristic(v)."""
    visited_nodes = 0
    dist_to: dict[V, float] = {start: 0.0}
    edge_to: dict[V, DirectedEdge[V]] = {}
    visited: set[V] = set()

    # Vertices may not be orderable: break priority ties by insertion order
    counter = itertools.count()
    frontier = [(heuristic(start), next(counter), start)]

    while frontier:
        _, _, node = heapq.heappop(frontier)
        if node in visited:
            continue

        visited.add(node)
        visited_nodes += 1

        if node == goal:
            path, cost = _reconstruct_path(edge_to, start, goal)
            return SearchResult.found(start, goal, cost, path, visited_nodes, started_at)

        for edge in graph.outgoing_edges(node):
            next_node = edge.target
            if next_node in visited:
                continue

            new_distance = dist_to[node] + edge.weight
            if next_node not in dist_to or dist_to[next_node] > new_distance:
                dist_to[next_node] = new_distance
                edge_to[next_node] = edge
                priority = new_distance + heuristic(next_node)
                heapq.heappush(frontier, (priority, next(counter), next_node))

    return SearchResult.not_found(start, visited_nodes, started_at)


def dijkstra(
    graph: DirectedGraph[V],
    start: V,
    goal: V,
    *,
    started_at: float | None = None,
) -> SearchResult[V]:
    """
    Uniform-cost search from `start` to `goal`.

    Requires non-negative edge weights: a finalized vertex is never
    reconsidered, so a negative edge found later cannot fix its distance.
    """
    if started_at is None:
        started_at = time.perf_counter()
    return _best_first(graph, start, goal, lambda _: 0.0, started_at)


def astar(
    graph: DirectedGraph[V],
    start: V,
    goal: V,
    *,
    started_at: float | None = None,
) -> SearchResult[V]:
    """
    A* search from `start` to `goal` guided by graph.guess_cost().

    Finds an optimal path when the heuristic is admissible; with a consistent
    heuristic it expands no more vertices than dijkstra().
    """
    if started_at is None:
        started_at = time.perf_counter()
    return _best_first(
        graph, start, goal, lambda v: graph.guess_cost(v, goal), started_at
    )


# Every Algorithm member must have an entry
SEARCH_FUNCTIONS: dict[Algorithm, Callable[..., SearchResult]] = {
    Algorithm.RANDOM: random_walk,
    Algorithm.DIJKSTRA: dijkstra,
    Algorithm.ASTAR: astar,
}

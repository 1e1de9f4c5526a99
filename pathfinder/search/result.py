"""
Search result dataclass.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic

from pathfinder.config import FAILURE_COST
from pathfinder.graph.base import V


@dataclass(frozen=True)
class SearchResult(Generic[V]):
    """
    Outcome of a single search call.

    Attributes:
        success: Whether a path to the goal was found
        start: Vertex the search started from
        goal: Vertex reached (None on failure)
        cost: Sum of edge weights along the path (-1.0 on failure)
        path: Vertices from start to goal inclusive (None on failure)
        visited_nodes: Vertices expanded (Dijkstra/A*) or steps taken (random walk)
        elapsed_time: Seconds between dispatch and result construction
    """

    success: bool
    start: V
    goal: V | None
    cost: float
    path: tuple[V, ...] | None
    visited_nodes: int
    elapsed_time: float

    @classmethod
    def found(
        cls,
        start: V,
        goal: V,
        cost: float,
        path: Sequence[V],
        visited_nodes: int,
        started_at: float,
    ) -> SearchResult[V]:
        """Build a successful result; `started_at` is a time.perf_counter() value."""
        return cls(
            success=True,
            start=start,
            goal=goal,
            cost=cost,
            path=tuple(path),
            visited_nodes=visited_nodes,
            elapsed_time=time.perf_counter() - started_at,
        )

    @classmethod
    def not_found(
        cls,
        start: V,
        visited_nodes: int,
        started_at: float,
    ) -> SearchResult[V]:
        """Build a failed result; `started_at` is a time.perf_counter() value."""
        return cls(
            success=False,
            start=start,
            goal=None,
            cost=FAILURE_COST,
            path=None,
            visited_nodes=visited_nodes,
            elapsed_time=time.perf_counter() - started_at,
        )

    @property
    def steps(self) -> int:
        """Number of edges followed (0 on failure)."""
        return len(self.path) - 1 if self.path else 0

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation (vertices rendered with str())."""
        return {
            "success": self.success,
            "start": str(self.start),
            "goal": None if self.goal is None else str(self.goal),
            "cost": self.cost,
            "path": None if self.path is None else [str(v) for v in self.path],
            "visited_nodes": self.visited_nodes,
            "elapsed_time": self.elapsed_time,
        }

    def __str__(self) -> str:
        lines = [
            f"Visited nodes: {self.visited_nodes}",
            f"Elapsed time: {self.elapsed_time:.1f} seconds",
        ]
        if self.success:
            lines.append(f"Total cost from {self.start} -> {self.goal}: {self.cost}")
            lines.append("Path: " + " -> ".join(str(v) for v in self.path))
        else:
            lines.append(f"No path found from {self.start}")
        return "\n".join(lines)

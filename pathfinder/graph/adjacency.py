"""
In-memory weighted graph backed by an adjacency dict.

Graphs can be saved to and loaded from msgpack files, in the same spirit
as a pre-computed link graph:

    {"edges": [[source, target, weight], ...], "vertices": [...]}
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

import msgpack

from pathfinder.graph.base import DirectedEdge, DirectedGraph, V

logger = logging.getLogger(__name__)


class AdjacencyGraph(DirectedGraph[V]):
    """
    Directed weighted graph stored as a dict of edge lists.

    Attributes:
        heuristic: Optional (vertex, goal) -> float estimate used by A*.
            Defaults to the zero heuristic.
    """

    def __init__(
        self,
        edges: Iterable[tuple[V, V] | tuple[V, V, float]] = (),
        heuristic: Callable[[V, V], float] | None = None,
    ) -> None:
        """
        Initialize the graph.

        Args:
            edges: Initial (source, target) or (source, target, weight) tuples
            heuristic: Remaining-cost estimate for A*
        """
        self._adjacency: dict[V, list[DirectedEdge[V]]] = {}
        self.heuristic = heuristic
        for edge in edges:
            self.add_edge(*edge)

    def add_vertex(self, vertex: V) -> None:
        """Add a vertex without edges (no-op if it already exists)."""
        self._adjacency.setdefault(vertex, [])

    def add_edge(self, source: V, target: V, weight: float = 1.0) -> DirectedEdge[V]:
        """Add a directed edge, creating both endpoints if needed."""
        edge = DirectedEdge(source, target, float(weight))
        self._adjacency.setdefault(source, []).append(edge)
        self.add_vertex(target)
        return edge

    def vertices(self) -> list[V]:
        """All vertices, in insertion order."""
        return list(self._adjacency)

    def edges(self) -> list[DirectedEdge[V]]:
        """All edges, grouped by source vertex."""
        return [edge for edges in self._adjacency.values() for edge in edges]

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())

    def outgoing_edges(self, vertex: V) -> Sequence[DirectedEdge[V]]:
        return tuple(self._adjacency.get(vertex, ()))

    def guess_cost(self, vertex: V, goal: V) -> float:
        if self.heuristic is None:
            return 0.0
        return self.heuristic(vertex, goal)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"AdjacencyGraph(vertices={len(self)}, edges={self.edge_count()})"

    # =========================================================================
    # Persistence
    # =========================================================================

    def save(self, path: Path | str) -> None:
        """Write the graph to a msgpack file. The heuristic is not saved."""
        payload = {
            "vertices": self.vertices(),
            "edges": [[e.source, e.target, e.weight] for e in self.edges()],
        }
        with open(path, "wb") as f:
            msgpack.pack(payload, f)
        logger.info(f"Saved graph with {len(self):,} vertices to {path}")

    @classmethod
    def load(
        cls,
        path: Path | str,
        heuristic: Callable[[V, V], float] | None = None,
    ) -> AdjacencyGraph:
        """
        Load a graph written by save().

        Vertices come back as msgpack decodes them (lists become lists, so
        only scalar vertices such as str and int round-trip unchanged).
        """
        logger.info(f"Loading graph from {path}...")
        with open(path, "rb") as f:
            payload = msgpack.load(f)

        graph = cls(heuristic=heuristic)
        for vertex in payload.get("vertices", []):
            graph.add_vertex(vertex)
        for source, target, weight in payload.get("edges", []):
            graph.add_edge(source, target, weight)

        logger.info(f"Loaded {len(graph):,} vertices and {graph.edge_count():,} edges")
        return graph

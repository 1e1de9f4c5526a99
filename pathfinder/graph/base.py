"""
Graph contract consumed by the search engine.

Any graph works as long as it can list the outgoing edges of a vertex.
A* additionally asks the graph for an estimate of the remaining cost.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True)
class DirectedEdge(Generic[V]):
    """
    A directed, weighted edge.

    Attributes:
        source: Vertex the edge leaves from
        target: Vertex the edge points to
        weight: Cost of following the edge (must be >= 0 for Dijkstra/A*)
    """

    source: V
    target: V
    weight: float = 1.0


class DirectedGraph(ABC, Generic[V]):
    """
    Abstract base class for graphs that can be searched.

    Vertices can be any hashable value. The engine never mutates the graph
    and assumes it does not change while a search is running.
    """

    @abstractmethod
    def outgoing_edges(self, vertex: V) -> Sequence[DirectedEdge[V]]:
        """
        Return the edges leaving `vertex`.

        Args:
            vertex: A graph vertex

        Returns:
            The outgoing edges, in any order. Must be an empty sequence
            (never None, never an exception) for a vertex without edges.
        """
        ...

    def guess_cost(self, vertex: V, goal: V) -> float:
        """
        Estimate the remaining cost from `vertex` to `goal`.

        Used only by A*. The estimate must never exceed the true remaining
        cost (admissible), and should satisfy the triangle inequality across
        every edge (consistent). Neither property is checked: a bad heuristic
        silently yields suboptimal paths.

        The default returns 0.0, which makes A* behave like Dijkstra.
        """
        return 0.0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

"""
Graph module.

Provides the graph contract and the graphs shipped with the project:
- DirectedEdge: Immutable weighted edge
- DirectedGraph: Abstract contract consumed by the search engine
- AdjacencyGraph: In-memory weighted graph with msgpack persistence
- WordLadder: Words linked by single-letter substitutions
"""

from pathfinder.graph.adjacency import AdjacencyGraph
from pathfinder.graph.base import DirectedEdge, DirectedGraph
from pathfinder.graph.word_ladder import WordLadder

__all__ = [
    "DirectedEdge",
    "DirectedGraph",
    "AdjacencyGraph",
    "WordLadder",
]

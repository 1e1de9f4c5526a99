"""
Pathfinder.

A small shortest-path search engine that runs a random walk, Dijkstra's
algorithm, or A* over any graph that can list a vertex's outgoing edges.
"""

__version__ = "0.1.0"

"""
Search module.

Provides the search engine and its result type:
- SearchResult: Immutable outcome of a search
- Algorithm: Supported search strategies
- PathFinder: Dispatches a search to an algorithm by name
- random_walk, dijkstra, astar: The algorithms as plain functions
"""

from pathfinder.search.algorithms import (
    SEARCH_FUNCTIONS,
    Algorithm,
    astar,
    dijkstra,
    random_walk,
)
from pathfinder.search.engine import PathFinder
from pathfinder.search.result import SearchResult

__all__ = [
    "Algorithm",
    "SEARCH_FUNCTIONS",
    "PathFinder",
    "SearchResult",
    "astar",
    "dijkstra",
    "random_walk",
]

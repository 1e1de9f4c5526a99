"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from pathfinder.graph import AdjacencyGraph, WordLadder


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def diamond_graph() -> AdjacencyGraph:
    """A->B (1), B->C (1), A->C (5), C->D (1): the cheap route goes through B."""
    return AdjacencyGraph([
        ("A", "B", 1),
        ("B", "C", 1),
        ("A", "C", 5),
        ("C", "D", 1),
    ])


@pytest.fixture
def dead_end_graph() -> AdjacencyGraph:
    """X has no outgoing edges; Y -> Z is unreachable from X."""
    graph = AdjacencyGraph([("Y", "Z", 1)])
    graph.add_vertex("X")
    return graph


def _manhattan(a: tuple[int, int], b: tuple[int, int]) -> float:
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


@pytest.fixture
def grid_graph() -> AdjacencyGraph:
    """6x6 four-connected grid with unit weights and a Manhattan heuristic."""
    size = 6
    graph = AdjacencyGraph(heuristic=_manhattan)
    for x in range(size):
        for y in range(size):
            for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
                nx, ny = x + dx, y + dy
                if 0 <= nx < size and 0 <= ny < size:
                    graph.add_edge((x, y), (nx, ny), 1.0)
    return graph


@pytest.fixture
def ladder_words() -> list[str]:
    """Small dictionary with a cold -> warm ladder."""
    return ["cold", "cord", "card", "ward", "warm", "word", "worm", "corn", "hate"]


@pytest.fixture
def ladder(ladder_words: list[str]) -> WordLadder:
    """WordLadder built from ladder_words."""
    return WordLadder(ladder_words)

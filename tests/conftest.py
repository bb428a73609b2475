"""
Pytest configuration and shared fixtures.

Graphs used across test files are built here so each test starts from a fresh instance.
"""

import matplotlib
import pytest

from graph_search.graph import Graph

# plots are written to files only
matplotlib.use("Agg")


@pytest.fixture
def diamond() -> Graph:
    """Undirected 4-vertex graph with two shortest paths 0-1-2 and 0-3-2."""
    graph = Graph(4)
    for u, v in [(0, 1), (1, 2), (0, 3), (3, 2)]:
        graph.add_edge(u, v)
    return graph


@pytest.fixture
def disconnected() -> Graph:
    """Two components {0, 1} and {2, 3} plus the isolated vertex 4."""
    graph = Graph(5)
    graph.add_edge(0, 1, 7)
    graph.add_edge(2, 3, 9)
    return graph


@pytest.fixture
def directed_chain() -> Graph:
    """0 -> 1 -> 2 -> 3"""
    graph = Graph(4, directed=True)
    graph.add_edge(0, 1, 5)
    graph.add_edge(1, 2, 6)
    graph.add_edge(2, 3, 7)
    return graph


@pytest.fixture
def small_params() -> dict:
    return {
        'n_graphs': 3,
        'min_vertices': 6,
        'max_vertices': 8,
        'min_edges': 5,
        'max_edges': 7,
        'directed': False,
    }

"""Pytest configuration and shared fixtures for simplegraph tests.

This module provides the sample graphs used across the test suite:
- friends_graph: weighted, undirected social graph (BFS and Dijkstra)
- wikipedia_graph: unweighted, undirected DFS example graph
- prim_graph: weighted, undirected six-vertex MST example
"""

import pytest

from simplegraph import Graph
from simplegraph.diagnostics import set_debug_enabled, is_debug_enabled

FRIENDS_EDGES = [
    ("Joe", "Bob", 3),
    ("Joe", "Mike", 1),
    ("Bob", "Mike", 2),
    ("Bob", "Sam", 8),
    ("Sam", "Kelly", 6),
    ("Kelly", "Vic", 3),
    ("Kelly", "Finn", 2),
    ("Finn", "Vic", 3),
    ("Finn", "Jess", 2),
    ("Jess", "Vic", 2),
    ("Vic", "Mike", 4),
]

WIKIPEDIA_EDGES = [
    ("A", "B"),
    ("A", "C"),
    ("A", "E"),
    ("B", "D"),
    ("B", "F"),
    ("C", "G"),
    ("F", "E"),
]

PRIM_EDGES = [
    ("Don", "Bob", 2),
    ("Don", "Ron", 3),
    ("Ron", "Jim", 1),
    ("Ron", "Mike", 4),
    ("Mike", "Alice", 2),
    ("Alice", "Jim", 3),
    ("Jim", "Bob", 4),
    ("Bob", "Alice", 7),
]


@pytest.fixture
def friends_edges() -> list:
    """Edge list of the friends graph as (u, v, weight) triples."""
    return list(FRIENDS_EDGES)


@pytest.fixture
def friends_graph() -> Graph:
    """Weighted, undirected graph of eight friends."""
    g = Graph(weighted=True)
    for u, v, w in FRIENDS_EDGES:
        g.add_edge(u, v, w)
    return g


@pytest.fixture
def wikipedia_graph() -> Graph:
    """Unweighted, undirected graph from the Wikipedia DFS article."""
    g = Graph()
    for u, v in WIKIPEDIA_EDGES:
        g.add_edge(u, v)
    return g


@pytest.fixture
def prim_graph() -> Graph:
    """Weighted, undirected six-vertex graph with a unique MST."""
    g = Graph(weighted=True)
    for u, v, w in PRIM_EDGES:
        g.add_edge(u, v, w)
    return g


@pytest.fixture
def debug_mode():
    """Enable debug mode for the duration of a test."""
    original = is_debug_enabled()
    set_debug_enabled(True)
    try:
        yield
    finally:
        set_debug_enabled(original)

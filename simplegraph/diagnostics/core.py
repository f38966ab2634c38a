"""Structural checks for graphs and algorithm results."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from ..matrix import adjacency_matrix, weight_matrix

if TYPE_CHECKING:
    from ..core import Graph


def is_symmetric(graph: Graph) -> bool:
    """
    Check that every stored edge u -> v has a matching v -> u.

    Edge multiplicities must match, and on weighted graphs so must the
    weights.

    Parameters
    ----------
    graph:
        Graph to inspect. Directed graphs are checked the same way.

    Returns
    -------
    bool
        True if the stored adjacency is symmetric.
    """
    A = adjacency_matrix(graph)
    if not np.array_equal(A, A.T):
        return False

    if graph.weighted:
        W = weight_matrix(graph)
        return bool(np.array_equal(W, W.T, equal_nan=True))

    return True


def assert_symmetric(graph: Graph) -> None:
    """
    Assert that an undirected graph stores each edge in both directions.

    Raises
    ------
    ValueError
        If some edge or weight has no mirror image.
    """
    if not is_symmetric(graph):
        raise ValueError(f"{graph!r} is not symmetric")


def is_tree(graph: Graph) -> bool:
    """
    Check whether an undirected graph is a tree.

    A tree is connected and has exactly one edge fewer than vertices. The
    empty graph counts as a tree.

    Parameters
    ----------
    graph:
        Undirected graph to inspect.

    Returns
    -------
    bool
        True if graph is a tree.
    """
    vertices = graph.vertices()
    if not vertices:
        return True
    if len(graph.edges()) != len(vertices) - 1:
        return False

    from ..traversal import breadth_first_search

    reached = breadth_first_search(graph, vertices[0])
    return len(reached) == len(vertices) - 1


def assert_spanning_tree(tree: Graph, graph: Graph) -> None:
    """
    Assert that tree is a spanning tree of graph.

    Every tree edge must be an edge of graph, the tree must be a tree, and
    it must cover every vertex of graph (a one-vertex graph gives an empty
    tree).

    Raises
    ------
    ValueError
        If any of the conditions fails.
    """
    if not is_tree(tree):
        raise ValueError(f"{tree!r} is not a tree")

    for u, v, _ in tree.edges():
        if v not in graph.neighbors(u):
            raise ValueError(f"Tree edge ({u!r}, {v!r}) is not in the graph")

    expected = set(graph.vertices())
    covered = set(tree.vertices())
    if covered != expected and not (len(expected) == 1 and not covered):
        missing = expected - covered
        raise ValueError(f"Tree does not span the graph, missing {sorted(map(repr, missing))}")

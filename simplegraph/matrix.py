"""
Dense matrix views of a graph.

Rows and columns follow node_index_map order, which by default is the
graph's vertex order (first appearance). Row i, column j describes the
stored edges i -> j, so undirected graphs give symmetric matrices.
"""

from typing import TYPE_CHECKING, Hashable, Iterable, Optional

import numpy as np

from .errors import GraphError, UnknownVertexError
from .utils import node_index_map

if TYPE_CHECKING:
    from .core import Graph


def _index(graph: "Graph", vertices: Optional[Iterable[Hashable]]):
    if vertices is None:
        vertices = graph.vertices()
    vertex_to_idx, idx_to_vertex = node_index_map(vertices)
    for v in idx_to_vertex:
        if v not in graph:
            raise UnknownVertexError(v)
    return vertex_to_idx, idx_to_vertex


def adjacency_matrix(
    graph: "Graph", vertices: Optional[Iterable[Hashable]] = None
) -> np.ndarray:
    """
    Count matrix of stored edges.

    A[i, j] is the number of times j appears in i's neighbour list, so
    multi-edges count more than once.

    Args:
        graph: Graph instance.
        vertices: Optional subset/ordering of vertices (defaults to all).

    Returns:
        (n, n) integer numpy array.

    Raises:
        UnknownVertexError: If vertices names a vertex not in the graph.

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B')
        'A,B'
        >>> adjacency_matrix(G).tolist()
        [[0, 1], [1, 0]]
    """
    vertex_to_idx, idx_to_vertex = _index(graph, vertices)
    n = len(idx_to_vertex)
    A = np.zeros((n, n), dtype=int)

    for u in idx_to_vertex:
        i = vertex_to_idx[u]
        for v in graph.neighbors(u):
            j = vertex_to_idx.get(v)
            if j is not None:
                A[i, j] += 1

    return A


def weight_matrix(
    graph: "Graph", vertices: Optional[Iterable[Hashable]] = None
) -> np.ndarray:
    """
    Matrix of edge weights with NaN where no edge is stored.

    Args:
        graph: Weighted Graph instance.
        vertices: Optional subset/ordering of vertices (defaults to all).

    Returns:
        (n, n) float numpy array.

    Raises:
        GraphError: If the graph is unweighted.
        UnknownVertexError: If vertices names a vertex not in the graph.
    """
    if not graph.weighted:
        raise GraphError("weight_matrix requires a weighted graph")

    vertex_to_idx, idx_to_vertex = _index(graph, vertices)
    n = len(idx_to_vertex)
    W = np.full((n, n), np.nan)

    for u in idx_to_vertex:
        i = vertex_to_idx[u]
        for v in graph.neighbors(u):
            j = vertex_to_idx.get(v)
            if j is not None:
                W[i, j] = graph.weight(u, v)

    return W

"""
Shortest paths: Dijkstra's algorithm and path reconstruction.

Dijkstra here mirrors Prim (see simplegraph.mst): the tree grows by one
vertex per round, chosen by a linear scan of every edge leaving the tree.
The key is the distance from the source through the tree rather than the
raw edge weight. Ties follow the same scan order as Prim.

Weights are assumed non-negative; they are not checked.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple

from .core import Graph
from .diagnostics.debug_mode import is_debug_enabled
from .errors import DisconnectedGraphError, UnknownVertexError
from .logging import get_logger
from .utils import reconstruct_path

logger = get_logger(__name__)


@dataclass
class DijkstraResult:
    """
    Output of dijkstra().

    Attributes:
        source: Vertex the distances are measured from.
        distances: Vertex -> length of its shortest path from source.
        spanning_tree: Unweighted, undirected Graph of shortest-path edges.
        parents: Vertex -> predecessor on its shortest path (source excluded).
    """

    source: Hashable
    distances: Dict[Hashable, Any] = field(default_factory=dict)
    spanning_tree: Graph = field(default_factory=Graph)
    parents: Dict[Hashable, Hashable] = field(default_factory=dict)


def dijkstra(graph: Graph, source: Hashable) -> DijkstraResult:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Args:
        graph: Graph with non-negative weights. On an unweighted graph every
            edge costs 1, so distances are hop counts.
        source: Source vertex.

    Returns:
        DijkstraResult with distances, the shortest-path tree and the parent
        map.

    Raises:
        UnknownVertexError: If source is not in the graph.
        DisconnectedGraphError: If some vertex cannot be reached from source.

    Complexity: O(V^2 * deg) (frontier scan, no priority queue).

    Example:
        >>> G = Graph(directed=True, weighted=True)
        >>> G.add_edge('A', 'B', 1)
        'A,B'
        >>> G.add_edge('B', 'C', 2)
        'B,C'
        >>> G.add_edge('A', 'C', 5)
        'A,C'
        >>> dijkstra(G, 'A').distances
        {'A': 0, 'B': 1, 'C': 3}
    """
    if source not in graph:
        raise UnknownVertexError(source)

    result = DijkstraResult(source=source, distances={source: 0})
    distances = result.distances

    tree_vertices: Dict[Hashable, None] = {source: None}
    non_tree_vertices = set(graph.vertices())
    non_tree_vertices.discard(source)

    while non_tree_vertices:
        min_dist = None
        new_edge: Optional[Tuple[Hashable, Hashable]] = None

        for u in tree_vertices:
            for v in graph.neighbors(u):
                if v in tree_vertices:
                    continue

                distance = distances[u] + graph.cost(u, v)
                if min_dist is None or distance < min_dist:
                    new_edge = (u, v)
                    min_dist = distance

        if new_edge is None:
            unreached = [v for v in graph.vertices() if v in non_tree_vertices]
            logger.warning(
                "dijkstra: %d vertices unreachable from %r", len(unreached), source
            )
            raise DisconnectedGraphError(source, unreached)

        u, v = new_edge
        logger.debug("dijkstra: %r reached via %r at distance %r", v, u, min_dist)
        distances[v] = min_dist
        result.parents[v] = u
        result.spanning_tree.add_edge(u, v)
        tree_vertices[v] = None
        non_tree_vertices.discard(v)

    if is_debug_enabled():
        from .diagnostics.core import assert_spanning_tree

        assert_spanning_tree(result.spanning_tree, graph)

    return result


def shortest_path(graph: Graph, source: Hashable, destination: Hashable) -> List[Hashable]:
    """
    Return a shortest path between two vertices.

    Runs dijkstra() from source and walks the shortest-path tree back from
    destination. A path from a vertex to itself needs no search and is
    returned even when the rest of the graph is unreachable.

    Args:
        graph: Graph to search.
        source: First vertex of the path.
        destination: Last vertex of the path.

    Returns:
        List of vertices from source to destination inclusive. A vertex's
        path to itself is [vertex].

    Raises:
        UnknownVertexError: If source or destination is not in the graph.
        DisconnectedGraphError: If source and destination differ and the
            graph is not connected from source.

    Example:
        >>> G = Graph(weighted=True)
        >>> G.add_edge('A', 'B', 1)
        'A,B'
        >>> G.add_edge('B', 'C', 1)
        'B,C'
        >>> shortest_path(G, 'A', 'C')
        ['A', 'B', 'C']
    """
    if source not in graph:
        raise UnknownVertexError(source)
    if destination not in graph:
        raise UnknownVertexError(destination)

    if source == destination:
        return [source]

    result = dijkstra(graph, source)
    path = reconstruct_path(result.parents, source, destination)
    if path is None:
        # Only possible if the tree is malformed: dijkstra spans every vertex
        raise DisconnectedGraphError(source, [destination])
    return path

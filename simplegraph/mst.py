"""
Minimum spanning tree: Prim's algorithm.

The tree is grown one vertex at a time by scanning the whole frontier for
the cheapest edge leaving the tree. There is no priority queue, so each step
costs O(|tree| * max degree) and the whole run O(V^2 * deg).

Ties are broken by scan order: tree vertices in the order they joined the
tree, each vertex's neighbours in insertion order, earliest candidate wins.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2 (Prim).
"""

from typing import Dict, Hashable, Optional, Tuple

from .core import Graph
from .diagnostics.debug_mode import is_debug_enabled
from .errors import DisconnectedGraphError, UnknownVertexError
from .logging import get_logger

logger = get_logger(__name__)


def prim(graph: Graph, start: Hashable) -> Graph:
    """
    Prim's algorithm for a minimum spanning tree rooted at start.

    Edge costs are the graph weights, or 1 for every edge of an unweighted
    graph.

    Args:
        graph: Graph to span (treated edge by edge as stored, so a directed
            graph is spanned along its out-edges).
        start: Vertex to grow the tree from.

    Returns:
        A new unweighted, undirected Graph holding the tree edges in the order
        they were selected. A graph with a single vertex gives an empty tree.

    Raises:
        UnknownVertexError: If start is not in the graph.
        DisconnectedGraphError: If some vertex cannot be reached from start.

    Example:
        >>> G = Graph(weighted=True)
        >>> G.add_edge('A', 'B', 1)
        'A,B'
        >>> G.add_edge('B', 'C', 2)
        'B,C'
        >>> G.add_edge('A', 'C', 5)
        'A,C'
        >>> prim(G, 'A').edges()
        [('A', 'B', None), ('B', 'C', None)]
    """
    if start not in graph:
        raise UnknownVertexError(start)

    spanning_tree = Graph(directed=False, weighted=False)

    # dict keeps join order for the scan
    tree_vertices: Dict[Hashable, None] = {start: None}
    non_tree_vertices = set(graph.vertices())
    non_tree_vertices.discard(start)

    while non_tree_vertices:
        min_weight = None
        new_edge: Optional[Tuple[Hashable, Hashable]] = None

        for u in tree_vertices:
            for v in graph.neighbors(u):
                if v in tree_vertices:
                    continue

                w = graph.cost(u, v)
                if min_weight is None or w < min_weight:
                    new_edge = (u, v)
                    min_weight = w

        if new_edge is None:
            unreached = [v for v in graph.vertices() if v in non_tree_vertices]
            logger.warning(
                "prim: %d vertices unreachable from %r", len(unreached), start
            )
            raise DisconnectedGraphError(start, unreached)

        u, v = new_edge
        logger.debug("prim: adding edge %r -> %r (weight %r)", u, v, min_weight)
        spanning_tree.add_edge(u, v)
        tree_vertices[v] = None
        non_tree_vertices.discard(v)

    if is_debug_enabled():
        from .diagnostics.core import assert_spanning_tree

        assert_spanning_tree(spanning_tree, graph)

    return spanning_tree

"""
Core graph data structure.

Provides the Graph class, an adjacency-list representation that is optionally
directed and optionally weighted. Neighbour lists keep insertion order and
duplicates: the order edges were added is the order traversals and the
spanning-tree algorithms visit them in.
"""

from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple

from .diagnostics.debug_mode import is_debug_enabled
from .errors import UnknownVertexError

if TYPE_CHECKING:
    from .callbacks import TraversalCallbacks
    from .shortest import DijkstraResult


class Graph:
    """
    Graph with adjacency-list representation.

    Attributes:
        directed: If True, add_edge(u, v) stores only u -> v.
        weighted: If True, add_edge records a weight for each stored pair.

    Complexity:
        - add_edge: O(1) amortized
        - neighbors: O(deg(v)) (the list is copied)
        - weight: O(1)
        - vertices: O(V)
    """

    def __init__(self, directed: bool = False, weighted: bool = False):
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
            weighted: If True, edges carry weights.
        """
        self._directed = bool(directed)
        self._weighted = bool(weighted)
        self._adjacency: Dict[Hashable, List[Hashable]] = {}
        self._weights: Dict[Tuple[Hashable, Hashable], Any] = {}
        # One entry per add_edge call, for edges()
        self._edge_log: List[Tuple[Hashable, Hashable]] = []

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    def __contains__(self, vertex: Hashable) -> bool:
        return self.has_vertex(vertex)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return (
            f"Graph(directed={self._directed}, weighted={self._weighted}, "
            f"vertices={len(self._adjacency)}, edges={len(self._edge_log)})"
        )

    def add_edge(self, u: Hashable, v: Hashable, weight: Any = 0) -> str:
        """
        Add an edge from u to v, creating both vertices if needed.

        For undirected graphs, v -> u is stored as well with the same weight.
        Adding the same pair twice stores it twice; the weight lookup keeps
        the last value.

        Args:
            u: Source vertex.
            v: Target vertex.
            weight: Edge weight, recorded only on weighted graphs.

        Returns:
            The edge identifier "u,v".
        """
        self._store(u, v, weight)
        if not self._directed:
            self._store(v, u, weight)

        self._edge_log.append((u, v))

        if is_debug_enabled() and not self._directed:
            from .diagnostics.core import assert_symmetric

            assert_symmetric(self)

        return f"{u},{v}"

    def _store(self, u: Hashable, v: Hashable, weight: Any) -> None:
        self._adjacency.setdefault(u, []).append(v)
        self._adjacency.setdefault(v, [])
        if self._weighted:
            self._weights[(u, v)] = weight

    def has_vertex(self, vertex: Hashable) -> bool:
        """Return True if vertex is an endpoint of some edge."""
        return vertex in self._adjacency

    def vertices(self) -> List[Hashable]:
        """
        Return all vertices in the order they first appeared.

        Returns:
            List of vertex labels.
        """
        return list(self._adjacency)

    def neighbors(self, vertex: Hashable) -> List[Hashable]:
        """
        Return the neighbours of a vertex in insertion order.

        Multi-edges show up as repeated entries.

        Args:
            vertex: Vertex to get neighbours for.

        Returns:
            List of neighbour labels.

        Raises:
            UnknownVertexError: If vertex is not in the graph.
        """
        try:
            return list(self._adjacency[vertex])
        except KeyError:
            raise UnknownVertexError(vertex) from None

    def weight(self, u: Hashable, v: Hashable) -> Optional[Any]:
        """
        Return the weight of edge u -> v.

        Returns:
            The last weight recorded for the pair, or None when the graph is
            unweighted or no such edge was added. A weight of 0 is a real
            weight, not an absence.
        """
        return self._weights.get((u, v))

    def cost(self, u: Hashable, v: Hashable) -> Any:
        """Cost of edge u -> v as used by prim and dijkstra (1 when unweighted)."""
        if not self._weighted:
            return 1
        return self._weights[(u, v)]

    def edges(self) -> List[Tuple[Hashable, Hashable, Optional[Any]]]:
        """
        Return the added edges as (u, v, weight) triples.

        Each add_edge call yields one triple, in call order; the mirrored
        pair of an undirected edge is not listed separately.
        """
        return [(u, v, self._weights.get((u, v))) for u, v in self._edge_log]

    def breadth_first_search(
        self,
        start: Hashable,
        callbacks: Optional["TraversalCallbacks"] = None,
        **hooks,
    ) -> Dict[Hashable, Hashable]:
        """Run BFS from start; see simplegraph.traversal.breadth_first_search."""
        from .traversal import breadth_first_search

        return breadth_first_search(self, start, callbacks, **hooks)

    def depth_first_search(
        self,
        start: Hashable,
        callbacks: Optional["TraversalCallbacks"] = None,
        **hooks,
    ) -> None:
        """Run DFS from start; see simplegraph.traversal.depth_first_search."""
        from .traversal import depth_first_search

        depth_first_search(self, start, callbacks, **hooks)

    def prim(self, start: Hashable) -> "Graph":
        """Grow a minimum spanning tree from start; see simplegraph.mst.prim."""
        from .mst import prim

        return prim(self, start)

    def dijkstra(self, source: Hashable) -> "DijkstraResult":
        """Single-source shortest paths; see simplegraph.shortest.dijkstra."""
        from .shortest import dijkstra

        return dijkstra(self, source)

    def shortest_path(self, source: Hashable, destination: Hashable) -> List[Hashable]:
        """Shortest path as a vertex list; see simplegraph.shortest.shortest_path."""
        from .shortest import shortest_path

        return shortest_path(self, source, destination)

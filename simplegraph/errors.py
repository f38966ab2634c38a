"""
Exception hierarchy for simplegraph.

All errors raised on purpose by the library derive from GraphError so callers
can catch them in one place.
"""

from typing import Hashable, Iterable, List


class GraphError(Exception):
    """Base class for graph errors."""


class UnknownVertexError(GraphError, KeyError):
    """
    Raised when a vertex label was never added to the graph.

    Subclasses KeyError so that code written against plain adjacency dicts
    keeps working.

    Attributes:
        vertex: The offending vertex label.
    """

    def __init__(self, vertex: Hashable):
        self.vertex = vertex
        super().__init__(vertex)

    def __str__(self) -> str:
        return f"Unknown vertex {self.vertex!r}"


class DisconnectedGraphError(GraphError):
    """
    Raised when a spanning-tree algorithm runs out of crossing edges.

    Prim and Dijkstra grow a tree until it covers every vertex; if the graph
    is not connected (or, for directed graphs, not every vertex is reachable
    from the start) the frontier empties first.

    Attributes:
        start: Vertex the tree was grown from.
        unreached: Vertices left outside the tree.
    """

    def __init__(self, start: Hashable, unreached: Iterable[Hashable]):
        self.start = start
        self.unreached: List[Hashable] = list(unreached)
        super().__init__(
            f"No edge connects the tree grown from {start!r} to "
            f"{len(self.unreached)} remaining vertices: {self.unreached!r}"
        )

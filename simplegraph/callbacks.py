"""
Hook points for graph traversals.

Both BFS and DFS report progress through three optional callables bundled in
a TraversalCallbacks record. Unset hooks are no-ops.
"""

from dataclasses import dataclass, replace
from typing import Callable, Hashable, Optional

VertexHook = Callable[[Hashable], None]
EdgeHook = Callable[[Hashable, Hashable], None]


def _ignore(*args) -> None:
    return None


@dataclass(frozen=True)
class TraversalCallbacks:
    """
    Callbacks fired during a traversal.

    Attributes:
        vertex_discovered: Called with v when v is first expanded.
        vertex_processed: Called with v once all its edges were examined.
        edge_discovered: Called with (u, v) for edges reported by the
            traversal. BFS reports edges to already-queued vertices, DFS
            reports every edge it walks.

    Example:
        >>> seen = []
        >>> callbacks = TraversalCallbacks(vertex_discovered=seen.append)
    """

    vertex_discovered: Optional[VertexHook] = None
    vertex_processed: Optional[VertexHook] = None
    edge_discovered: Optional[EdgeHook] = None

    def on_vertex_discovered(self, vertex: Hashable) -> None:
        (self.vertex_discovered or _ignore)(vertex)

    def on_vertex_processed(self, vertex: Hashable) -> None:
        (self.vertex_processed or _ignore)(vertex)

    def on_edge_discovered(self, u: Hashable, v: Hashable) -> None:
        (self.edge_discovered or _ignore)(u, v)

    @classmethod
    def resolve(
        cls, callbacks: Optional["TraversalCallbacks"] = None, **hooks
    ) -> "TraversalCallbacks":
        """
        Build the callbacks for a traversal call.

        Keyword hooks override the matching fields of callbacks. Unknown hook
        names raise TypeError.
        """
        if callbacks is None:
            return cls(**hooks)
        if hooks:
            return replace(callbacks, **hooks)
        return callbacks

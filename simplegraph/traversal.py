"""
Graph traversal algorithms: BFS and DFS.

Both traversals are single-source and report progress through
TraversalCallbacks. Neighbours are visited in insertion order, so the order
edges were added fully determines the traversal.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
    - Skiena. "The Algorithm Design Manual", 2nd ed. Chapter 5.
"""

from collections import deque
from enum import Enum
from typing import Dict, Hashable, Iterator, List, Optional, Tuple

from .callbacks import TraversalCallbacks
from .core import Graph
from .errors import UnknownVertexError
from .logging import get_logger

logger = get_logger(__name__)

# Marks an exhausted neighbour iterator; None is a valid vertex label
_EXHAUSTED = object()


class Color(Enum):
    """BFS vertex colours. White vertices are simply absent from the table."""

    GREY = "grey"
    BLACK = "black"


class State(Enum):
    """DFS vertex states."""

    UNKNOWN = "unknown"
    DISCOVERED = "discovered"
    PROCESSED = "processed"


def breadth_first_search(
    graph: Graph,
    start: Hashable,
    callbacks: Optional[TraversalCallbacks] = None,
    **hooks,
) -> Dict[Hashable, Hashable]:
    """
    Breadth-first search from a start vertex.

    A vertex turns grey when it is queued and black once expanded. Edges
    leading to a grey vertex fire edge_discovered; edges leading to a black
    vertex are skipped silently.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from.
        callbacks: Optional TraversalCallbacks.
        **hooks: vertex_discovered / vertex_processed / edge_discovered
            shorthands, overriding callbacks.

    Returns:
        Parent map: every reached vertex other than start, mapped to the
        vertex it was first discovered from.

    Raises:
        UnknownVertexError: If start is not in the graph.

    Complexity: O(V + E).

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B')
        'A,B'
        >>> G.add_edge('B', 'C')
        'B,C'
        >>> breadth_first_search(G, 'A')
        {'B': 'A', 'C': 'B'}
    """
    if start not in graph:
        raise UnknownVertexError(start)

    cb = TraversalCallbacks.resolve(callbacks, **hooks)
    logger.debug("BFS from %r", start)

    parents: Dict[Hashable, Hashable] = {}
    colors: Dict[Hashable, Color] = {start: Color.GREY}
    queue = deque([start])

    while queue:
        vertex = queue.popleft()
        if colors.get(vertex) is Color.BLACK:
            continue

        cb.on_vertex_discovered(vertex)

        for n in graph.neighbors(vertex):
            color = colors.get(n)
            if color is Color.BLACK:
                continue
            if color is Color.GREY:
                cb.on_edge_discovered(vertex, n)
                continue

            queue.append(n)
            colors[n] = Color.GREY
            parents[n] = vertex

        cb.on_vertex_processed(vertex)
        colors[vertex] = Color.BLACK

    return parents


def depth_first_search(
    graph: Graph,
    start: Hashable,
    callbacks: Optional[TraversalCallbacks] = None,
    **hooks,
) -> None:
    """
    Depth-first search from a start vertex (iterative, explicit stack).

    Events fire in the same order as the textbook recursive version: a
    vertex is processed only after every neighbour reached through it.
    Only vertices reachable from start are visited. Every edge walked fires
    edge_discovered, whatever the state of its target, so tree, back,
    forward and cross edges are all reported. Results are delivered through
    the callbacks only.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from.
        callbacks: Optional TraversalCallbacks.
        **hooks: Keyword shorthands, as for breadth_first_search.

    Raises:
        UnknownVertexError: If start is not in the graph.

    Complexity: O(V + E). The stack holds the current DFS tree path, so
    long paths are not limited by the interpreter recursion limit.

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B')
        'A,B'
        >>> pre = []
        >>> depth_first_search(G, 'A', vertex_discovered=pre.append)
        >>> pre
        ['A', 'B']
    """
    if start not in graph:
        raise UnknownVertexError(start)

    cb = TraversalCallbacks.resolve(callbacks, **hooks)
    logger.debug("DFS from %r", start)

    states: Dict[Hashable, State] = {v: State.UNKNOWN for v in graph.vertices()}

    states[start] = State.DISCOVERED
    cb.on_vertex_discovered(start)
    # One (vertex, remaining neighbours) frame per vertex on the DFS tree path
    stack: List[Tuple[Hashable, Iterator[Hashable]]] = [
        (start, iter(graph.neighbors(start)))
    ]

    while stack:
        vertex, pending = stack[-1]
        n = next(pending, _EXHAUSTED)

        if n is _EXHAUSTED:
            stack.pop()
            cb.on_vertex_processed(vertex)
            states[vertex] = State.PROCESSED
            continue

        cb.on_edge_discovered(vertex, n)
        if states[n] is State.UNKNOWN:
            states[n] = State.DISCOVERED
            cb.on_vertex_discovered(n)
            stack.append((n, iter(graph.neighbors(n))))

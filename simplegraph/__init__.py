"""
simplegraph - a small graph data structure and algorithm library.

Provides:
- Graph: adjacency-list graph, optionally directed and/or weighted
- Traversals with callbacks (breadth_first_search, depth_first_search)
- Prim's minimum spanning tree (prim)
- Dijkstra's shortest paths (dijkstra, shortest_path)
- Dense numpy views (adjacency_matrix, weight_matrix)

Example usage:
    from simplegraph import Graph

    g = Graph(weighted=True)
    g.add_edge('A', 'B', 1)
    g.add_edge('B', 'C', 2)
    g.shortest_path('A', 'C')  # ['A', 'B', 'C']
"""

__version__ = "0.1.0"

from .callbacks import TraversalCallbacks
from .core import Graph
from .diagnostics import (
    assert_spanning_tree,
    assert_symmetric,
    debug_context,
    is_debug_enabled,
    is_symmetric,
    is_tree,
    set_debug_enabled,
)
from .errors import DisconnectedGraphError, GraphError, UnknownVertexError
from .logging import configure_logging, get_logger, set_log_level
from .matrix import adjacency_matrix, weight_matrix
from .mst import prim
from .shortest import DijkstraResult, dijkstra, shortest_path
from .traversal import breadth_first_search, depth_first_search
from .utils import node_index_map, reconstruct_path

__all__ = [
    "Graph",
    "TraversalCallbacks",
    "breadth_first_search",
    "depth_first_search",
    "prim",
    "dijkstra",
    "shortest_path",
    "DijkstraResult",
    "adjacency_matrix",
    "weight_matrix",
    "node_index_map",
    "reconstruct_path",
    "GraphError",
    "UnknownVertexError",
    "DisconnectedGraphError",
    "get_logger",
    "set_log_level",
    "configure_logging",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "is_symmetric",
    "assert_symmetric",
    "is_tree",
    "assert_spanning_tree",
]

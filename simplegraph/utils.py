"""
Utility functions for graph algorithms.

Provides helpers for vertex indexing and path reconstruction.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Tuple


def node_index_map(vertices: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Map vertices to indices 0..n-1 in first-seen order.

    Duplicates keep the index of their first occurrence.

    Args:
        vertices: Iterable of hashable vertex labels.

    Returns:
        Tuple of (vertex_to_index dict, index_to_vertex list).

    Example:
        >>> vertex_to_idx, idx_to_vertex = node_index_map(['c', 'a', 'c', 'b'])
        >>> vertex_to_idx
        {'c': 0, 'a': 1, 'b': 2}
        >>> idx_to_vertex
        ['c', 'a', 'b']
    """
    index_to_vertex = list(dict.fromkeys(vertices))
    vertex_to_index = {v: i for i, v in enumerate(index_to_vertex)}
    return vertex_to_index, index_to_vertex


def reconstruct_path(
    parents: Dict[Hashable, Hashable], source: Hashable, target: Hashable
) -> Optional[List[Hashable]]:
    """
    Reconstruct the path from source to target using a parent map.

    The parent map is the kind returned by breadth_first_search or held in
    DijkstraResult.parents: every reached vertex except the source maps to
    its predecessor.

    Args:
        parents: Dictionary mapping vertex -> parent vertex.
        source: Root of the parent map.
        target: Vertex to reconstruct the path to.

    Returns:
        List of vertices from source to target inclusive, or None if target
        was not reached (or the chain does not lead back to source).

    Example:
        >>> parents = {'B': 'A', 'C': 'B'}
        >>> reconstruct_path(parents, 'A', 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path(parents, 'A', 'D') is None
        True
    """
    path = [target]
    seen = {target}
    current = target

    while current != source:
        if current not in parents:
            return None
        current = parents[current]
        if current in seen:
            # Cycle in the parent map
            return None
        seen.add(current)
        path.append(current)

    path.reverse()
    return path

"""Debug-mode switch for simplegraph's structural checks.

Debug mode gates the checks in simplegraph.diagnostics.core:

    - Graph.add_edge on an undirected graph asserts that the adjacency and
      weight matrices are still symmetric after the mirrored edge is stored.
    - prim and dijkstra assert that the tree they return is a tree, spans
      every vertex of the input and uses only edges of the input.

Each check rebuilds a dense V x V matrix, so debug mode is meant for tests
and development. The flag starts from SIMPLEGRAPH_DEBUG (1/true/yes/on).
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

_DEBUG_ENV_VAR = "SIMPLEGRAPH_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env(os.getenv(_DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """Return True when add_edge, prim and dijkstra run their graph checks."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> bool:
    """
    Turn the graph checks on or off for the whole process.

    Parameters
    ----------
    enabled:
        Whether symmetry and spanning-tree checks should run.

    Returns
    -------
    bool
        The previous setting, so callers can restore it.
    """
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    return previous


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block with the graph checks switched on (or off).

    The previous setting is restored on exit, also when the block raises.

    Example
    -------
    >>> with debug_context(True):
    ...     tree = graph.prim("A")  # raises ValueError if tree does not span graph
    """
    previous = set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)

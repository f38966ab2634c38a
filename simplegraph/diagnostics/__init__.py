"""Diagnostics and debugging utilities for simplegraph."""

from .core import (
    assert_spanning_tree,
    assert_symmetric,
    is_symmetric,
    is_tree,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_symmetric",
    "assert_symmetric",
    "is_tree",
    "assert_spanning_tree",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]

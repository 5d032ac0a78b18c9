"""Transformation engines: clone, merge, traverse and key shaping."""

from objkit.core.transform.clone import clone
from objkit.core.transform.guard import DescentGuard
from objkit.core.transform.merge import copy_value, deep_merge, merge_two
from objkit.core.transform.models import (
    AsyncVisitor,
    Entry,
    Rewrite,
    TraversalNode,
    Visitor,
)
from objkit.core.transform.shaping import (
    clear_null,
    clear_nullish,
    clear_undefined,
    map_values,
    omit,
    pick,
)
from objkit.core.transform.traverse import traverse, traverse_async

__all__ = [
    # Models
    "Entry",
    "TraversalNode",
    "Rewrite",
    "Visitor",
    "AsyncVisitor",
    "DescentGuard",
    # Engines
    "clone",
    "copy_value",
    "merge_two",
    "deep_merge",
    "traverse",
    "traverse_async",
    # Shaping
    "pick",
    "omit",
    "map_values",
    "clear_undefined",
    "clear_null",
    "clear_nullish",
]

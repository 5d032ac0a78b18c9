"""Core functionalities: stateless value classification and tree transforms.

Architecture Note:
    core/ contains pure, stateless functions. Each engine call owns its
    working tree for the duration of the call and shares no mutable state
    with other calls. Configuration lives in config/.
"""

from objkit.core.classify import UNDEFINED, ValueKind, classify
from objkit.core.errors import CyclicStructureError, ObjkitError, RecursionLimitError
from objkit.core.readonly import (
    FrozenDict,
    FrozenList,
    ReadonlyError,
    is_readonly,
    make_readonly,
    thaw,
)
from objkit.core.transform import (
    Entry,
    TraversalNode,
    clear_null,
    clear_nullish,
    clear_undefined,
    clone,
    copy_value,
    deep_merge,
    map_values,
    merge_two,
    omit,
    pick,
    traverse,
    traverse_async,
)
from objkit.core.types import Copy, Path, Readonly

__all__ = [
    # Types
    "Copy",
    "Readonly",
    "Path",
    # Classification
    "ValueKind",
    "UNDEFINED",
    "classify",
    # Errors
    "ObjkitError",
    "CyclicStructureError",
    "RecursionLimitError",
    "ReadonlyError",
    # Engines
    "clone",
    "copy_value",
    "merge_two",
    "deep_merge",
    "make_readonly",
    "is_readonly",
    "thaw",
    "traverse",
    "traverse_async",
    "Entry",
    "TraversalNode",
    "FrozenDict",
    "FrozenList",
    # Shaping
    "pick",
    "omit",
    "map_values",
    "clear_undefined",
    "clear_null",
    "clear_nullish",
]

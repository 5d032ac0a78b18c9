"""objkit: deep clone, merge, freeze and rewrite for dict/list trees.

Usage:
    from objkit import clone, deep_merge, make_readonly, traverse

    defaults = {"theme": "light", "features": {"dark_mode": False}}
    config = deep_merge(defaults, {"features": {"dark_mode": True}})

    frozen = make_readonly(config)
    frozen["theme"] = "dark"  # ReadonlyError

    def rename(entry, node):
        if entry.key == "dark_mode":
            return "darkMode", entry.value

    traverse(config, rename)
    # {"theme": "light", "features": {"darkMode": True}}
"""

import logging

__version__ = "0.1.0"

# Configuration
from objkit.config import TransformSettings, get_settings

# Core primitives
from objkit.core import (
    UNDEFINED,
    Copy,
    CyclicStructureError,
    Entry,
    FrozenDict,
    FrozenList,
    ObjkitError,
    Readonly,
    ReadonlyError,
    RecursionLimitError,
    TraversalNode,
    ValueKind,
    classify,
    clear_null,
    clear_nullish,
    clear_undefined,
    clone,
    copy_value,
    deep_merge,
    is_readonly,
    make_readonly,
    map_values,
    merge_two,
    omit,
    pick,
    thaw,
    traverse,
    traverse_async,
)

# Guards
from objkit.core.classify import (
    is_array,
    is_boolean,
    is_date,
    is_defined,
    is_error,
    is_function,
    is_map,
    is_null,
    is_number,
    is_plain_object,
    is_regexp,
    is_set,
    is_string,
    is_undefined,
    is_url,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Config
    "TransformSettings",
    "get_settings",
    # Types
    "Copy",
    "Readonly",
    "ValueKind",
    "UNDEFINED",
    # Errors
    "ObjkitError",
    "CyclicStructureError",
    "RecursionLimitError",
    "ReadonlyError",
    # Engines
    "classify",
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
    # Guards
    "is_plain_object",
    "is_array",
    "is_function",
    "is_defined",
    "is_undefined",
    "is_null",
    "is_boolean",
    "is_number",
    "is_string",
    "is_date",
    "is_regexp",
    "is_map",
    "is_set",
    "is_error",
    "is_url",
]

"""Deep merge of plain dicts.

Rules for each key of a later source:
- `None` / UNDEFINED: replaces the earlier value.
- list: replaces the earlier value with a shallow copy (never concatenated).
- plain dict: merged recursively into an earlier plain dict, else copied.
- anything else: replaced by `copy_value` of the source value.

Usage:
    defaults = {"theme": "light", "features": {"dark_mode": False}}
    prefs = {"features": {"dark_mode": True, "notifications": True}}
    deep_merge(defaults, prefs)
    # {"theme": "light", "features": {"dark_mode": True, "notifications": True}}
"""

from __future__ import annotations

import copy
import re
from collections.abc import Mapping
from typing import Any

from objkit.config import TransformSettings
from objkit.core.classify import ValueKind, classify, is_plain_object
from objkit.core.transform.guard import DescentGuard
from objkit.core.types import Copy, Path


def copy_value(value: Any, *, settings: TransformSettings | None = None) -> Any:
    """Copy a single value the way deep_merge stores it.

    Unlike `clone`, special values get new instances:
    - date/datetime/time: rebuilt via `replace()` (same instant).
    - compiled pattern: recompiled from pattern and flags. `re` caches
      compiled patterns, so the result may be the very same object.
    - dict subclasses and sets: shallow copy keeping the concrete type.

    Lists are shallow-copied, plain dicts copied key by key. Functions,
    primitives and opaque objects are returned as-is.

    Args:
        value: Value to copy.
        settings: Optional settings override.

    Returns:
        The copied value.
    """
    return _copy_value(value, DescentGuard(settings), ())


def _copy_value(value: Any, guard: DescentGuard, path: Path) -> Any:
    kind = classify(value)
    if kind.is_special:
        return _copy_special(value, kind)
    match kind:
        case ValueKind.ARRAY:
            return list(value)
        case ValueKind.PLAIN_OBJECT:
            with guard.descend(value, path):
                return {
                    key: _copy_value(item, guard, (*path, key))
                    for key, item in value.items()
                    if not guard.is_reserved(key, path)
                }
        case _:
            return value


def _copy_special(value: Any, kind: ValueKind) -> Any:
    match kind:
        case ValueKind.DATE:
            return value.replace()
        case ValueKind.REGEXP:
            return re.compile(value.pattern, value.flags)
        case _:
            return copy.copy(value)


def merge_two(
    target: Mapping[Any, Any],
    source: Mapping[Any, Any],
    *,
    settings: TransformSettings | None = None,
) -> Copy[dict[Any, Any]]:
    """Merge `source` onto `target`, returning a new dict.

    Neither argument is mutated. A `target` that is not a plain dict is
    treated as empty; a `source` that is not a plain dict is ignored.

    Args:
        target: Earlier (lower priority) mapping.
        source: Later (higher priority) mapping.
        settings: Optional settings override.

    Returns:
        Fresh merged dict.
    """
    return _merge_two(target, source, DescentGuard(settings), ())


def _merge_two(target: Any, source: Any, guard: DescentGuard, path: Path) -> dict[Any, Any]:
    result: dict[Any, Any] = {}

    if is_plain_object(target):
        with guard.descend(target, path):
            for key, item in target.items():
                if guard.is_reserved(key, path):
                    continue
                result[key] = _copy_value(item, guard, (*path, key))

    if not is_plain_object(source):
        return result

    with guard.descend(source, path):
        for key, item in source.items():
            if guard.is_reserved(key, path):
                continue
            child = (*path, key)

            match classify(item):
                case ValueKind.NULL | ValueKind.UNDEFINED:
                    result[key] = item
                case ValueKind.ARRAY:
                    result[key] = list(item)
                case ValueKind.PLAIN_OBJECT:
                    if is_plain_object(result.get(key)):
                        result[key] = _merge_two(result[key], item, guard, child)
                    else:
                        result[key] = _copy_value(item, guard, child)
                case _:
                    result[key] = _copy_value(item, guard, child)

    return result


def deep_merge(
    *sources: Mapping[Any, Any], settings: TransformSettings | None = None
) -> Copy[dict[Any, Any]]:
    """Deeply merge sources left to right into a new dict.

    Later sources win on conflicting keys. Only plain dicts are merged
    recursively; lists and every other kind replace the earlier value.
    Sources that are not plain dicts are skipped. No source is mutated.

    Args:
        *sources: Mappings to merge, lowest priority first.
        settings: Optional settings override.

    Returns:
        Fresh merged dict (empty if no sources).

    Raises:
        CyclicStructureError: If a source contains itself (cycle detection on).
        RecursionLimitError: If nesting exceeds `max_depth`.
    """
    guard = DescentGuard(settings)
    merged: dict[Any, Any] = {}
    for source in sources:
        if not is_plain_object(source):
            continue
        merged = _merge_two(merged, source, guard, ())
    return merged

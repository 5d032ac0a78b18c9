"""Deep clone of dict/list trees.

Only plain dicts and lists are copied. Everything else (functions, class
instances, dates, patterns, maps, sets and primitives) is carried over by
reference, so `clone` is cheap on trees holding large opaque objects.
"""

from __future__ import annotations

from typing import Any, TypeVar

from objkit.config import TransformSettings
from objkit.core.classify import ValueKind, classify
from objkit.core.transform.guard import DescentGuard
from objkit.core.types import Copy, Path

T = TypeVar("T")


def clone(value: T, *, settings: TransformSettings | None = None) -> Copy[T]:
    """Create a deep copy of a dict/list tree.

    Reserved keys are dropped. Read-only views come back as ordinary,
    mutable dicts and lists.

    Args:
        value: Any value. Non-container values are returned unchanged.
        settings: Optional settings override.

    Returns:
        A tree sharing no dict or list with `value`.

    Raises:
        CyclicStructureError: If `value` contains itself (cycle detection on).
        RecursionLimitError: If nesting exceeds `max_depth`.

    Example:
        >>> original = {"user": {"name": "John"}}
        >>> copy = clone(original)
        >>> copy["user"]["name"] = "Jane"
        >>> original["user"]["name"]
        'John'
    """
    return _clone(value, DescentGuard(settings), ())  # type: ignore[no-any-return]


def _clone(value: Any, guard: DescentGuard, path: Path) -> Any:
    kind = classify(value)
    if not kind.is_container:
        return value
    with guard.descend(value, path):
        if kind is ValueKind.ARRAY:
            # Append into a fresh list, never into the source
            items: list[Any] = []
            for index, item in enumerate(value):
                items.append(_clone(item, guard, (*path, index)))
            return items
        result: dict[Any, Any] = {}
        for key, item in value.items():
            if guard.is_reserved(key, path):
                continue
            result[key] = _clone(item, guard, (*path, key))
        return result

"""Deep read-only copies.

Usage:
    config = make_readonly({"db": {"host": "localhost", "ports": [5432]}})
    config["db"]["host"]           # "localhost"
    config["db"]["host"] = "x"     # ReadonlyError
    config["db"]["ports"].append(1)  # ReadonlyError

    editable = thaw(config)        # plain dicts and lists again
"""

from __future__ import annotations

from typing import Any, TypeVar

from objkit.config import TransformSettings
from objkit.core.classify import ValueKind, classify
from objkit.core.frozen import FrozenDict, FrozenList
from objkit.core.transform import DescentGuard, clone
from objkit.core.types import Path, Readonly

T = TypeVar("T")


def make_readonly(value: T, *, settings: TransformSettings | None = None) -> Readonly[T]:
    """Deep-clone `value`, then freeze every container in the clone.

    Dicts and dict subclasses become FrozenDict, lists become FrozenList,
    sets become frozenset and plain tuples are rebuilt with frozen items.
    Functions stay callable. Dates, patterns and class instances are left
    as they are. The input stays mutable and independent of the result.

    Args:
        value: Any value.
        settings: Optional settings override.

    Returns:
        Read-only copy. Any write at any depth raises ReadonlyError.
    """
    guard = DescentGuard(settings)
    return _freeze(clone(value, settings=settings), guard, ())  # type: ignore[no-any-return]


def is_readonly(value: Any) -> bool:
    """Check if a value is a read-only view produced by `make_readonly`."""
    return isinstance(value, FrozenDict | FrozenList)


def thaw(value: Any, *, settings: TransformSettings | None = None) -> Any:
    """Return a mutable deep copy of a (possibly read-only) tree.

    FrozenDict becomes dict and FrozenList becomes list at every depth.
    frozensets are left as they are.
    """
    return clone(value, settings=settings)


def _freeze(value: Any, guard: DescentGuard, path: Path) -> Any:
    if is_readonly(value):
        return value

    match classify(value):
        case ValueKind.PLAIN_OBJECT | ValueKind.MAP:
            with guard.descend(value, path):
                return FrozenDict(
                    (key, _freeze(item, guard, (*path, key))) for key, item in value.items()
                )
        case ValueKind.ARRAY:
            with guard.descend(value, path):
                return FrozenList(
                    _freeze(item, guard, (*path, index)) for index, item in enumerate(value)
                )
        case ValueKind.SET:
            return frozenset(value)
        case ValueKind.PRIMITIVE if type(value) is tuple:
            with guard.descend(value, path):
                return tuple(
                    _freeze(item, guard, (*path, index)) for index, item in enumerate(value)
                )
        case _:
            return value

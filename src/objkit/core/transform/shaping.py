"""Pure functions for picking, omitting and cleaning dict keys.

`pick`, `omit` and `map_values` return new dicts. The `clear_*` family
mutates the given dict in place and returns the same object.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping, MutableMapping
from typing import Any, TypeVar

from objkit.core.classify import UNDEFINED
from objkit.core.transform.clone import clone

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
M = TypeVar("M", bound=MutableMapping[Any, Any])


def pick(obj: Mapping[K, V], keys: Iterable[K], omit_undefined: bool = False) -> dict[K, V]:
    """Create a dict holding only `keys` (in the order given) from `obj`.

    Values are shared with `obj`, not copied. Keys missing from `obj` are
    ignored.

    Args:
        obj: Source mapping.
        keys: Keys to keep.
        omit_undefined: Also drop picked keys whose value is UNDEFINED.

    Example:
        >>> user = {"id": 1, "name": "John", "password": "secret"}
        >>> pick(user, ["id", "name"])
        {'id': 1, 'name': 'John'}
    """
    picked: dict[K, V] = {}
    for key in keys:
        if key not in obj:
            continue
        value = obj[key]
        if omit_undefined and value is UNDEFINED:
            continue
        picked[key] = value
    return picked


def omit(obj: Mapping[K, V], keys: Iterable[K], omit_undefined: bool = False) -> dict[K, V]:
    """Create a deep copy of `obj` without `keys`.

    Args:
        obj: Source mapping (not mutated).
        keys: Keys to drop.
        omit_undefined: Also drop every key whose value is UNDEFINED.

    Example:
        >>> omit({"a": 1, "b": 2, "c": UNDEFINED}, ["b"], omit_undefined=True)
        {'a': 1}
    """
    result: dict[K, V] = clone(dict(obj))
    for key in keys:
        result.pop(key, None)
    if omit_undefined:
        clear_undefined(result)
    return result


def map_values(
    obj: Mapping[K, V], iteratee: Callable[[V], Any] | Hashable
) -> dict[K, Any]:
    """Transform every value of `obj`.

    A callable `iteratee` is applied to each value. Any other `iteratee` is
    a key (for mappings) or attribute name (for objects) plucked from each
    value, giving None where it is missing.

    Example:
        >>> users = {"fred": {"age": 40}, "pebbles": {"age": 1}}
        >>> map_values(users, "age")
        {'fred': 40, 'pebbles': 1}
        >>> map_values(users, lambda u: u["age"] * 2)
        {'fred': 80, 'pebbles': 2}
    """
    if callable(iteratee):
        return {key: iteratee(value) for key, value in obj.items()}
    return {key: _pluck(value, iteratee) for key, value in obj.items()}


def _pluck(value: Any, name: Hashable) -> Any:
    if isinstance(value, Mapping):
        return value.get(name)
    if isinstance(name, str):
        return getattr(value, name, None)
    return None


def clear_undefined(obj: M) -> M:
    """Remove keys whose value is UNDEFINED (mutates and returns `obj`)."""
    return _clear(obj, lambda value: value is UNDEFINED)


def clear_null(obj: M) -> M:
    """Remove keys whose value is None (mutates and returns `obj`).

    UNDEFINED values are kept.
    """
    return _clear(obj, lambda value: value is None)


def clear_nullish(obj: M) -> M:
    """Remove keys whose value is None or UNDEFINED (mutates and returns `obj`)."""
    return _clear(obj, lambda value: value is None or value is UNDEFINED)


def _clear(obj: M, drop: Callable[[Any], bool]) -> M:
    for key in [key for key, value in obj.items() if drop(value)]:
        del obj[key]
    return obj

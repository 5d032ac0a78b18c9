"""Read-only container views.

`FrozenDict` and `FrozenList` own a private backing store and expose only
the read half of the dict/list interface. Every mutating method raises
`ReadonlyError`, so writes fail loudly instead of silently diverging.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, NoReturn, overload

from objkit.core.errors import ObjkitError


class ReadonlyError(ObjkitError, TypeError):
    """Raised on any attempt to mutate a read-only view."""

    pass


class _ReadonlyView:
    """Base class rejecting attribute writes and all mutators."""

    __slots__ = ()

    def _reject(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise ReadonlyError(f"{type(self).__name__} is read-only")

    def _seal(self, data: Any) -> None:
        # Backing store is set exactly once; calling __init__ again is a write
        if hasattr(self, "_data"):
            self._reject()
        object.__setattr__(self, "_data", data)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise ReadonlyError(f"cannot set attribute {name!r}: {type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> NoReturn:
        raise ReadonlyError(f"cannot delete attribute {name!r}: {type(self).__name__} is read-only")


class FrozenDict[K, V](_ReadonlyView, Mapping[K, V]):
    """Read-only mapping preserving insertion order.

    Compares equal to any mapping with the same items.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[K, V] | Iterable[tuple[K, V]] = ()) -> None:
        self._seal(dict(data))

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __or__(self, other: Mapping[K, V]) -> dict[K, V]:
        # Union builds a plain dict; the view itself is never touched
        return {**self._data, **other}

    def __reduce__(self) -> tuple[type[FrozenDict[K, V]], tuple[dict[K, V]]]:
        return (type(self), (self._data,))

    __setitem__ = _ReadonlyView._reject
    __delitem__ = _ReadonlyView._reject
    __ior__ = _ReadonlyView._reject
    pop = _ReadonlyView._reject
    popitem = _ReadonlyView._reject
    clear = _ReadonlyView._reject
    update = _ReadonlyView._reject
    setdefault = _ReadonlyView._reject


class FrozenList[T](_ReadonlyView, Sequence[T]):
    """Read-only sequence.

    Compares equal to lists, tuples and other FrozenLists with equal items.
    """

    __slots__ = ("_data",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._seal(list(items))

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> FrozenList[T]: ...

    def __getitem__(self, index: int | slice) -> T | FrozenList[T]:
        if isinstance(index, slice):
            return FrozenList(self._data[index])
        return self._data[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, item: object) -> bool:
        return item in self._data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FrozenList):
            return self._data == other._data
        if isinstance(other, list | tuple):
            return self._data == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Iterable[T]) -> list[T]:
        return [*self._data, *other]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __reduce__(self) -> tuple[type[FrozenList[T]], tuple[list[T]]]:
        return (type(self), (self._data,))

    __setitem__ = _ReadonlyView._reject
    __delitem__ = _ReadonlyView._reject
    __iadd__ = _ReadonlyView._reject
    __imul__ = _ReadonlyView._reject
    append = _ReadonlyView._reject
    extend = _ReadonlyView._reject
    insert = _ReadonlyView._reject
    pop = _ReadonlyView._reject
    remove = _ReadonlyView._reject
    clear = _ReadonlyView._reject
    sort = _ReadonlyView._reject
    reverse = _ReadonlyView._reject

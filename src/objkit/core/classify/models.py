"""Value kind models: the closed set of kinds every engine dispatches on."""

from __future__ import annotations

from enum import Enum, auto
from typing import Final


class ValueKind(Enum):
    """Kind tag assigned to any value by `classify`.

    Engines match on this tag instead of probing types ad hoc, so every
    engine handles the same closed set of kinds.
    """

    NULL = auto()
    """`None`."""

    UNDEFINED = auto()
    """The `UNDEFINED` sentinel (an explicitly unset value)."""

    ARRAY = auto()
    """`list` instances. Recursed into by clone/merge/traverse."""

    FUNCTION = auto()
    """Any callable. Always passed through by reference."""

    PLAIN_OBJECT = auto()
    """Instances whose exact type is `dict`. Recursed into key by key."""

    DATE = auto()
    """`datetime.date`, `datetime.datetime` and `datetime.time`."""

    REGEXP = auto()
    """Compiled `re.Pattern`."""

    MAP = auto()
    """`dict` subclasses such as `OrderedDict`, `defaultdict` or `Counter`."""

    SET = auto()
    """`set` instances."""

    PRIMITIVE = auto()
    """Immutable scalars and immutable containers (str, int, tuple, ...)."""

    OTHER = auto()
    """Opaque values: class instances, coroutines, futures, ..."""

    @property
    def is_special(self) -> bool:
        """Whether this kind gets a dedicated shallow-copy rule."""
        return self in _SPECIAL_KINDS

    @property
    def is_container(self) -> bool:
        """Whether the engines descend into values of this kind."""
        return self in (ValueKind.ARRAY, ValueKind.PLAIN_OBJECT)


_SPECIAL_KINDS: Final = frozenset({ValueKind.DATE, ValueKind.REGEXP, ValueKind.MAP, ValueKind.SET})


class _Undefined:
    """Singleton marking a value that was explicitly left unset.

    Distinct from `None`: `clear_null` keeps it, `clear_undefined` drops it.
    """

    __slots__ = ()
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> _Undefined:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()
"""Sentinel for "no value", the counterpart of `None` ("null")."""

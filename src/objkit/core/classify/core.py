"""Value classifier and type guards.

Usage:
    from objkit.core.classify import ValueKind, classify, is_plain_object

    classify({"a": 1})        # ValueKind.PLAIN_OBJECT
    classify([1, 2])          # ValueKind.ARRAY
    classify(OrderedDict())   # ValueKind.MAP
    is_plain_object(Point())  # False (class instance)
"""

from __future__ import annotations

import datetime
import re
from collections.abc import Mapping, Sequence
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, TypeGuard
from urllib.parse import urlsplit

from objkit.core.classify.models import UNDEFINED, ValueKind, _Undefined
from objkit.core.frozen import FrozenDict, FrozenList

_PRIMITIVE_TYPES = (str, bytes, int, float, complex, Decimal, Fraction, tuple, frozenset, Enum)
_DATE_TYPES = (datetime.date, datetime.time)


def classify(value: Any) -> ValueKind:
    """Return the kind tag for any value.

    Rules are checked in order; the first match wins. Never raises.

    Args:
        value: Any Python value.

    Returns:
        Exactly one ValueKind.
    """
    if value is None:
        return ValueKind.NULL
    if value is UNDEFINED:
        return ValueKind.UNDEFINED
    if isinstance(value, list | FrozenList):
        return ValueKind.ARRAY
    if callable(value):
        return ValueKind.FUNCTION
    if type(value) is dict or isinstance(value, FrozenDict):
        return ValueKind.PLAIN_OBJECT
    if isinstance(value, _DATE_TYPES):
        return ValueKind.DATE
    if isinstance(value, re.Pattern):
        return ValueKind.REGEXP
    if isinstance(value, dict):
        return ValueKind.MAP
    if isinstance(value, set):
        return ValueKind.SET
    if isinstance(value, _PRIMITIVE_TYPES):
        return ValueKind.PRIMITIVE
    return ValueKind.OTHER


def is_plain_object(value: Any) -> TypeGuard[Mapping[Any, Any]]:
    """Check if a value is a plain dict (not a subclass, not a class instance).

    Read-only views made by `make_readonly` count as plain objects.
    """
    return type(value) is dict or isinstance(value, FrozenDict)


def is_array(value: Any) -> TypeGuard[Sequence[Any]]:
    """Check if a value is a list or a read-only list view."""
    return isinstance(value, list | FrozenList)


def is_function(value: Any) -> bool:
    """Check if a value is callable. Classes count as callables."""
    return callable(value)


def is_defined(value: Any) -> bool:
    """Check if a value is anything other than UNDEFINED."""
    return value is not UNDEFINED


def is_undefined(value: Any) -> TypeGuard[_Undefined]:
    return value is UNDEFINED


def is_null(value: Any) -> TypeGuard[None]:
    return value is None


def is_boolean(value: Any) -> TypeGuard[bool]:
    return isinstance(value, bool)


def is_number(value: Any) -> TypeGuard[int | float]:
    """Check if a value is an int or float. Booleans are not numbers here."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_string(value: Any) -> TypeGuard[str]:
    return isinstance(value, str)


def is_date(value: Any) -> bool:
    return classify(value) is ValueKind.DATE


def is_regexp(value: Any) -> TypeGuard[re.Pattern[Any]]:
    return isinstance(value, re.Pattern)


def is_map(value: Any) -> bool:
    return classify(value) is ValueKind.MAP


def is_set(value: Any) -> TypeGuard[set[Any]]:
    return isinstance(value, set)


def is_error(value: Any) -> TypeGuard[BaseException]:
    """Check if a value is an exception instance (not an exception class)."""
    return isinstance(value, BaseException)


def is_url(value: str) -> bool:
    """Check if a string is an absolute URL with http or https scheme.

    Example:
        >>> is_url("https://example.com")
        True
        >>> is_url("ftp://files.example.com")
        False
        >>> is_url("example.com")
        False
    """
    if not isinstance(value, str):
        return False
    try:
        parts = urlsplit(value)
        # Accessing port validates it
        parts.port  # noqa: B018
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)

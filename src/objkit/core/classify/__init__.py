"""Value classification: the closed kind set and predicate guards."""

from objkit.core.classify.core import (
    classify,
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
from objkit.core.classify.models import UNDEFINED, ValueKind

__all__ = [
    # Models
    "ValueKind",
    "UNDEFINED",
    # Classifier
    "classify",
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

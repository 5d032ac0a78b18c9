"""Read-only views and the deep freezer."""

from objkit.core.frozen import FrozenDict, FrozenList, ReadonlyError
from objkit.core.readonly.core import is_readonly, make_readonly, thaw

__all__ = [
    "FrozenDict",
    "FrozenList",
    "ReadonlyError",
    "make_readonly",
    "is_readonly",
    "thaw",
]

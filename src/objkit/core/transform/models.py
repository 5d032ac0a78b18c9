"""Traversal models: per-key context and visitor signatures."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Hashable
from dataclasses import dataclass
from typing import Any, NamedTuple

from objkit.core.types import Path


class Entry(NamedTuple):
    """A key-value pair handed to a traversal visitor.

    Visitors may return an Entry (or any `(key, value)` pair) to rewrite the
    slot, or None to keep it unchanged.
    """

    key: Hashable
    value: Any


@dataclass(slots=True)
class TraversalNode:
    """Context for one visited key, created fresh per key and never reused.

    Attributes:
        path: Keys and list indices from the root down to this key.
        skip_children: When set, traversal does not descend below this key.
    """

    path: Path = ()
    skip_children: bool = False

    def ignore_children(self) -> None:
        """Prevent traversal into this key's nested dicts and lists.

        Example:
            >>> def visit(entry, node):
            ...     if entry.key == "secrets":
            ...         node.ignore_children()
        """
        self.skip_children = True

    def get_path(self) -> list[Hashable]:
        """Return the path from the root as a list.

        Example:
            For `{"users": [{"name": "John"}]}` the visitor sees
            `["users"]` and then `["users", 0, "name"]`.
        """
        return list(self.path)

    def child(self, key: Hashable) -> TraversalNode:
        """Create the context for a key nested directly below this one."""
        return TraversalNode(path=(*self.path, key))


type Rewrite = tuple[Hashable, Any] | None
"""Visitor result: a replacement `(key, value)` or None for no change."""

type Visitor = Callable[[Entry, TraversalNode], Rewrite]
"""Synchronous visitor accepted by `traverse`."""

type AsyncVisitor = Callable[[Entry, TraversalNode], Rewrite | Awaitable[Rewrite]]
"""Visitor accepted by `traverse_async`; may be sync or async."""

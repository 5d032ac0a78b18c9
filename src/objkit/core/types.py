"""Core type definitions for objkit."""

from collections.abc import Hashable

type Path = tuple[Hashable, ...]
"""Keys and list indices leading from the root value to a node."""

type Copy[T] = T
"""Type alias indicating a value is a fresh copy.

When you see `Copy[T]` in a return type, every dict and list in the
returned tree is new. Mutating it never affects the input.
"""

type Readonly[T] = T
"""Type alias indicating a value is a deeply read-only view.

Dicts come back as `FrozenDict`, lists as `FrozenList` and sets as
`frozenset`. Any write raises `ReadonlyError`.
"""

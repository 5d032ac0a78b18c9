"""Exceptions raised by the transformation engines."""

from __future__ import annotations


class ObjkitError(Exception):
    """Base class for all objkit errors."""

    pass


class CyclicStructureError(ObjkitError, ValueError):
    """Raised when a dict or list contains itself on the current descent path."""

    def __init__(self, path: tuple[str | int, ...]) -> None:
        self.path = path
        where = "/".join(str(part) for part in path) or "<root>"
        super().__init__(f"Reference cycle detected at {where}")


class RecursionLimitError(ObjkitError, RecursionError):
    """Raised when nesting exceeds the configured max_depth."""

    def __init__(self, path: tuple[str | int, ...], max_depth: int) -> None:
        self.path = path
        self.max_depth = max_depth
        where = "/".join(str(part) for part in path) or "<root>"
        super().__init__(f"Nesting deeper than max_depth={max_depth} at {where}")

"""Descent bookkeeping shared by the recursive engines.

One DescentGuard lives for the duration of a single engine call. It knows
which keys are reserved and which containers are open on the current
descent path, so reference cycles fail fast instead of exhausting the stack.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator
from contextlib import contextmanager
from typing import Any

from objkit.config import TransformSettings, get_settings
from objkit.core.errors import CyclicStructureError, RecursionLimitError
from objkit.core.types import Path

logger = logging.getLogger(__name__)


class DescentGuard:
    """Per-call reserved-key filter, cycle detector and depth limiter.

    Args:
        settings: Settings to apply. Defaults to the process-wide settings.
    """

    __slots__ = ("_reserved", "_detect_cycles", "_max_depth", "_open")

    def __init__(self, settings: TransformSettings | None = None) -> None:
        settings = settings or get_settings()
        self._reserved = settings.reserved_keys
        self._detect_cycles = settings.detect_cycles
        self._max_depth = settings.max_depth
        self._open: set[int] = set()

    def is_reserved(self, key: Hashable, path: Path = ()) -> bool:
        """Check whether a key must be skipped when copying or merging."""
        if isinstance(key, str) and key in self._reserved:
            logger.debug("Skipping reserved key %r under %r", key, path)
            return True
        return False

    def check_depth(self, path: Path) -> None:
        """Raise RecursionLimitError if a container at `path` is too deep.

        The root container sits at depth 1.
        """
        if self._max_depth is not None and len(path) >= self._max_depth:
            raise RecursionLimitError(path, self._max_depth)

    @contextmanager
    def descend(self, container: Any, path: Path) -> Iterator[None]:
        """Mark `container` as open while its children are processed.

        Raises:
            RecursionLimitError: If `path` is deeper than max_depth.
            CyclicStructureError: If `container` is already open above us.
        """
        self.check_depth(path)
        if not self._detect_cycles:
            yield
            return

        marker = id(container)
        if marker in self._open:
            logger.debug("Reference cycle through %s at %r", type(container).__name__, path)
            raise CyclicStructureError(path)

        self._open.add(marker)
        try:
            yield
        finally:
            self._open.discard(marker)

"""Tree traversal with per-key rewrite.

Usage:
    # Uppercase every string value
    def shout(entry, node):
        if isinstance(entry.value, str):
            return entry.key, entry.value.upper()

    traverse({"name": "john", "nested": {"title": "mr"}}, shout)
    # {"name": "JOHN", "nested": {"title": "MR"}}

    # Rename keys, skip a subtree
    def rename(entry, node):
        if entry.key == "secrets":
            node.ignore_children()
        if entry.key == "name":
            return "full_name", entry.value

    # Async visitors go through traverse_async
    async def lookup(entry, node):
        if entry.key == "user_id":
            return "user", await fetch_user(entry.value)

    result = await traverse_async(data, lookup)
"""

from __future__ import annotations

import asyncio
import inspect
import warnings
from collections.abc import Awaitable, Hashable, Iterable, Mapping
from typing import Any

from objkit.config import TransformSettings, get_settings
from objkit.core.classify import ValueKind, classify, is_array, is_plain_object
from objkit.core.transform.clone import clone
from objkit.core.transform.guard import DescentGuard
from objkit.core.transform.models import AsyncVisitor, Entry, TraversalNode, Visitor


def traverse(value: Any, visit: Visitor, *, settings: TransformSettings | None = None) -> Any:
    """Rewrite a dict/list tree through a synchronous visitor.

    The visitor is called once per key, parents before children, with an
    Entry and a fresh TraversalNode. Returning None keeps the pair; returning
    a `(key, value)` pair replaces it. Nested dicts (and dicts inside lists)
    of the resulting value are then traversed unless the visitor called
    `node.ignore_children()`.

    Args:
        value: Dict or list to traverse. Other values are returned unchanged.
        visit: Synchronous visitor. Use `traverse_async` for coroutines.
        settings: Optional settings override.

    Returns:
        Rewritten copy. The input is never mutated.

    Raises:
        TypeError: If the visitor returns an awaitable or a malformed result.
    """
    settings = settings or get_settings()
    match classify(value):
        case ValueKind.ARRAY:
            return [
                _traverse_object(item, visit, TraversalNode(path=(index,)), settings)
                if is_plain_object(item)
                else item
                for index, item in enumerate(value)
            ]
        case ValueKind.PLAIN_OBJECT:
            return _traverse_object(value, visit, TraversalNode(), settings)
        case _:
            return value


async def traverse_async(
    value: Any, visit: AsyncVisitor, *, settings: TransformSettings | None = None
) -> Any:
    """Rewrite a dict/list tree through a sync or async visitor.

    Same algorithm as `traverse`, with every visitor result awaited when it
    is awaitable. The visits for sibling keys of one dict (and the elements
    of a top-level list) are gathered concurrently; descent into children
    then proceeds in key order. Only the shape of the final tree is
    deterministic, not the interleaving of visitor side effects. If one
    visit fails, its pending siblings are cancelled before the error is
    re-raised.

    Args:
        value: Dict or list to traverse. Other values are returned unchanged.
        visit: Visitor returning a rewrite, None, or an awaitable of either.
        settings: Optional settings override.

    Returns:
        Rewritten copy. The input is never mutated.
    """
    settings = settings or get_settings()
    match classify(value):
        case ValueKind.ARRAY:

            async def element(index: int, item: Any) -> Any:
                if is_plain_object(item):
                    return await _traverse_object_async(
                        item, visit, TraversalNode(path=(index,)), settings
                    )
                return item

            return await _gather(element(i, item) for i, item in enumerate(value))
        case ValueKind.PLAIN_OBJECT:
            return await _traverse_object_async(value, visit, TraversalNode(), settings)
        case _:
            return value


# Synchronous path


def _traverse_object(
    obj: Any, visit: Visitor, parent: TraversalNode, settings: TransformSettings
) -> dict[Hashable, Any]:
    DescentGuard(settings).check_depth(parent.path)
    working = clone(obj, settings=settings)
    result: dict[Hashable, Any] = {}

    for key, value in working.items():
        node = parent.child(key)
        rewrite = visit(Entry(key, value), node)
        if inspect.isawaitable(rewrite):
            _discard(rewrite)
            raise TypeError(
                f"Visitor returned an awaitable for key {key!r}. Use traverse_async() instead."
            )
        new_key, new_value = _resolve(key, value, rewrite)
        if not node.skip_children:
            new_value = _descend(new_value, visit, node, settings)
        _assign(result, new_key, new_value, node)

    return result


def _descend(value: Any, visit: Visitor, node: TraversalNode, settings: TransformSettings) -> Any:
    if is_plain_object(value):
        return _traverse_object(value, visit, node, settings)
    if is_array(value):
        return [
            _traverse_object(item, visit, node.child(index), settings)
            if is_plain_object(item)
            else item
            for index, item in enumerate(value)
        ]
    return value


# Asynchronous path


async def _traverse_object_async(
    obj: Any, visit: AsyncVisitor, parent: TraversalNode, settings: TransformSettings
) -> dict[Hashable, Any]:
    DescentGuard(settings).check_depth(parent.path)
    working = clone(obj, settings=settings)

    # Start every sibling visit before awaiting any of them
    visited: list[tuple[Hashable, Any, TraversalNode]] = []
    outcomes: list[Any] = []
    try:
        for key, value in working.items():
            node = parent.child(key)
            visited.append((key, value, node))
            outcomes.append(visit(Entry(key, value), node))
    except BaseException:
        for outcome in outcomes:
            _discard(outcome)
        raise

    try:
        rewrites = await _gather(_settle(outcome) for outcome in outcomes)
    except BaseException:
        for outcome in outcomes:
            _discard(outcome)
        raise

    result: dict[Hashable, Any] = {}
    for (key, value, node), rewrite in zip(visited, rewrites, strict=True):
        new_key, new_value = _resolve(key, value, rewrite)
        if not node.skip_children:
            new_value = await _descend_async(new_value, visit, node, settings)
        _assign(result, new_key, new_value, node)

    return result


async def _descend_async(
    value: Any, visit: AsyncVisitor, node: TraversalNode, settings: TransformSettings
) -> Any:
    if is_plain_object(value):
        return await _traverse_object_async(value, visit, node, settings)
    if is_array(value):
        items: list[Any] = []
        for index, item in enumerate(value):
            if is_plain_object(item):
                item = await _traverse_object_async(item, visit, node.child(index), settings)
            items.append(item)
        return items
    return value


async def _gather(awaitables: Iterable[Awaitable[Any]]) -> list[Any]:
    """Await concurrently; on the first failure cancel the rest, then re-raise it."""
    tasks = [asyncio.ensure_future(awaitable) for awaitable in awaitables]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def _settle(outcome: Any) -> Any:
    if inspect.isawaitable(outcome):
        return await outcome
    return outcome


# Helpers


def _resolve(key: Hashable, value: Any, rewrite: Any) -> tuple[Hashable, Any]:
    """Apply a visitor result to the original pair."""
    if rewrite is None:
        return key, value
    if isinstance(rewrite, (str, bytes, bytearray, Mapping)):
        raise TypeError(
            f"Visitor must return None or a (key, value) pair, got {type(rewrite).__name__}"
        )
    try:
        new_key, new_value = rewrite
    except (TypeError, ValueError) as e:
        raise TypeError(
            f"Visitor must return None or a (key, value) pair, got {type(rewrite).__name__}"
        ) from e
    return new_key, new_value


def _assign(result: dict[Hashable, Any], key: Hashable, value: Any, node: TraversalNode) -> None:
    if key in result:
        warnings.warn(
            f"traverse() produced key {key!r} more than once under {list(node.path[:-1])!r}. "
            f"Only the last one will be kept.",
            stacklevel=2,
            skip_file_prefixes=(__file__,),
        )
    result[key] = value


def _discard(outcome: Any) -> None:
    """Close an unawaited coroutine so it does not warn on collection."""
    if inspect.iscoroutine(outcome):
        outcome.close()

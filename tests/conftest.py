"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from objkit.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def nested():
    """Nested tree of dicts, lists and primitives."""
    return {
        "user": {"name": "John", "details": {"age": 30, "preferences": {"theme": "dark"}}},
        "items": ["item1", "item2"],
        "config": {"features": {"notifications": True, "sound": False}},
        "metadata": {"tags": ["tag1", "tag2"], "count": 5},
    }


class Point:
    """Plain class instance, treated as opaque by every engine."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


@pytest.fixture
def point_cls():
    return Point

"""Tests for deep clone.

Critical Invariants:
- Clones share no dict or list with the original
- Non-container values are carried over by reference
- Reserved keys are never copied
"""

import datetime
import re
from collections import OrderedDict

import pytest

from objkit import CyclicStructureError, RecursionLimitError, TransformSettings, clone


def test_clone_copies_every_container(nested):
    """CRITICAL: No nested dict or list is shared with the original.

    Why: Callers mutate clones freely and must never corrupt the source.
    """
    copy = clone(nested)

    assert copy == nested
    assert copy is not nested
    assert copy["user"] is not nested["user"]
    assert copy["user"]["details"] is not nested["user"]["details"]
    assert copy["user"]["details"]["preferences"] is not nested["user"]["details"]["preferences"]
    assert copy["items"] is not nested["items"]
    assert copy["metadata"]["tags"] is not nested["metadata"]["tags"]


def test_mutating_clone_leaves_original_intact(nested):
    copy = clone(nested)

    copy["user"]["name"] = "Jane"
    copy["user"]["details"]["age"] = 31
    copy["items"].append("new")
    copy["metadata"]["tags"].append("new")
    copy["config"]["features"]["notifications"] = False

    assert nested["user"]["name"] == "John"
    assert nested["user"]["details"]["age"] == 30
    assert nested["items"] == ["item1", "item2"]
    assert nested["metadata"]["tags"] == ["tag1", "tag2"]
    assert nested["config"]["features"]["notifications"] is True


def test_clone_is_idempotent(nested):
    assert clone(clone(nested)) == clone(nested)


def test_dicts_inside_lists_are_copied():
    original = {"rows": [{"id": 1}, {"id": 2}]}
    copy = clone(original)

    copy["rows"][0]["id"] = 99

    assert original["rows"][0]["id"] == 1
    assert copy["rows"][1] is not original["rows"][1]


def test_top_level_list():
    original = [{"a": 1}, [2, 3], "x"]
    copy = clone(original)

    assert copy == original
    assert copy[0] is not original[0]
    assert copy[1] is not original[1]


@pytest.mark.parametrize(
    "special",
    [
        datetime.datetime(2023, 1, 1),
        re.compile("test", re.IGNORECASE),
        OrderedDict(a=1),
        {1, 2},
        lambda: "test",
    ],
)
def test_special_values_pass_through_by_reference(special):
    """Dates, patterns, maps, sets and functions are not copied by clone."""
    container = {"v": special, "nested": {"v": special}}
    copy = clone(container)

    assert copy is not container
    assert copy["v"] is special
    assert copy["nested"]["v"] is special
    assert copy["nested"] is not container["nested"]


def test_class_instances_pass_through(point_cls):
    point = point_cls(1, 2)
    assert clone({"p": point})["p"] is point


def test_functions_stay_callable():
    copy = clone({"get": lambda: "result", "nested": {"fn": lambda: "nested"}})
    assert copy["get"]() == "result"
    assert copy["nested"]["fn"]() == "nested"


def test_edge_values():
    edges = {"none": None, "empty_dict": {}, "empty_list": [], "zero": 0, "empty": ""}
    copy = clone(edges)

    assert copy == edges
    assert copy["empty_dict"] is not edges["empty_dict"]
    assert copy["empty_list"] is not edges["empty_list"]


@pytest.mark.parametrize("value", [None, 5, "text", (1, 2)])
def test_non_containers_returned_unchanged(value):
    assert clone(value) is value


def test_reserved_keys_are_skipped():
    original = {"__proto__": {"polluted": True}, "constructor": 1, "prototype": 2, "ok": 3}
    assert clone(original) == {"ok": 3}


def test_reserved_keys_are_configurable():
    settings = TransformSettings(reserved_keys=frozenset({"secret"}))
    assert clone({"secret": 1, "constructor": 2}, settings=settings) == {"constructor": 2}


def test_shared_references_are_not_cycles():
    """The same dict reachable twice is fine; only self-containment fails."""
    shared = {"x": 1}
    copy = clone({"a": shared, "b": [shared, shared]})

    assert copy == {"a": {"x": 1}, "b": [{"x": 1}, {"x": 1}]}
    assert copy["a"] is not copy["b"][0]


def test_cycle_fails_fast():
    """CRITICAL: Cycles raise instead of exhausting the stack."""
    looped: dict = {"name": "root", "children": []}
    looped["children"].append(looped)

    with pytest.raises(CyclicStructureError) as excinfo:
        clone(looped)

    assert excinfo.value.path == ("children", 0)


def test_max_depth():
    settings = TransformSettings(max_depth=2)

    assert clone({"a": {"b": 1}}, settings=settings) == {"a": {"b": 1}}
    with pytest.raises(RecursionLimitError):
        clone({"a": {"b": {"c": 1}}}, settings=settings)


def test_cycle_detection_off_still_copies_shared_references():
    settings = TransformSettings(detect_cycles=False)
    shared = {"x": [1]}
    copy = clone({"a": shared, "b": [shared]}, settings=settings)

    assert copy == {"a": {"x": [1]}, "b": [{"x": [1]}]}
    assert copy["a"] is not shared
    assert copy["b"][0] is not shared
    assert copy["a"]["x"] is not shared["x"]

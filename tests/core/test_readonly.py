"""Tests for deep read-only copies.

Critical Invariants:
- Every write at every depth raises ReadonlyError
- The input stays mutable and independent
- Functions stay callable
"""

import copy
import pickle
from collections import OrderedDict

import pytest

from objkit import (
    CyclicStructureError,
    FrozenDict,
    FrozenList,
    ReadonlyError,
    is_readonly,
    make_readonly,
    thaw,
)


@pytest.fixture
def frozen(nested):
    return make_readonly(nested)


def test_equal_but_distinct(nested, frozen):
    assert frozen == nested
    assert nested == frozen
    assert frozen is not nested
    assert is_readonly(frozen)


@pytest.mark.parametrize(
    "write",
    [
        lambda f: f.__setitem__("new", 1),
        lambda f: f.__delitem__("items"),
        lambda f: f.update(a=1),
        lambda f: f.pop("items"),
        lambda f: f.popitem(),
        lambda f: f.setdefault("x", 1),
        lambda f: f.clear(),
        lambda f: f["user"].__setitem__("name", "Jane"),
        lambda f: f["user"]["details"].__setitem__("age", 31),
        lambda f: f["config"]["features"].__setitem__("notifications", False),
        lambda f: f["items"].append("item3"),
        lambda f: f["items"].__setitem__(0, "modified"),
        lambda f: f["items"].extend(["x"]),
        lambda f: f["items"].insert(0, "x"),
        lambda f: f["items"].pop(),
        lambda f: f["items"].remove("item1"),
        lambda f: f["items"].sort(),
        lambda f: f["items"].reverse(),
        lambda f: f["items"].clear(),
        lambda f: f["metadata"]["tags"].__delitem__(0),
        lambda f: setattr(f, "anything", 1),
        lambda f: setattr(f["items"], "_data", []),
    ],
)
def test_every_write_is_rejected(frozen, write):
    """CRITICAL: Mutation fails on every path."""
    with pytest.raises(ReadonlyError):
        write(frozen)


def test_augmented_assignment_is_rejected(frozen):
    items = frozen["items"]
    with pytest.raises(ReadonlyError):
        items += ["x"]


def test_readonly_error_is_type_error(frozen):
    with pytest.raises(TypeError):
        frozen["user"]["name"] = "Jane"


def test_original_stays_mutable(nested, frozen):
    nested["user"]["name"] = "Modified"
    nested["items"].append("new item")

    assert nested["user"]["name"] == "Modified"
    assert len(nested["items"]) == 3
    assert frozen["user"]["name"] == "John"
    assert len(frozen["items"]) == 2


def test_functions_remain_callable():
    frozen = make_readonly({"get": lambda: "test", "data": {"count": 1}})

    assert frozen["get"]() == "test"
    with pytest.raises(ReadonlyError):
        frozen["data"]["count"] = 2


def test_container_kinds():
    frozen = make_readonly({"map": OrderedDict(a={"b": 1}), "set": {1, 2}, "pair": ({"x": 1}, 2)})

    assert isinstance(frozen["map"], FrozenDict)
    assert isinstance(frozen["map"]["a"], FrozenDict)
    assert frozen["set"] == frozenset({1, 2})
    assert isinstance(frozen["pair"][0], FrozenDict)


def test_top_level_list():
    frozen = make_readonly([{"a": 1}, [2]])

    assert isinstance(frozen, FrozenList)
    assert frozen == [{"a": 1}, [2]]
    assert frozen[0:1] == [{"a": 1}]
    with pytest.raises(ReadonlyError):
        frozen[0]["a"] = 2


def test_refreezing_a_readonly_value():
    inner = make_readonly({"x": {"y": [1]}})
    again = make_readonly(inner)

    assert again == inner
    assert isinstance(again["x"]["y"], FrozenList)


def test_read_api(frozen):
    assert list(frozen) == ["user", "items", "config", "metadata"]
    assert "user" in frozen
    assert frozen.get("missing") is None
    assert "item1" in frozen["items"]
    assert frozen["items"].index("item2") == 1
    assert frozen["items"] + ["x"] == ["item1", "item2", "x"]
    assert (frozen | {"extra": 1})["extra"] == 1
    assert "extra" not in frozen


def test_copy_and_pickle_round_trip(frozen):
    assert copy.deepcopy(frozen) == frozen
    assert pickle.loads(pickle.dumps(frozen)) == frozen


def test_thaw_gives_mutable_tree(nested, frozen):
    thawed = thaw(frozen)

    assert thawed == nested
    assert type(thawed["user"]) is dict
    assert type(thawed["items"]) is list
    thawed["user"]["name"] = "Jane"
    assert frozen["user"]["name"] == "John"


@pytest.mark.parametrize(
    "view, data",
    [(FrozenDict({"a": 1}), {"x": 1}), (FrozenList([1]), [2, 3])],
    ids=["dict", "list"],
)
def test_reinitialising_is_rejected(view, data):
    """CRITICAL: Calling __init__ again cannot swap the backing store."""
    before = list(view)
    with pytest.raises(ReadonlyError):
        view.__init__(data)
    assert list(view) == before


def test_cyclic_input_raises():
    looped: dict = {"items": []}
    looped["items"].append(looped)

    with pytest.raises(CyclicStructureError):
        make_readonly(looped)

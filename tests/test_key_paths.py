from __future__ import annotations

import pytest

from i18n_manager.catalogs.key_paths import MISSING, get_value, iter_paths, set_value, split_path
from i18n_manager.core.errors import InvalidKeyPathError


def test_get_value_nested():
    tree = {"home": {"title": "Welcome", "tags": ["a", "b"]}}
    assert get_value(tree, "home.title") == "Welcome"
    assert get_value(tree, "home") == {"title": "Welcome", "tags": ["a", "b"]}
    assert get_value(tree, ["home", "tags"]) == ["a", "b"]


@pytest.mark.parametrize(
    "tree, path",
    [
        ({}, "a"),
        ({}, "a.b.c"),
        ({"a": "scalar"}, "a.b"),
        ({"a": None}, "a.b"),
        ({"a": ["x", "y"]}, "a.0"),
        ({"a": {"b": 1}}, "a.c"),
        ("not a mapping", "a"),
        (None, "a"),
    ],
)
def test_get_value_missing_never_raises(tree, path):
    assert get_value(tree, path) is MISSING


def test_null_leaf_is_present():
    assert get_value({"a": {"b": None}}, "a.b") is None


def test_set_value_creates_intermediate_mappings():
    tree: dict = {}
    result = set_value(tree, "a.b.c", "v")
    assert result is tree
    assert tree == {"a": {"b": {"c": "v"}}}


def test_set_value_overwrites_leaf_and_keeps_siblings():
    tree = {"a": {"b": "old", "keep": "me"}}
    set_value(tree, "a.b", "new")
    assert tree == {"a": {"b": "new", "keep": "me"}}


@pytest.mark.parametrize("blocker", ["scalar", ["list"], None, 3])
def test_set_value_replaces_non_mapping_prefix(blocker):
    tree = {"a": blocker}
    set_value(tree, "a.b", "v")
    assert tree == {"a": {"b": "v"}}


def test_set_value_replaces_non_mapping_root():
    result = set_value(["x"], "a", "v")
    assert result == {"a": "v"}


@pytest.mark.parametrize(
    "tree, path, value",
    [
        ({}, "k", "v"),
        ({"k": "x"}, "k.sub", {"nested": True}),
        ({"a": {"b": [1, 2]}}, "a.b.c.d", None),
        ({"a": 1}, "a", ["list"]),
    ],
)
def test_get_after_set_returns_value(tree, path, value):
    tree = set_value(tree, path, value)
    assert get_value(tree, path) == value


def test_split_path():
    assert split_path("a.b.c") == ["a", "b", "c"]
    assert split_path("single") == ["single"]


@pytest.mark.parametrize("bad", ["", "a..b", ".a", "a."])
def test_split_path_rejects_empty_segments(bad):
    with pytest.raises(InvalidKeyPathError):
        split_path(bad)


def test_iter_paths_treats_lists_and_scalars_as_leaves():
    tree = {
        "b": {"x": "1", "y": {"z": None}},
        "a": ["p", {"q": "ignored"}],
        "empty": {},
        "n": 0,
    }
    assert list(iter_paths(tree)) == ["b.x", "b.y.z", "a", "n"]


def test_iter_paths_of_non_mapping_is_empty():
    assert list(iter_paths("text")) == []

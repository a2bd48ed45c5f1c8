"""
tests.test_merge

Edge cases of the array-replacing deep merge.
"""

from __future__ import annotations

from state_reducers import deep_merge


class Opaque:
    pass


def test_missing_base_or_patch_behaves_as_empty() -> None:
    assert deep_merge(None, {"a": 1}) == {"a": 1}
    assert deep_merge({"a": 1}, None) == {"a": 1}


def test_result_shares_no_containers_with_base() -> None:
    base = {"a": {"b": [{"c": 1}]}}
    result = deep_merge(base, {})

    assert result == base
    assert result["a"] is not base["a"]
    assert result["a"]["b"] is not base["a"]["b"]
    assert result["a"]["b"][0] is not base["a"]["b"][0]


def test_patch_list_is_copied_into_place() -> None:
    patch = {"a": [1, 2]}
    result = deep_merge({"a": [0]}, patch)
    assert result["a"] == [1, 2]
    assert result["a"] is not patch["a"]


def test_array_target_is_replaced_even_by_non_array() -> None:
    assert deep_merge({"a": [1, 2]}, {"a": {"x": 1}}) == {"a": {"x": 1}}
    assert deep_merge({"a": [1, 2]}, {"a": 5}) == {"a": 5}


def test_mapping_replaces_scalar() -> None:
    assert deep_merge({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}


def test_none_in_patch_is_assigned() -> None:
    assert deep_merge({"a": {"b": 1}}, {"a": None}) == {"a": None}


def test_new_keys_are_added_at_any_depth() -> None:
    assert deep_merge({"a": {"b": 1}}, {"a": {"c": {"d": 2}}, "e": 3}) == {
        "a": {"b": 1, "c": {"d": 2}},
        "e": 3,
    }


def test_opaque_leaves_kept_by_reference() -> None:
    leaf = Opaque()
    assert deep_merge({"a": 1}, {"a": leaf})["a"] is leaf
    assert deep_merge({"a": leaf}, {"b": 1})["a"] is leaf

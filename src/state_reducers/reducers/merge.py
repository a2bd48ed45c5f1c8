"""
state_reducers.reducers.merge

Deep merge used by the `merge` action.

Responsibilities:
- Merge a partial patch onto a copy of the state, mapping by mapping.
- Treat sequences as atomic: a patched list replaces the old one wholesale.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_MISSING = object()


def deep_merge(base: Mapping[str, Any] | None, patch: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Return a new dict holding `base` with `patch` applied on top.

    Neither argument is mutated and the result shares no dict/list containers
    with `base`. Leaf values (scalars, caller objects) are kept by reference.

    >>> deep_merge({"a": 1, "b": {"c": [1, 2, 3]}}, {"b": {"c": [9]}})
    {'a': 1, 'b': {'c': [9]}}
    """

    result: dict[str, Any] = _clone(base) if isinstance(base, Mapping) else {}
    if isinstance(patch, Mapping):
        _merge_into(result, patch)
    return result


def _merge_into(target: dict[str, Any], patch: Mapping[str, Any]) -> None:
    # `target` is always a container produced by `_clone`, so in-place edits are safe.
    for key, value in patch.items():
        current = target.get(key, _MISSING)
        if _is_sequence(current):
            target[key] = _clone(value)
        elif isinstance(value, Mapping) and isinstance(current, dict):
            _merge_into(current, value)
        else:
            target[key] = _clone(value)


def _clone(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _clone(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_clone(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_clone(item) for item in value)
    return value


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))

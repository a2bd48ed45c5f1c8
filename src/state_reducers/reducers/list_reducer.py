"""
state_reducers.reducers.list_reducer

Reducer for state that holds an ordered sequence under a list field.

Responsibilities:
- Apply the list vocabulary (add/insert/replace/shift/pop/remove...) to a
  fresh copy of the list field.
- Delegate `set` and `merge` to `map_reducer`; reject anything else.

Equality for `replace`, `remove` and `removeAll` follows Python containment
(`a is b or a == b`). Unlike a strict equality scan, this lets `replace`
match a NaN item when it is the very same object. Index handling mirrors
`list.insert` and slicing: negative positions count from the end and
out-of-range positions clamp.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from state_reducers.reducers.actions import (
    AddAction,
    AddAllAction,
    InsertAction,
    InsertAllAction,
    MergeAction,
    PopAction,
    RemoveAction,
    RemoveAllAction,
    RemoveAtAction,
    ReplaceAction,
    SetAction,
    ShiftAction,
    as_action,
    reject_unknown,
)
from state_reducers.reducers.map_reducer import map_reducer


def list_reducer(
    state: Mapping[str, Any], action: Any, *, list_key: str = "list"
) -> Any:
    """
    Return the state that results from applying `action` to `state`.

    `list_key` names the list field. Every list action returns a new mapping
    with a newly allocated list, except `replace` without a match, which
    returns `state` itself.
    """

    action = as_action(action, reducer="list")
    items: Sequence[Any] = state.get(list_key, ())

    match action:
        case AddAction(payload=item):
            return _with_list(state, list_key, [*items, item])

        case AddAllAction(payload=new_items):
            return _with_list(state, list_key, [*items, *new_items])

        case InsertAction(index=index, payload=item):
            updated = list(items)
            updated.insert(index, item)
            return _with_list(state, list_key, updated)

        case InsertAllAction(index=index, payload=new_items):
            updated = list(items)
            updated[index:index] = new_items
            return _with_list(state, list_key, updated)

        case ReplaceAction(payload=payload):
            position = _index_of(items, payload.old_value)
            if position is None:
                return state
            updated = list(items)
            updated[position] = payload.new_value
            return _with_list(state, list_key, updated)

        case ShiftAction():
            return _with_list(state, list_key, list(items[1:]))

        case PopAction():
            return _with_list(state, list_key, list(items[:-1]))

        case RemoveAction(payload=item):
            return _with_list(state, list_key, [x for x in items if not _matches(x, item)])

        case RemoveAllAction(payload=targets):
            return _with_list(
                state,
                list_key,
                [x for x in items if not any(_matches(x, target) for target in targets)],
            )

        case RemoveAtAction(index=index):
            # Positions refer to the original list; negative or out-of-range ones never match.
            positions = {index} if isinstance(index, int) else set(index)
            return _with_list(
                state, list_key, [x for pos, x in enumerate(items) if pos not in positions]
            )

        case SetAction() | MergeAction():
            return map_reducer(state, action)

        case _:
            raise reject_unknown("list", getattr(action, "type", type(action).__name__))


def _with_list(state: Mapping[str, Any], key: str, items: list[Any]) -> dict[str, Any]:
    return {**state, key: items}


def _index_of(items: Sequence[Any], value: Any) -> int | None:
    for position, item in enumerate(items):
        if _matches(item, value):
            return position
    return None


def _matches(item: Any, value: Any) -> bool:
    return item is value or item == value


# --- Module Notes -----------------------------------------------------------
# `replace` touches only the first match while `remove`/`removeAll` drop every
# match; callers rely on that asymmetry.

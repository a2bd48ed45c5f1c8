"""
state_reducers.reducers.map_reducer

Reducer for map-like state.

Responsibilities:
- `set`: replace the state with the payload.
- `merge`: deep-merge the payload onto a copy of the state.
- Reject every other action with `UnknownActionError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from state_reducers.reducers.actions import MergeAction, SetAction, as_action, reject_unknown
from state_reducers.reducers.merge import deep_merge


def map_reducer(state: Mapping[str, Any] | None, action: Any) -> Any:
    """
    Return the state that results from applying `action` to `state`.

    `action` is a `SetAction`/`MergeAction` or its wire mapping.
    """

    action = as_action(action, reducer="map")

    match action:
        case SetAction(payload=payload):
            return payload
        case MergeAction(payload=patch):
            return deep_merge(state, patch)
        case _:
            raise reject_unknown("map", getattr(action, "type", type(action).__name__))


# --- Module Notes -----------------------------------------------------------
# `set` hands back the caller's own payload object; it is not copied.

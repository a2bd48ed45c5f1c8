"""
state_reducers.reducers.actions

Action vocabulary shared by the map and list reducers.

Responsibilities:
- Define one immutable model per action variant, discriminated by `type`.
- Convert wire-shaped mappings (`{"type": "add", "payload": ...}`) into models.

Item payloads are typed `Any` so caller values pass through validation by
reference; only the structural fields (`index`, item sequences) are coerced.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from state_reducers.observability.logging import get_logger
from state_reducers.reducers.errors import UnknownActionError

log = get_logger(__name__)


class _ActionModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class SetAction(_ActionModel):
    type: Literal["set"] = "set"
    payload: Any


class MergeAction(_ActionModel):
    type: Literal["merge"] = "merge"
    payload: Any


class AddAction(_ActionModel):
    type: Literal["add"] = "add"
    payload: Any


class AddAllAction(_ActionModel):
    type: Literal["addAll"] = "addAll"
    payload: list[Any]


class InsertAction(_ActionModel):
    type: Literal["insert"] = "insert"
    index: int
    payload: Any


class InsertAllAction(_ActionModel):
    type: Literal["insertAll"] = "insertAll"
    index: int
    payload: list[Any]


class ReplacePayload(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    old_value: Any = Field(alias="oldValue")
    new_value: Any = Field(alias="newValue")


class ReplaceAction(_ActionModel):
    type: Literal["replace"] = "replace"
    payload: ReplacePayload


class ShiftAction(_ActionModel):
    type: Literal["shift"] = "shift"


class PopAction(_ActionModel):
    type: Literal["pop"] = "pop"


class RemoveAction(_ActionModel):
    type: Literal["remove"] = "remove"
    payload: Any


class RemoveAllAction(_ActionModel):
    type: Literal["removeAll"] = "removeAll"
    payload: list[Any]


class RemoveAtAction(_ActionModel):
    type: Literal["removeAt"] = "removeAt"
    index: Union[int, list[int]]


MapAction = Union[SetAction, MergeAction]

ListAction = Union[
    AddAction,
    AddAllAction,
    InsertAction,
    InsertAllAction,
    ReplaceAction,
    ShiftAction,
    PopAction,
    RemoveAction,
    RemoveAllAction,
    RemoveAtAction,
]

Action = Annotated[Union[MapAction, ListAction], Field(discriminator="type")]

_ACTION_ADAPTER: TypeAdapter[Any] = TypeAdapter(Action)

ACTION_TYPES: frozenset[str] = frozenset(
    model.model_fields["type"].default
    for model in (*get_args(MapAction), *get_args(ListAction))
)


def parse_action(data: Mapping[str, Any]) -> Any:
    """
    Build an action model from its wire form.

    Raises `UnknownActionError` when `type` is missing or not in the vocabulary;
    malformed payload shapes surface as `pydantic.ValidationError`.
    """

    action_type = data.get("type")
    if not isinstance(action_type, str) or action_type not in ACTION_TYPES:
        raise UnknownActionError()
    return _ACTION_ADAPTER.validate_python(dict(data))


def as_action(action: Any, *, reducer: str) -> Any:
    # Models pass through; anything else that is not a mapping is left for the
    # reducer's fallthrough to reject.
    if not isinstance(action, Mapping):
        return action
    try:
        return parse_action(action)
    except UnknownActionError:
        raise reject_unknown(reducer, action.get("type")) from None


def reject_unknown(reducer: str, action_type: Any) -> UnknownActionError:
    """
    Log the rejected action and return the error for the caller to raise.
    """

    log.warning("reducer.unknown_action", reducer=reducer, action_type=str(action_type))
    return UnknownActionError()


# --- Module Notes -----------------------------------------------------------
# Field names keep the wire spelling (`addAll`, `removeAt`) so a model and its
# `model_dump(by_alias=True)` round-trip through `parse_action` unchanged.

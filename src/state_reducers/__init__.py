"""
state_reducers

Pure state-transition functions for map-like and list-like state.

Responsibilities:
- Expose package version metadata.
- Re-export the reducers, action vocabulary and error types.
"""

from state_reducers.observability.logging import configure_logging, get_logger
from state_reducers.reducers.actions import (
    Action,
    AddAction,
    AddAllAction,
    InsertAction,
    InsertAllAction,
    ListAction,
    MapAction,
    MergeAction,
    PopAction,
    RemoveAction,
    RemoveAllAction,
    RemoveAtAction,
    ReplaceAction,
    ReplacePayload,
    SetAction,
    ShiftAction,
    parse_action,
)
from state_reducers.reducers.errors import ReducerError, UnknownActionError
from state_reducers.reducers.list_reducer import list_reducer
from state_reducers.reducers.map_reducer import map_reducer
from state_reducers.reducers.merge import deep_merge
from state_reducers.reducers.state import ListState, MergePatch
from state_reducers.settings import Settings, get_settings

__all__ = [
    "__version__",
    "Action",
    "AddAction",
    "AddAllAction",
    "InsertAction",
    "InsertAllAction",
    "ListAction",
    "ListState",
    "MapAction",
    "MergeAction",
    "MergePatch",
    "PopAction",
    "ReducerError",
    "RemoveAction",
    "RemoveAllAction",
    "RemoveAtAction",
    "ReplaceAction",
    "ReplacePayload",
    "SetAction",
    "Settings",
    "ShiftAction",
    "UnknownActionError",
    "configure_logging",
    "deep_merge",
    "get_logger",
    "get_settings",
    "list_reducer",
    "map_reducer",
    "parse_action",
]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Importing the package has no side effects; logging is configured only when
# the caller asks for it.

"""
state_reducers.reducers.state

Typed state shapes understood by the reducers.

Responsibilities:
- Describe the default list-shaped state (`ListState`).
- Name the payload shape of a `merge` action (`MergePatch`).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypedDict

# Functional syntax because the field is literally called "list".
ListState = TypedDict("ListState", {"list": list[Any]}, total=False)

# Partially populated mapping; nested mappings merge, sequences replace wholesale.
MergePatch = Mapping[str, Any]


# --- Module Notes -----------------------------------------------------------
# Callers usually extend ListState with their own fields; any extra keys are
# carried through every list action untouched.

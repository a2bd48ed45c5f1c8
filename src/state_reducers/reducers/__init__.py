"""
state_reducers.reducers

Reducer package (action vocabulary, deep merge, map/list reducers).

Responsibilities:
- Compute `next_state = reducer(state, action)` without mutating inputs.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Callers should import from `state_reducers`; submodule paths are not a stable surface.

"""
state_reducers.reducers.errors

Exceptions raised by the reducers.

Responsibilities:
- Signal an action whose `type` discriminant is not part of the vocabulary.
"""

from __future__ import annotations


class ReducerError(Exception):
    """
    Base class for every error raised by this package.
    """


class UnknownActionError(ReducerError):
    """
    Raised for an action the reducer does not recognise.

    Carries no payload: the offending action is not echoed back.
    """


# --- Module Notes -----------------------------------------------------------
# Every recognised action is total over well-typed inputs, so this is the only
# failure a reducer call can produce.

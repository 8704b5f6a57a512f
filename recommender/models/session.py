"""
Session models — the states a recommendation session moves through and its outcome.
"""

from enum import Enum

from pydantic import BaseModel

from .preferences import PreferenceQuery


class SessionState(str, Enum):
    """States of the recommendation loop."""

    AWAITING_PREFERENCES = "awaiting_preferences"
    PREDICT_AND_CHECK = "predict_and_check"
    PRESENTING = "presenting"
    TERMINAL = "terminal"


class SessionResult(BaseModel):
    """Outcome of a session that ended with an accepted recommendation."""

    device_name: str
    query: PreferenceQuery
    predict_calls: int

"""Data models for the smartphone recommender."""

from .config import DEFAULT_CONFIG, RecommenderConfig, resolve_config
from .preferences import OperatingSystem, PreferenceKey, PreferenceQuery, normalize_os_name
from .session import SessionResult, SessionState
from .smartphone import Smartphone

__all__ = [
    "DEFAULT_CONFIG",
    "OperatingSystem",
    "PreferenceKey",
    "PreferenceQuery",
    "RecommenderConfig",
    "SessionResult",
    "SessionState",
    "Smartphone",
    "normalize_os_name",
    "resolve_config",
]

"""
Smartphone Recommender

Single entry point for the recommender package:
- models/: Smartphone, PreferenceQuery, PreferenceKey, RecommenderConfig
- services/: catalog loader, classifier, history, preference input, line I/O
- session: RecommendationSession (the interactive loop)
"""

from .errors import (
    ClassifierError,
    ConfigError,
    EndOfInputError,
    InputValidationError,
    LoadError,
    RecommenderError,
)
from .models import (
    DEFAULT_CONFIG,
    OperatingSystem,
    PreferenceKey,
    PreferenceQuery,
    RecommenderConfig,
    SessionResult,
    SessionState,
    Smartphone,
)
from .services import (
    BoostedTreeClassifier,
    CatalogLoader,
    Classifier,
    ConsoleIO,
    LineIO,
    PreferenceInputReader,
    RecommendationHistory,
    ScriptedIO,
)
from .session import RecommendationSession

__all__ = [
    "DEFAULT_CONFIG",
    "BoostedTreeClassifier",
    "CatalogLoader",
    "Classifier",
    "ClassifierError",
    "ConfigError",
    "ConsoleIO",
    "EndOfInputError",
    "InputValidationError",
    "LineIO",
    "LoadError",
    "OperatingSystem",
    "PreferenceInputReader",
    "PreferenceKey",
    "PreferenceQuery",
    "RecommendationHistory",
    "RecommendationSession",
    "RecommenderConfig",
    "RecommenderError",
    "SessionResult",
    "SessionState",
    "Smartphone",
]

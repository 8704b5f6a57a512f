"""Backing logic: catalog loader, classifier, history, and line-oriented input."""

from .catalog_loader import CatalogLoader, parse_catalog, parse_charging_time
from .classifier import BoostedTreeClassifier, Classifier, FeatureEncoder
from .history import RecommendationHistory
from .line_io import ConsoleIO, LineIO, ScriptedIO
from .preference_input import (
    PreferenceInputReader,
    parse_charging_time_preference,
    parse_operating_system,
)

__all__ = [
    "BoostedTreeClassifier",
    "CatalogLoader",
    "Classifier",
    "ConsoleIO",
    "FeatureEncoder",
    "LineIO",
    "PreferenceInputReader",
    "RecommendationHistory",
    "ScriptedIO",
    "parse_catalog",
    "parse_charging_time",
    "parse_charging_time_preference",
    "parse_operating_system",
]

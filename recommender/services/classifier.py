"""
Classifier — predicts the best-matching device name for a preference query.

Features are [charging time in minutes, one-hot(operating system)]; the label is
the device name. BoostedTreeClassifier fits scikit-learn's gradient boosted trees
once over the whole catalog. The session only depends on the Classifier protocol,
so tests substitute deterministic stubs.
"""

import logging
from typing import List, Optional, Protocol, Sequence

import numpy as np
from sklearn.ensemble import GradientBoostingClassifier

from ..errors import ClassifierError
from ..models.config import RecommenderConfig, resolve_config
from ..models.preferences import PreferenceQuery, normalize_os_name
from ..models.smartphone import Smartphone

logger = logging.getLogger(__name__)


class Classifier(Protocol):
    """Protocol for a trained device-name classifier."""

    def predict(self, query: PreferenceQuery) -> str:
        """Return the top predicted device name for query."""
        ...


class FeatureEncoder:
    """
    Encodes (charging time, OS) as a numeric feature vector.

    The OS vocabulary is learned from the catalog (upper-cased, sorted). An OS
    outside the vocabulary encodes as all zeros in the one-hot block.
    """

    def __init__(self, categories: Sequence[str]):
        self.categories: List[str] = list(categories)
        self._index = {name: i for i, name in enumerate(self.categories)}

    @classmethod
    def fit(cls, catalog: Sequence[Smartphone]) -> "FeatureEncoder":
        return cls(sorted({normalize_os_name(phone.operating_system) for phone in catalog}))

    @property
    def width(self) -> int:
        return 1 + len(self.categories)

    def encode(self, charging_time_minutes: float, operating_system: str) -> np.ndarray:
        features = np.zeros(self.width, dtype=float)
        features[0] = charging_time_minutes
        position = self._index.get(normalize_os_name(operating_system))
        if position is not None:
            features[1 + position] = 1.0
        return features

    def encode_catalog(self, catalog: Sequence[Smartphone]) -> np.ndarray:
        return np.vstack(
            [self.encode(phone.charging_time_minutes, phone.operating_system) for phone in catalog]
        )

    def encode_query(self, query: PreferenceQuery) -> np.ndarray:
        return self.encode(query.max_charging_time_minutes, query.operating_system.value).reshape(1, -1)


class BoostedTreeClassifier:
    """Gradient boosted trees over the catalog, label = device name."""

    def __init__(self, encoder: FeatureEncoder, estimator: GradientBoostingClassifier):
        self.encoder = encoder
        self.estimator = estimator

    @classmethod
    def train(
        cls,
        catalog: Sequence[Smartphone],
        config: Optional[RecommenderConfig] = None,
    ) -> "BoostedTreeClassifier":
        """
        Fit the classifier on the full catalog.

        Raises:
            ClassifierError: If the catalog is empty, has fewer than two distinct
                device names, or the estimator fails to fit
        """
        config = resolve_config(config)
        if not catalog:
            raise ClassifierError("Cannot train on an empty catalog")
        labels = np.array([phone.device_name for phone in catalog], dtype=object)
        if len(set(labels)) < 2:
            raise ClassifierError("Catalog must contain at least two distinct device names")

        encoder = FeatureEncoder.fit(catalog)
        features = encoder.encode_catalog(catalog)
        estimator = GradientBoostingClassifier(
            n_estimators=config.n_estimators,
            learning_rate=config.learning_rate,
            max_depth=config.max_depth,
            random_state=config.random_state,
        )
        try:
            estimator.fit(features, labels)
        except Exception as e:
            raise ClassifierError(f"Classifier training failed: {e}") from e

        logger.info(
            "Trained classifier on %d smartphones, %d device names, OS vocabulary %s",
            len(catalog), len(estimator.classes_), encoder.categories,
        )
        return cls(encoder, estimator)

    @property
    def labels(self) -> List[str]:
        """Device names the classifier can predict."""
        return [str(label) for label in self.estimator.classes_]

    def predict(self, query: PreferenceQuery) -> str:
        try:
            predicted = self.estimator.predict(self.encoder.encode_query(query))
        except Exception as e:
            raise ClassifierError(f"Prediction failed for {query.key}: {e}") from e
        device_name = str(predicted[0])
        logger.debug("Predicted %r for %s", device_name, query.key)
        return device_name
